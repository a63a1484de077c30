from pydantic import Field
from typing import Optional, Tuple

from admission_scoring.models.base import RecordBase
from admission_scoring.models.enumerations import PublicationCategory, PublicationKind


_CATEGORY_KINDS = {
    PublicationCategory.A.value: PublicationKind.CATEGORY_A,
    PublicationCategory.B.value: PublicationKind.CATEGORY_B,
    PublicationCategory.C.value: PublicationKind.CATEGORY_C,
}


class PublicationRecord(RecordBase):
    """
    A published paper.

    The flags and the A/B/C category overlap on the form; ``kind`` resolves
    them to a single PublicationKind.
    """

    title: Optional[str] = Field(
        default=None,
        description="Paper title; untitled entries are ignored"
    )

    category: Optional[str] = Field(
        default=None,
        description="Journal/conference category: A, B or C"
    )

    journal: Optional[str] = Field(
        default=None,
        description="Journal or conference name"
    )

    author_rank: int = Field(
        default=0,
        ge=0,
        description="Candidate's position in the author list (1-based)"
    )

    total_authors: int = Field(
        default=1,
        ge=0,
        description="Number of authors"
    )

    is_independent: bool = False
    is_top_journal: bool = False
    is_high_level_chinese: bool = False
    is_info_comm: bool = False
    is_co_first: bool = False

    @property
    def kind(self) -> PublicationKind:
        if self.is_top_journal:
            return PublicationKind.TOP_JOURNAL
        if self.is_high_level_chinese:
            return PublicationKind.HIGH_LEVEL_CHINESE
        if self.is_info_comm:
            return PublicationKind.INFO_COMM
        return _CATEGORY_KINDS.get(self.category, PublicationKind.UNCLASSIFIED)


class PatentRecord(RecordBase):
    """An invention patent."""

    author_rank: int = Field(default=0, ge=0)
    total_authors: Optional[int] = Field(default=None, ge=0)


class CompetitionRecord(RecordBase):
    """
    A competition award.

    Entries sharing a ``work_key`` describe the same work submitted under
    several headings; only the best of them is scored.
    """

    name: str = Field(
        default="",
        description="Competition name as listed in the catalog"
    )

    level: Optional[str] = Field(
        default=None,
        description="Competition class: A+类, A类 or A-类"
    )

    award: Optional[str] = Field(
        default=None,
        description="Award tier, e.g. 国家级二等奖"
    )

    is_team: bool = False

    team_rank: Optional[int] = Field(
        default=None,
        ge=0,
        description="Candidate's rank within the team (1-based)"
    )

    total_team_members: Optional[int] = Field(default=None, ge=0)

    is_personal_project: bool = False

    is_external: bool = Field(
        default=False,
        description="Organised outside the school's recognised list"
    )

    work_key: Optional[str] = Field(
        default=None,
        description="Groups entries describing the same underlying work"
    )


class InnovationProjectRecord(RecordBase):
    """An innovation and entrepreneurship training project."""

    level: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None


class AcademicInputs(RecordBase):
    """Everything the academic achievement scorer reads."""

    publications: Tuple[PublicationRecord, ...] = ()
    patents: Tuple[PatentRecord, ...] = ()
    competitions: Tuple[CompetitionRecord, ...] = ()
    innovation: Tuple[InnovationProjectRecord, ...] = ()

    special_talent_passed: bool = Field(
        default=False,
        description="Special talent exemption; forces the full academic score"
    )

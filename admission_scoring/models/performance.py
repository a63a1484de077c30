from pydantic import Field
from typing import Optional, Tuple

from admission_scoring.models.base import RecordBase
from admission_scoring.models.enumerations import InternshipDuration, VolunteerSegmentType


class InternshipRecord(RecordBase):
    """Placement at an international organization."""

    duration: str = Field(
        default=InternshipDuration.NONE.value,
        description="YEAR, SEMESTER or NONE"
    )


class MilitaryServiceRecord(RecordBase):
    years: float = Field(
        default=0,
        ge=0,
        description="Full years of service"
    )


class VolunteerSegment(RecordBase):
    hours: float = Field(default=0, ge=0)
    type: str = Field(
        default=VolunteerSegmentType.NORMAL.value,
        description="normal hours count in full, other types at half weight"
    )


class VolunteerAward(RecordBase):
    level: Optional[str] = None
    role: Optional[str] = None


class VolunteerInfo(RecordBase):
    """
    Volunteer service.

    When ``segments`` is non-empty it replaces ``hours`` as the source of
    service time.
    """

    hours: Optional[float] = Field(default=None, ge=0)
    segments: Tuple[VolunteerSegment, ...] = ()
    awards: Tuple[VolunteerAward, ...] = ()


class HonorRecord(RecordBase):
    level: Optional[str] = None
    year: int = Field(..., description="Academic year the honor was granted")
    is_collective: bool = False


class SocialWorkRecord(RecordBase):
    year: int = Field(..., description="Academic year of the role")
    level: Optional[str] = Field(
        default=None,
        description="EXEC, PRESIDIUM, HEAD, DEPUTY or MEMBER"
    )
    rating: float = Field(
        default=0,
        ge=0,
        le=100,
        description="Appraisal rating (0-100)"
    )


class SportRecord(RecordBase):
    scope: Optional[str] = None
    result: Optional[str] = None
    is_team: bool = False
    team_size: Optional[int] = Field(default=None, ge=0)


class PerformanceInputs(RecordBase):
    """Everything the comprehensive performance scorer reads."""

    internship: Optional[InternshipRecord] = None
    military: Optional[MilitaryServiceRecord] = None
    volunteer: VolunteerInfo = Field(default_factory=VolunteerInfo)
    honors: Tuple[HonorRecord, ...] = ()
    social_work: Tuple[SocialWorkRecord, ...] = ()
    sports: Tuple[SportRecord, ...] = ()

"""
Ordinance Rule Tables
admission_scoring/scoring/rules.py

Static lookup data shared by the academic and performance scorers: award
values, attribution ratios, divisors and caps.

Each admission cycle's ordinance is an immutable ``Ordinance`` registered
under its version label. Tables are MappingProxyType views, so any attempt
to mutate them at runtime raises TypeError.

Competition base values (points before team division):

    Level  | Nat. 1st+ | Nat. 2nd | Nat. 3rd | Prov. 1st+ | Prov. 2nd
    -------+-----------+----------+----------+------------+----------
    A+类   |    30     |    15    |    10    |     5      |    2
    A类    |    15     |    10    |     5    |     2      |    1
    A-类   |    10     |     5    |     2    |     1      |   0.5
"""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from admission_scoring.core.exceptions import OrdinanceNotFoundException
from admission_scoring.models.enumerations import (
    AwardLevel,
    CompetitionAward,
    CompetitionLevel,
    InnovationRole,
    InnovationStatus,
    InternshipDuration,
    PublicationKind,
    SocialWorkLevel,
    SportResult,
    SportScope,
    VolunteerRole,
    VolunteerSegmentType,
)

D = Decimal


def _freeze(table):
    """Recursively wrap dicts in read-only mappings."""
    if isinstance(table, dict):
        return MappingProxyType({k: _freeze(v) for k, v in table.items()})
    return table


@dataclass(frozen=True)
class Ordinance:
    """One version of the scoring ordinance."""
    version: str

    # -- Academic achievement ------------------------------------------------
    academic_cap: Decimal
    publication_base: Mapping[PublicationKind, Decimal]
    c_category_limit: int                     # C papers counted per candidate
    sole_author_ratio: Decimal
    co_first_ratio: Decimal
    first_author_ratio: Decimal
    second_author_ratio: Decimal
    patent_base: Decimal
    patent_shared_ratio: Decimal              # first inventor among several
    competition_base: Mapping[str, Mapping[str, Decimal]]
    individual_divisor: Decimal
    large_team_divisor: Decimal
    small_team_max_size: int                  # teams of 3..N divide by size
    large_team_max_rank: int                  # ranks beyond this score 0
    special_team_competitions: Tuple[str, ...]
    special_team_rank_divisors: Mapping[int, Decimal]
    competition_max_selected: int
    competition_max_external: int
    innovation_values: Mapping[str, Mapping[str, Decimal]]
    innovation_completed_status: str
    innovation_cap: Decimal

    # -- Comprehensive performance -------------------------------------------
    performance_cap: Decimal
    internship_values: Mapping[str, Decimal]
    military_thresholds: Tuple[Tuple[Decimal, Decimal], ...]   # (min years, score), descending
    volunteer_full_weight_type: str
    volunteer_reduced_weight: Decimal
    volunteer_hours_threshold: Decimal
    volunteer_hours_step: Decimal
    volunteer_points_per_step: Decimal
    volunteer_hours_cap: Decimal
    volunteer_award_values: Mapping[str, Mapping[str, Decimal]]
    volunteer_award_cap: Decimal
    volunteer_cap: Decimal
    honor_values: Mapping[str, Decimal]
    honor_collective_factor: Decimal
    honors_cap: Decimal
    social_work_coefficients: Mapping[str, Decimal]
    social_work_rating_scale: Decimal
    social_work_cap: Decimal
    sport_values: Mapping[str, Mapping[str, Decimal]]
    sport_individual_divisor: Decimal

    # -- Composite -------------------------------------------------------------
    academic_base_max: Decimal
    composite_max: Decimal

    def competition_base_value(self, level: Optional[str], award: Optional[str]) -> Optional[Decimal]:
        """Base points for a level/award pair; None when the level is unknown."""
        awards = self.competition_base.get(level)
        if awards is None:
            return None
        return awards.get(award, D("0"))

    def is_special_team_competition(self, name: Optional[str]) -> bool:
        return bool(name) and any(n in name for n in self.special_team_competitions)


# ---------------------------------------------------------------------------
# 2025 ordinance
# ---------------------------------------------------------------------------

_NAT1 = CompetitionAward.NATIONAL_FIRST_OR_ABOVE.value
_NAT2 = CompetitionAward.NATIONAL_SECOND.value
_NAT3 = CompetitionAward.NATIONAL_THIRD.value
_PROV1 = CompetitionAward.PROVINCIAL_FIRST_OR_ABOVE.value
_PROV2 = CompetitionAward.PROVINCIAL_SECOND.value

_NATIONAL = AwardLevel.NATIONAL.value
_PROVINCIAL = AwardLevel.PROVINCIAL.value
_SCHOOL = AwardLevel.SCHOOL.value

ORDINANCE_2025 = Ordinance(
    version="2025",

    academic_cap=D("15"),
    publication_base=_freeze({
        PublicationKind.TOP_JOURNAL: D("20"),
        PublicationKind.HIGH_LEVEL_CHINESE: D("6"),
        PublicationKind.INFO_COMM: D("10"),
        PublicationKind.CATEGORY_A: D("10"),
        PublicationKind.CATEGORY_B: D("6"),
        PublicationKind.CATEGORY_C: D("1"),
        PublicationKind.UNCLASSIFIED: D("0"),
    }),
    c_category_limit=2,
    sole_author_ratio=D("1"),
    co_first_ratio=D("0.5"),
    first_author_ratio=D("0.8"),
    second_author_ratio=D("0.2"),
    patent_base=D("2"),
    patent_shared_ratio=D("0.8"),
    competition_base=_freeze({
        CompetitionLevel.A_PLUS.value: {
            _NAT1: D("30"), _NAT2: D("15"), _NAT3: D("10"), _PROV1: D("5"), _PROV2: D("2"),
        },
        CompetitionLevel.A.value: {
            _NAT1: D("15"), _NAT2: D("10"), _NAT3: D("5"), _PROV1: D("2"), _PROV2: D("1"),
        },
        CompetitionLevel.A_MINUS.value: {
            _NAT1: D("10"), _NAT2: D("5"), _NAT3: D("2"), _PROV1: D("1"), _PROV2: D("0.5"),
        },
    }),
    individual_divisor=D("3"),
    large_team_divisor=D("5"),
    small_team_max_size=5,
    large_team_max_rank=5,
    special_team_competitions=("中国国际大学生创新大赛", "挑战杯"),
    special_team_rank_divisors=_freeze({
        1: D("3"),
        2: D("4"), 3: D("4"),
        4: D("5"), 5: D("5"),
    }),
    competition_max_selected=3,
    competition_max_external=1,
    innovation_values=_freeze({
        _NATIONAL: {InnovationRole.LEAD.value: D("1"), InnovationRole.MEMBER.value: D("0.3")},
        _PROVINCIAL: {InnovationRole.LEAD.value: D("0.5"), InnovationRole.MEMBER.value: D("0.2")},
        _SCHOOL: {InnovationRole.LEAD.value: D("0.1"), InnovationRole.MEMBER.value: D("0.05")},
    }),
    innovation_completed_status=InnovationStatus.COMPLETED.value,
    innovation_cap=D("2"),

    performance_cap=D("5"),
    internship_values=_freeze({
        InternshipDuration.YEAR.value: D("1"),
        InternshipDuration.SEMESTER.value: D("0.5"),
        InternshipDuration.NONE.value: D("0"),
    }),
    military_thresholds=((D("2"), D("2")), (D("1"), D("1"))),
    volunteer_full_weight_type=VolunteerSegmentType.NORMAL.value,
    volunteer_reduced_weight=D("0.5"),
    volunteer_hours_threshold=D("200"),
    volunteer_hours_step=D("2"),
    volunteer_points_per_step=D("0.05"),
    volunteer_hours_cap=D("1"),
    volunteer_award_values=_freeze({
        VolunteerRole.TEAM_LEADER.value: {_NATIONAL: D("1"), _PROVINCIAL: D("0.5"), _SCHOOL: D("0.25")},
        VolunteerRole.PERSONAL.value: {_NATIONAL: D("1"), _PROVINCIAL: D("0.5"), _SCHOOL: D("0.25")},
        VolunteerRole.TEAM_MEMBER.value: {_NATIONAL: D("0.5"), _PROVINCIAL: D("0.25"), _SCHOOL: D("0.1")},
    }),
    volunteer_award_cap=D("1"),
    volunteer_cap=D("2"),
    honor_values=_freeze({
        _NATIONAL: D("2"),
        _PROVINCIAL: D("1"),
        _SCHOOL: D("0.2"),
    }),
    honor_collective_factor=D("0.5"),
    honors_cap=D("2"),
    social_work_coefficients=_freeze({
        SocialWorkLevel.EXEC.value: D("2"),
        SocialWorkLevel.PRESIDIUM.value: D("1.5"),
        SocialWorkLevel.HEAD.value: D("1"),
        SocialWorkLevel.DEPUTY.value: D("0.75"),
        SocialWorkLevel.MEMBER.value: D("0.5"),
    }),
    social_work_rating_scale=D("100"),
    social_work_cap=D("2"),
    sport_values=_freeze({
        SportScope.INTERNATIONAL.value: {
            SportResult.CHAMPION.value: D("8"),
            SportResult.RUNNER_UP.value: D("6.5"),
            SportResult.THIRD.value: D("5"),
            SportResult.FOURTH_TO_EIGHTH.value: D("3.5"),
        },
        SportScope.NATIONAL.value: {
            SportResult.CHAMPION.value: D("5"),
            SportResult.RUNNER_UP.value: D("3.5"),
            SportResult.THIRD.value: D("2"),
            SportResult.FOURTH_TO_EIGHTH.value: D("1"),
        },
    }),
    sport_individual_divisor=D("3"),

    academic_base_max=D("80"),
    composite_max=D("100"),
)


ORDINANCES: Mapping[str, Ordinance] = MappingProxyType({
    ORDINANCE_2025.version: ORDINANCE_2025,
})


def get_ordinance(version: Optional[str] = None) -> Ordinance:
    """
    Look up a registered ordinance.

    Args:
        version: Version label. Defaults to Settings.ORDINANCE_VERSION.

    Raises:
        OrdinanceNotFoundException: if the version is not registered.
    """
    if version is None:
        from admission_scoring.config import get_settings
        version = get_settings().ORDINANCE_VERSION
    try:
        return ORDINANCES[version]
    except KeyError:
        raise OrdinanceNotFoundException(version) from None

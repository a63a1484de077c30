# tests/test_property_based.py
"""
Property-Based Tests

Hypothesis tests covering:
  - AcademicScorer bounds, exemption override and work_key dedup
  - PerformanceScorer bounds and per-year ordering
  - CompositeCalculator range
"""

from decimal import Decimal

from hypothesis import given, settings
from hypothesis import strategies as st

from admission_scoring.models.academic import (
    AcademicInputs,
    CompetitionRecord,
    InnovationProjectRecord,
    PatentRecord,
    PublicationRecord,
)
from admission_scoring.models.enumerations import (
    AwardLevel,
    CompetitionAward,
    CompetitionLevel,
    InnovationRole,
    InnovationStatus,
    InternshipDuration,
    PublicationCategory,
    SocialWorkLevel,
    SportResult,
    SportScope,
    VolunteerRole,
    VolunteerSegmentType,
)
from admission_scoring.models.performance import (
    HonorRecord,
    InternshipRecord,
    MilitaryServiceRecord,
    PerformanceInputs,
    SocialWorkRecord,
    SportRecord,
    VolunteerAward,
    VolunteerInfo,
    VolunteerSegment,
)
from admission_scoring.scoring.academic_scorer import AcademicScorer
from admission_scoring.scoring.composite_calculator import CompositeCalculator
from admission_scoring.scoring.performance_scorer import PerformanceScorer
from admission_scoring.scoring.rules import ORDINANCE_2025

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------


def labels(enum_cls, extra=("unknown",)):
    """Enum labels plus a few values the tables do not know."""
    return st.sampled_from([e.value for e in enum_cls] + list(extra)) | st.none()


small_int = st.integers(min_value=0, max_value=8)
optional_small_int = small_int | st.none()
years = st.integers(min_value=2019, max_value=2025)
hours = st.floats(min_value=0, max_value=1000, allow_nan=False, allow_infinity=False)

publication_st = st.builds(
    PublicationRecord,
    title=st.sampled_from(["Paper", ""]) | st.none(),
    category=labels(PublicationCategory),
    author_rank=small_int,
    total_authors=small_int,
    is_independent=st.booleans(),
    is_top_journal=st.booleans(),
    is_high_level_chinese=st.booleans(),
    is_info_comm=st.booleans(),
    is_co_first=st.booleans(),
)

patent_st = st.builds(PatentRecord, author_rank=small_int, total_authors=optional_small_int)

competition_st = st.builds(
    CompetitionRecord,
    name=st.sampled_from(["中国国际大学生创新大赛", "挑战杯", "ICPC国际大学生程序设计竞赛", ""]),
    level=labels(CompetitionLevel),
    award=labels(CompetitionAward),
    is_team=st.booleans(),
    team_rank=optional_small_int,
    total_team_members=optional_small_int,
    is_personal_project=st.booleans(),
    is_external=st.booleans(),
    work_key=st.sampled_from(["w1", "w2", "w3"]) | st.none(),
)

innovation_st = st.builds(
    InnovationProjectRecord,
    level=labels(AwardLevel),
    role=labels(InnovationRole),
    status=labels(InnovationStatus),
)

academic_inputs_st = st.builds(
    AcademicInputs,
    publications=st.lists(publication_st, max_size=8),
    patents=st.lists(patent_st, max_size=5),
    competitions=st.lists(competition_st, max_size=8),
    innovation=st.lists(innovation_st, max_size=6),
    special_talent_passed=st.booleans(),
)

volunteer_st = st.builds(
    VolunteerInfo,
    hours=hours | st.none(),
    segments=st.lists(
        st.builds(
            VolunteerSegment,
            hours=hours,
            type=st.sampled_from([t.value for t in VolunteerSegmentType] + ["unknown"]),
        ),
        max_size=4,
    ),
    awards=st.lists(
        st.builds(VolunteerAward, level=labels(AwardLevel), role=labels(VolunteerRole)),
        max_size=4,
    ),
)

honor_st = st.builds(HonorRecord, level=labels(AwardLevel), year=years, is_collective=st.booleans())

social_work_st = st.builds(
    SocialWorkRecord,
    year=years,
    level=labels(SocialWorkLevel),
    rating=st.floats(min_value=0, max_value=100, allow_nan=False),
)

sport_st = st.builds(
    SportRecord,
    scope=labels(SportScope),
    result=labels(SportResult),
    is_team=st.booleans(),
    team_size=optional_small_int,
)

performance_inputs_st = st.builds(
    PerformanceInputs,
    internship=st.builds(InternshipRecord, duration=st.sampled_from([d.value for d in InternshipDuration])) | st.none(),
    military=st.builds(MilitaryServiceRecord, years=st.floats(min_value=0, max_value=10, allow_nan=False)) | st.none(),
    volunteer=volunteer_st,
    honors=st.lists(honor_st, max_size=6),
    social_work=st.lists(social_work_st, max_size=6),
    sports=st.lists(sport_st, max_size=4),
)


# ---------------------------------------------------------------------------
# Academic Property Tests
# ---------------------------------------------------------------------------


class TestAcademicPropertyBased:

    @given(academic_inputs_st)
    @settings(max_examples=300)
    def test_capped_always_bounded(self, inputs):
        """Capped academic score is always in [0, 15] and never exceeds total."""
        result = AcademicScorer(ORDINANCE_2025).calculate(inputs)
        assert Decimal("0") <= result.capped <= Decimal("15")
        assert result.capped <= result.total
        assert Decimal("0") <= result.innovation <= Decimal("2")

    @given(academic_inputs_st)
    @settings(max_examples=200)
    def test_special_talent_overrides(self, inputs):
        """The special talent exemption always yields the full academic score."""
        exempt = inputs.model_copy(update={"special_talent_passed": True})
        result = AcademicScorer(ORDINANCE_2025).calculate(exempt)
        assert result.total == Decimal("15")
        assert result.capped == Decimal("15")

    @given(academic_inputs_st)
    @settings(max_examples=200)
    def test_scoring_is_deterministic(self, inputs):
        scorer = AcademicScorer(ORDINANCE_2025)
        assert scorer.calculate(inputs) == scorer.calculate(inputs)

    @given(st.lists(competition_st, max_size=8), st.integers(min_value=0, max_value=7))
    @settings(max_examples=300)
    def test_duplicate_keyed_entry_does_not_change_score(self, competitions, index):
        """Re-submitting an entry under its own work_key never changes the result."""
        keyed = [c for c in competitions if c.work_key]
        if not keyed:
            return
        duplicate = keyed[index % len(keyed)]
        scorer = AcademicScorer(ORDINANCE_2025)
        assert scorer.score_competitions(competitions + [duplicate]) == scorer.score_competitions(competitions)

    @given(st.lists(competition_st, max_size=10))
    @settings(max_examples=300)
    def test_selection_limits(self, competitions):
        """At most 3 competitions count, and at most 1 of them external."""
        selected = AcademicScorer(ORDINANCE_2025).select_competitions(competitions)
        assert len(selected) <= 3
        assert sum(1 for c in selected if c.record.is_external) <= 1
        values = [c.value for c in selected]
        assert values == sorted(values, reverse=True)


# ---------------------------------------------------------------------------
# Performance Property Tests
# ---------------------------------------------------------------------------


class TestPerformancePropertyBased:

    @given(performance_inputs_st)
    @settings(max_examples=300)
    def test_capped_always_bounded(self, inputs):
        """Capped performance score is in [0, 5]; capped sub-scores respect their ceilings."""
        result = PerformanceScorer(ORDINANCE_2025).calculate(inputs)
        assert Decimal("0") <= result.capped <= Decimal("5")
        assert result.capped <= result.total
        assert result.volunteer <= Decimal("2")
        assert result.honors <= Decimal("2")
        assert result.social_work <= Decimal("2")

    @given(st.lists(honor_st, max_size=8), st.randoms(use_true_random=False))
    @settings(max_examples=200)
    def test_honors_order_independent(self, honors, rng):
        shuffled = list(honors)
        rng.shuffle(shuffled)
        scorer = PerformanceScorer(ORDINANCE_2025)
        assert scorer.score_honors(shuffled) == scorer.score_honors(honors)

    @given(st.lists(social_work_st, max_size=8), st.randoms(use_true_random=False))
    @settings(max_examples=200)
    def test_social_work_order_independent(self, entries, rng):
        shuffled = list(entries)
        rng.shuffle(shuffled)
        scorer = PerformanceScorer(ORDINANCE_2025)
        assert scorer.score_social_work(shuffled) == scorer.score_social_work(entries)

    @given(st.lists(honor_st, min_size=1, max_size=8))
    @settings(max_examples=200)
    def test_one_honor_per_year(self, honors):
        """Each year contributes no more than its best single honor."""
        scorer = PerformanceScorer(ORDINANCE_2025)
        by_year = scorer.honors_by_year(honors)
        assert set(by_year) == {h.year for h in honors}
        for year, value in by_year.items():
            assert value == max(scorer.honor_value(h) for h in honors if h.year == year)


# ---------------------------------------------------------------------------
# Composite Property Tests
# ---------------------------------------------------------------------------


class TestCompositePropertyBased:

    @given(
        st.floats(min_value=0.0, max_value=80.0, allow_nan=False, allow_infinity=False),
        academic_inputs_st,
        performance_inputs_st,
    )
    @settings(max_examples=200)
    def test_composite_bounded(self, base, academic_inputs, performance_inputs):
        academic = AcademicScorer(ORDINANCE_2025).calculate(academic_inputs)
        performance = PerformanceScorer(ORDINANCE_2025).calculate(performance_inputs)
        result = CompositeCalculator(ORDINANCE_2025).calculate(base, academic, performance)
        assert Decimal("0") <= result.composite <= Decimal("100")

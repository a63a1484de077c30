"""
Comprehensive Performance Scorer
admission_scoring/scoring/performance_scorer.py

Scores internship, military service, volunteering, honors, social work and
sports.

Formula:
    total  = internship + military + volunteer + honors + social_work + sports
    capped = min(total, 5)

    volunteer   = min(2, hours_part + awards_part)
                  hours_part  = min(1, (effective_hours − 200) / 2 × 0.05), 0 below 200
                  awards_part = min(1, max award value)
    honors      = min(2, Σ_year max honor value)
    social_work = min(2, Σ_year max coefficient × rating / 100)
    sports      = Σ value / team_size (team) or value / 3 (individual)
"""

import structlog
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Dict, Iterable, Optional

from admission_scoring.models.performance import (
    HonorRecord,
    InternshipRecord,
    MilitaryServiceRecord,
    PerformanceInputs,
    SocialWorkRecord,
    SportRecord,
    VolunteerInfo,
)
from admission_scoring.scoring.rules import Ordinance, get_ordinance
from admission_scoring.scoring.utils import ZERO, as_decimal, best_per_key, quantize_score

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PerformanceScoreResult:
    """Output of PerformanceScorer.calculate()."""
    internship: Decimal
    military: Decimal
    volunteer: Decimal
    honors: Decimal
    social_work: Decimal
    sports: Decimal
    total: Decimal     # may exceed the performance ceiling
    capped: Decimal    # min(total, 5)

    def as_dict(self) -> Dict[str, float]:
        return {name: float(value) for name, value in asdict(self).items()}


class PerformanceScorer:
    """Calculate the comprehensive performance score under one ordinance."""

    def __init__(self, ordinance: Optional[Ordinance] = None):
        self.ordinance = ordinance or get_ordinance()

    def calculate(self, inputs: PerformanceInputs) -> PerformanceScoreResult:
        rules = self.ordinance

        internship = self.score_internship(inputs.internship)
        military = self.score_military(inputs.military)
        volunteer = self.score_volunteer(inputs.volunteer)
        honors = self.score_honors(inputs.honors)
        social_work = self.score_social_work(inputs.social_work)
        sports = self.score_sports(inputs.sports)

        total = internship + military + volunteer + honors + social_work + sports
        capped = min(total, rules.performance_cap)

        logger.info(
            "performance_scored",
            ordinance=rules.version,
            internship=float(internship),
            military=float(military),
            volunteer=float(volunteer),
            honors=float(honors),
            social_work=float(social_work),
            sports=float(sports),
            total=float(total),
            capped=float(capped),
        )

        return PerformanceScoreResult(
            internship=quantize_score(internship),
            military=quantize_score(military),
            volunteer=quantize_score(volunteer),
            honors=quantize_score(honors),
            social_work=quantize_score(social_work),
            sports=quantize_score(sports),
            total=quantize_score(total),
            capped=quantize_score(capped),
        )

    def score_internship(self, internship: Optional[InternshipRecord]) -> Decimal:
        if internship is None:
            return ZERO
        return self.ordinance.internship_values.get(internship.duration, ZERO)

    def score_military(self, military: Optional[MilitaryServiceRecord]) -> Decimal:
        if military is None:
            return ZERO
        years = as_decimal(military.years)
        for min_years, score in self.ordinance.military_thresholds:
            if years >= min_years:
                return score
        return ZERO

    # ------------------------------------------------------------------
    # Volunteering
    # ------------------------------------------------------------------

    def effective_volunteer_hours(self, volunteer: VolunteerInfo) -> Decimal:
        """Segmented hours override the flat total; non-normal segments count half."""
        rules = self.ordinance
        if not volunteer.segments:
            return as_decimal(volunteer.hours)
        return sum(
            (
                as_decimal(segment.hours)
                if segment.type == rules.volunteer_full_weight_type
                else as_decimal(segment.hours) * rules.volunteer_reduced_weight
                for segment in volunteer.segments
            ),
            ZERO,
        )

    def volunteer_hours_points(self, volunteer: VolunteerInfo) -> Decimal:
        rules = self.ordinance
        hours = self.effective_volunteer_hours(volunteer)
        if hours < rules.volunteer_hours_threshold:
            return ZERO
        points = (
            (hours - rules.volunteer_hours_threshold)
            / rules.volunteer_hours_step
            * rules.volunteer_points_per_step
        )
        return min(points, rules.volunteer_hours_cap)

    def volunteer_award_points(self, volunteer: VolunteerInfo) -> Decimal:
        rules = self.ordinance
        best = ZERO
        for award in volunteer.awards:
            by_level = rules.volunteer_award_values.get(award.role)
            if by_level is None:
                continue
            best = max(best, by_level.get(award.level, ZERO))
        return min(best, rules.volunteer_award_cap)

    def score_volunteer(self, volunteer: VolunteerInfo) -> Decimal:
        points = self.volunteer_hours_points(volunteer) + self.volunteer_award_points(volunteer)
        return min(points, self.ordinance.volunteer_cap)

    # ------------------------------------------------------------------
    # Honors and social work (one entry per year)
    # ------------------------------------------------------------------

    def honor_value(self, honor: HonorRecord) -> Decimal:
        rules = self.ordinance
        value = rules.honor_values.get(honor.level, ZERO)
        if honor.is_collective:
            value *= rules.honor_collective_factor
        return value

    def honors_by_year(self, honors: Iterable[HonorRecord]) -> Dict[int, Decimal]:
        return best_per_key(honors, key=lambda h: h.year, value=self.honor_value)

    def score_honors(self, honors: Iterable[HonorRecord]) -> Decimal:
        total = sum(self.honors_by_year(honors).values(), ZERO)
        return min(total, self.ordinance.honors_cap)

    def social_work_value(self, entry: SocialWorkRecord) -> Decimal:
        rules = self.ordinance
        coefficient = rules.social_work_coefficients.get(entry.level, ZERO)
        return coefficient * as_decimal(entry.rating) / rules.social_work_rating_scale

    def social_work_by_year(self, entries: Iterable[SocialWorkRecord]) -> Dict[int, Decimal]:
        return best_per_key(entries, key=lambda s: s.year, value=self.social_work_value)

    def score_social_work(self, entries: Iterable[SocialWorkRecord]) -> Decimal:
        total = sum(self.social_work_by_year(entries).values(), ZERO)
        return min(total, self.ordinance.social_work_cap)

    # ------------------------------------------------------------------
    # Sports
    # ------------------------------------------------------------------

    def sport_value(self, sport: SportRecord) -> Decimal:
        rules = self.ordinance
        base = rules.sport_values.get(sport.scope, {}).get(sport.result, ZERO)
        if sport.is_team:
            size = sport.team_size or 0
            return base / Decimal(size) if size > 0 else ZERO
        return base / rules.sport_individual_divisor

    def score_sports(self, sports: Iterable[SportRecord]) -> Decimal:
        return sum((self.sport_value(sport) for sport in sports), ZERO)


def score_performance(
    inputs: PerformanceInputs,
    ordinance: Optional[Ordinance] = None,
) -> PerformanceScoreResult:
    """Score comprehensive performance with the given (or configured) ordinance."""
    return PerformanceScorer(ordinance).calculate(inputs)

"""
scoring/integration_service.py

Full pipeline: submitted application payload → academic, performance and
composite scores.

Class: ApplicationScoringService
Method: score_application(payload) → ApplicationScore

Pipeline steps:
  1. Validate the payload shape
  2. Build immutable records, one at a time; invalid records are dropped
     and logged so they contribute zero
  3. Fill missing competition levels from the competition catalog
  4. AcademicScorer → capped 0-15
  5. PerformanceScorer → capped 0-5
  6. CompositeCalculator → 0-100 (only when an academic base is known)

Payload keys follow the application form (camelCase); snake_case keys are
accepted as well:

    {
      "publications": [...], "patents": [...], "competitions": [...],
      "innovation": [...], "specialTalentPassed": false,
      "internship": {...}, "military": {...}, "volunteer": {...},
      "honors": [...], "socialWork": [...], "sports": [...],
      "academicBase": 72.5
    }
"""

import structlog
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from admission_scoring.core.exceptions import InvalidPayloadException
from admission_scoring.models.academic import (
    AcademicInputs,
    CompetitionRecord,
    InnovationProjectRecord,
    PatentRecord,
    PublicationRecord,
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
from admission_scoring.scoring.academic_scorer import AcademicScorer, AcademicScoreResult
from admission_scoring.scoring.competition_catalog import CompetitionCatalog
from admission_scoring.scoring.composite_calculator import CompositeCalculator, CompositeResult
from admission_scoring.scoring.performance_scorer import PerformanceScorer, PerformanceScoreResult
from admission_scoring.scoring.rules import Ordinance, get_ordinance

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class ApplicationScore:
    """Scores for one application, with audit details."""
    academic: AcademicScoreResult
    performance: PerformanceScoreResult
    composite: Optional[CompositeResult]
    dropped_records: int
    ordinance_version: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "ordinance_version": self.ordinance_version,
            "academic": self.academic.as_dict(),
            "performance": self.performance.as_dict(),
            "composite": self.composite.as_dict() if self.composite else None,
            "dropped_records": self.dropped_records,
        }


class _DropTally:
    """Counts records rejected while building inputs."""

    def __init__(self):
        self.count = 0

    def drop(self, section: str, index: Optional[int], reason: str) -> None:
        self.count += 1
        logger.warning("record_dropped", section=section, index=index, reason=reason)


def _field(payload: Mapping[str, Any], camel: str, snake: Optional[str] = None, default=None):
    if camel in payload:
        return payload[camel]
    if snake and snake in payload:
        return payload[snake]
    return default


class ApplicationScoringService:
    """Score raw application payloads end to end."""

    def __init__(
        self,
        ordinance: Optional[Ordinance] = None,
        catalog: Optional[CompetitionCatalog] = None,
    ):
        self.ordinance = ordinance or get_ordinance()
        self.catalog = catalog or CompetitionCatalog.default()

        self.academic_scorer = AcademicScorer(self.ordinance)
        self.performance_scorer = PerformanceScorer(self.ordinance)
        self.composite_calculator = CompositeCalculator(self.ordinance)

    # ------------------------------------------------------------------
    # Main pipeline
    # ------------------------------------------------------------------

    def score_application(
        self,
        payload: Mapping[str, Any],
        academic_base=None,
    ) -> ApplicationScore:
        """
        Args:
            payload: Application form data (decoded JSON object).
            academic_base: Grade-based score in [0, 80]. Falls back to the
                payload's ``academicBase``; without either no composite is
                computed.

        Raises:
            InvalidPayloadException: if payload is not a mapping.
            ValueError: if the academic base is outside [0, 80].
        """
        self._check_payload(payload)
        tally = _DropTally()

        academic_inputs = self._build_academic(payload, tally)
        performance_inputs = self._build_performance(payload, tally)

        academic = self.academic_scorer.calculate(academic_inputs)
        performance = self.performance_scorer.calculate(performance_inputs)

        if academic_base is None:
            academic_base = _field(payload, "academicBase", "academic_base")
        composite = None
        if academic_base is not None:
            composite = self.composite_calculator.calculate(academic_base, academic, performance)

        logger.info(
            "application_scored",
            academic_capped=float(academic.capped),
            performance_capped=float(performance.capped),
            composite=float(composite.composite) if composite else None,
            dropped_records=tally.count,
        )

        return ApplicationScore(
            academic=academic,
            performance=performance,
            composite=composite,
            dropped_records=tally.count,
            ordinance_version=self.ordinance.version,
        )

    def score_batch(
        self,
        payloads: Iterable[Mapping[str, Any]],
        academic_base=None,
    ) -> List[ApplicationScore]:
        """Score several applications independently, preserving order."""
        return [self.score_application(payload, academic_base) for payload in payloads]

    def build_academic_inputs(self, payload: Mapping[str, Any]) -> AcademicInputs:
        self._check_payload(payload)
        return self._build_academic(payload, _DropTally())

    def build_performance_inputs(self, payload: Mapping[str, Any]) -> PerformanceInputs:
        self._check_payload(payload)
        return self._build_performance(payload, _DropTally())

    # ------------------------------------------------------------------
    # Record building
    # ------------------------------------------------------------------

    @staticmethod
    def _check_payload(payload) -> None:
        if not isinstance(payload, Mapping):
            raise InvalidPayloadException(
                f"Application payload must be a JSON object, got {type(payload).__name__}"
            )

    def _build_academic(self, payload: Mapping[str, Any], tally: _DropTally) -> AcademicInputs:
        competitions = [
            self._with_catalog_level(item)
            for item in self._as_list(_field(payload, "competitions"), "competitions", tally)
        ]
        return AcademicInputs(
            publications=self._parse_records(
                PublicationRecord, _field(payload, "publications"), "publications", tally
            ),
            patents=self._parse_records(PatentRecord, _field(payload, "patents"), "patents", tally),
            competitions=self._parse_records(CompetitionRecord, competitions, "competitions", tally),
            innovation=self._parse_records(
                InnovationProjectRecord, _field(payload, "innovation"), "innovation", tally
            ),
            special_talent_passed=bool(
                _field(payload, "specialTalentPassed", "special_talent_passed", False)
            ),
        )

    def _build_performance(self, payload: Mapping[str, Any], tally: _DropTally) -> PerformanceInputs:
        return PerformanceInputs(
            internship=self._parse_one(
                InternshipRecord, _field(payload, "internship"), "internship", tally
            ),
            military=self._parse_one(
                MilitaryServiceRecord, _field(payload, "military"), "military", tally
            ),
            volunteer=self._parse_volunteer(_field(payload, "volunteer"), tally),
            honors=self._parse_records(HonorRecord, _field(payload, "honors"), "honors", tally),
            social_work=self._parse_records(
                SocialWorkRecord, _field(payload, "socialWork", "social_work"), "socialWork", tally
            ),
            sports=self._parse_records(SportRecord, _field(payload, "sports"), "sports", tally),
        )

    def _with_catalog_level(self, item):
        """Fill a missing competition level from the catalog by exact name."""
        if not isinstance(item, Mapping) or item.get("level"):
            return item
        level = self.catalog.resolve_level(item.get("name"))
        if level is None:
            return item
        return {**item, "level": level}

    def _parse_volunteer(self, raw, tally: _DropTally) -> VolunteerInfo:
        if not raw:
            return VolunteerInfo()
        if not isinstance(raw, Mapping):
            tally.drop("volunteer", None, "not an object")
            return VolunteerInfo()
        flat = self._parse_one(VolunteerInfo, {"hours": raw.get("hours")}, "volunteer.hours", tally)
        return VolunteerInfo(
            hours=flat.hours if flat else None,
            segments=self._parse_records(
                VolunteerSegment, raw.get("segments"), "volunteer.segments", tally
            ),
            awards=self._parse_records(VolunteerAward, raw.get("awards"), "volunteer.awards", tally),
        )

    @staticmethod
    def _as_list(items, section: str, tally: _DropTally) -> list:
        if items is None:
            return []
        if not isinstance(items, (list, tuple)):
            tally.drop(section, None, "not a list")
            return []
        return list(items)

    def _parse_records(
        self,
        model: Type[M],
        items,
        section: str,
        tally: _DropTally,
    ) -> Tuple[M, ...]:
        records = []
        for index, item in enumerate(self._as_list(items, section, tally)):
            try:
                records.append(model.model_validate(item))
            except ValidationError as exc:
                tally.drop(section, index, f"{exc.error_count()} validation error(s)")
        return tuple(records)

    @staticmethod
    def _parse_one(model: Type[M], item, section: str, tally: _DropTally) -> Optional[M]:
        if item is None:
            return None
        try:
            return model.model_validate(item)
        except ValidationError as exc:
            tally.drop(section, None, f"{exc.error_count()} validation error(s)")
            return None

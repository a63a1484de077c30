"""
Composite Calculator
admission_scoring/scoring/composite_calculator.py

Combines the separately computed academic base score with the capped
academic achievement and performance scores.

Formula:
    Composite = academic_base + academic.capped + performance.capped

    academic_base ∈ [0, 80], academic.capped ∈ [0, 15],
    performance.capped ∈ [0, 5]  →  Composite ∈ [0, 100]
"""

import logging
from dataclasses import asdict, dataclass
from decimal import Decimal, InvalidOperation
from typing import Dict, Optional

from admission_scoring.scoring.academic_scorer import AcademicScoreResult
from admission_scoring.scoring.performance_scorer import PerformanceScoreResult
from admission_scoring.scoring.rules import Ordinance, get_ordinance
from admission_scoring.scoring.utils import as_decimal, clamp, quantize_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositeResult:
    """Output of CompositeCalculator.calculate()."""
    composite: Decimal             # [0, 100] quantized to 0.01
    academic_base: Decimal
    academic_capped: Decimal
    performance_capped: Decimal

    def as_dict(self) -> Dict[str, float]:
        return {name: float(value) for name, value in asdict(self).items()}


class CompositeCalculator:
    """Calculate the 0-100 admission composite."""

    def __init__(self, ordinance: Optional[Ordinance] = None):
        self.ordinance = ordinance or get_ordinance()

    def calculate(
        self,
        academic_base,
        academic: AcademicScoreResult,
        performance: PerformanceScoreResult,
    ) -> CompositeResult:
        """
        Args:
            academic_base: Grade-based academic score in [0, 80].
            academic: Result of the academic achievement scorer.
            performance: Result of the performance scorer.

        Raises:
            ValueError: if academic_base is not a number or is outside [0, 80].
        """
        message = f"academic_base must be in [0, {self.ordinance.academic_base_max}], got {academic_base!r}"
        try:
            base = as_decimal(academic_base)
        except (InvalidOperation, TypeError, ValueError):
            raise ValueError(message) from None
        if not base.is_finite() or not Decimal("0") <= base <= self.ordinance.academic_base_max:
            raise ValueError(message)

        composite = clamp(
            quantize_score(base + academic.capped + performance.capped, places=2),
            Decimal("0"),
            self.ordinance.composite_max,
        )

        logger.info(
            "composite_calculated",
            extra={
                "academic_base": float(base),
                "academic_capped": float(academic.capped),
                "performance_capped": float(performance.capped),
                "composite": float(composite),
            },
        )

        return CompositeResult(
            composite=composite,
            academic_base=base,
            academic_capped=academic.capped,
            performance_capped=performance.capped,
        )

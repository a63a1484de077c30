"""
scoring/ - Admission Eligibility Scoring Engine

Modules:
    utils.py                  - Decimal and grouping utilities
    rules.py                  - Versioned ordinance rule tables
    academic_scorer.py        - Academic Achievement Scorer (capped 0-15)
    performance_scorer.py     - Comprehensive Performance Scorer (capped 0-5)
    composite_calculator.py   - Composite Calculator (0-100)
    competition_catalog.py    - Recognised competitions and their classes
    integration_service.py    - Payload → scores pipeline
"""

from admission_scoring.scoring.academic_scorer import (
    AcademicScorer,
    AcademicScoreResult,
    score_academic,
)
from admission_scoring.scoring.performance_scorer import (
    PerformanceScorer,
    PerformanceScoreResult,
    score_performance,
)

__all__ = [
    "AcademicScorer",
    "AcademicScoreResult",
    "PerformanceScorer",
    "PerformanceScoreResult",
    "score_academic",
    "score_performance",
]

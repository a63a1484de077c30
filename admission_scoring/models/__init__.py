"""
Models Package - Admission Scoring
admission_scoring/models/__init__.py

Immutable achievement records consumed by the scorers.
"""

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

__all__ = [
    # Academic
    "AcademicInputs",
    "CompetitionRecord",
    "InnovationProjectRecord",
    "PatentRecord",
    "PublicationRecord",
    # Performance
    "HonorRecord",
    "InternshipRecord",
    "MilitaryServiceRecord",
    "PerformanceInputs",
    "SocialWorkRecord",
    "SportRecord",
    "VolunteerAward",
    "VolunteerInfo",
    "VolunteerSegment",
]

"""
Core Package - Admission Scoring
admission_scoring/core/__init__.py

Core infrastructure: logging, exceptions.
"""

from admission_scoring.core.exceptions import (
    InvalidPayloadException,
    OrdinanceNotFoundException,
    ScoringException,
)
from admission_scoring.core.logging import configure_logging

__all__ = [
    # Logging
    "configure_logging",
    # Exceptions
    "InvalidPayloadException",
    "OrdinanceNotFoundException",
    "ScoringException",
]

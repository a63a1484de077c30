"""
Custom Exceptions - Admission Scoring
admission_scoring/core/exceptions.py

Raised by the layers around the scorers. The scorers themselves never raise.
"""


class ScoringException(Exception):
    """Base exception for scoring operations."""

    pass


class OrdinanceNotFoundException(ScoringException):
    """No rule tables registered under the requested version."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Ordinance version {version!r} is not registered")


class InvalidPayloadException(ScoringException):
    """Application payload has the wrong top-level shape."""

    def __init__(self, message: str = "Application payload must be a JSON object"):
        self.message = message
        super().__init__(message)

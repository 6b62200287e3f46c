"""
Risk Matrix Errors - shallow taxonomy surfaced to the calling UI.
"""

from __future__ import annotations


class RiskMatrixError(Exception):
    """Base class for all errors raised by the scoring core."""


class ValidationError(RiskMatrixError):
    """Input rejected before anything was stored or appended.

    Raised for an empty explanation, a factor without categories, a rating
    outside 1..5, or a save without a matter name.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(RiskMatrixError):
    """No stored assessment exists under the requested matter name."""

    def __init__(self, matter_name: str) -> None:
        super().__init__(f"No saved assessment found for matter '{matter_name}'")
        self.matter_name = matter_name


class MalformedDataError(RiskMatrixError):
    """Stored data could not be parsed into an assessment."""

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw

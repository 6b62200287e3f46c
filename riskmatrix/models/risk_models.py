"""
Risk Scoring Data Models - Breakdown structure for explainable risk scores.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class HighlightCoordinates(BaseModel):
    """Matrix cell that represents the current composite score."""

    likelihood: int = Field(..., ge=1, le=5)
    severity: int = Field(..., ge=1, le=5)


class AxisScore(BaseModel):
    """Aggregate of one axis and the ratings it was built from."""

    axis: str
    ratings: list[int] = Field(default_factory=list)
    value: float = Field(..., description="Aggregated axis value, unrounded")


class RiskBreakdown(BaseModel):
    """Full explainable breakdown of a composite risk score."""

    likelihood: AxisScore
    severity: AxisScore
    composite_score: float = Field(
        ..., description="likelihood x severity, raw value used for positioning"
    )
    display_score: int = Field(..., description="Composite rounded half-up for display")
    band: str = Field(..., description="Band label of the raw composite score")
    display_band: str = Field(
        ..., description="Band label of the display score, 'N/A' when nothing is rated"
    )
    color: str = Field(..., description="Palette colour of the display score")
    highlight: HighlightCoordinates
    spectrum_position: float = Field(
        ..., ge=0.0, le=100.0, description="Indicator position on the spectrum, percent"
    )
    aggregation_strategy: str
    classifier_rule: str
    formula: str = Field(
        default="risk = aggregate(likelihood) × aggregate(severity)",
        description="Human-readable formula used",
    )


class MatrixCell(BaseModel):
    """One cell of the 5x5 likelihood/severity matrix."""

    likelihood: int
    severity: int
    score: int
    label: str
    color: str
    highlighted: bool = False

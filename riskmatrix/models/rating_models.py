"""
Rating Vocabulary Models - Axis catalogs mapping qualitative labels to 1..5.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

MIN_RATING = 1
MAX_RATING = 5

DEFENSIBILITY_CATEGORY = "Defensibility"


class Axis(str, Enum):
    """One of the two independent rating dimensions."""

    LIKELIHOOD = "likelihood"
    SEVERITY = "severity"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class RatingOption(BaseModel):
    """A single selectable rating on an axis."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: int = Field(..., ge=MIN_RATING, le=MAX_RATING)


LIKELIHOOD_OPTIONS: tuple[RatingOption, ...] = (
    RatingOption(label="Rare", value=1),
    RatingOption(label="Unlikely", value=2),
    RatingOption(label="Possible", value=3),
    RatingOption(label="Likely", value=4),
    RatingOption(label="Almost Certain", value=5),
)

SEVERITY_OPTIONS: tuple[RatingOption, ...] = (
    RatingOption(label="Insignificant", value=1),
    RatingOption(label="Minor", value=2),
    RatingOption(label="Significant", value=3),
    RatingOption(label="Major", value=4),
    RatingOption(label="Severe", value=5),
)

# Inverted perspective: stronger defensibility means lower risk.
DEFENSIBILITY_OPTIONS: tuple[RatingOption, ...] = (
    RatingOption(label="Very Strong", value=1),
    RatingOption(label="Strong", value=2),
    RatingOption(label="Moderate", value=3),
    RatingOption(label="Weak", value=4),
    RatingOption(label="Very Weak", value=5),
)

RISK_CATEGORIES: dict[Axis, tuple[str, ...]] = {
    Axis.LIKELIHOOD: (
        "Legal Requirements",
        "Prior Commitment",
        "3rd Party Rights",
        DEFENSIBILITY_CATEGORY,
        "Regulatory Interest",
        "Regulatory Engagement",
        "Enforcement History",
        "Discoverability",
        "Market Practices",
    ),
    Axis.SEVERITY: (
        "Financial",
        "Consumer Protection",
        "Reputational",
        "Operational",
        "Compliance",
        "Legal Exposure",
    ),
}


def rating_options_for(
    axis: Axis, categories: list[str] | tuple[str, ...] = ()
) -> tuple[RatingOption, ...]:
    """Effective catalog for a factor tagged with ``categories`` on ``axis``.

    A likelihood factor tagged Defensibility switches to the inverted catalog.
    """
    if axis == Axis.LIKELIHOOD:
        if DEFENSIBILITY_CATEGORY in categories:
            return DEFENSIBILITY_OPTIONS
        return LIKELIHOOD_OPTIONS
    return SEVERITY_OPTIONS


def rating_label_for(
    axis: Axis, categories: list[str] | tuple[str, ...], rating: int
) -> str | None:
    """Label of ``rating`` in the effective catalog, or None if not offered."""
    for option in rating_options_for(axis, categories):
        if option.value == rating:
            return option.label
    return None

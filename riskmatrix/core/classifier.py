"""
Risk Classifier - Maps a numeric score to a band label and a display colour.

Two threshold conventions are supported:

    threshold:  ≤4 Very Low, ≤8 Low, ≤12 Medium, ≤16 High, ≤20 Very High,
                else Extreme
    half_open:  [1,3) Very Low, [3,5) Low, [5,10) Medium, [10,15) High,
                [15,20) Very High, [20,25] Extreme, else Invalid Risk

Classification operates on whatever value it is given. Callers round with
``display_score`` first when the label is shown next to a rounded number.
"""

from __future__ import annotations

import math
from enum import Enum

from riskmatrix.core.aggregator import round_half_up
from riskmatrix.errors import ValidationError

MIN_SCORE = 1
MAX_SCORE = 25
DEFAULT_COLOR = "#ffffff"
INVALID_BAND = "Invalid Risk"


class ClassifierRule(str, Enum):
    THRESHOLD = "threshold"
    HALF_OPEN = "half_open"


# (inclusive upper bound, label)
THRESHOLD_BANDS: list[tuple[float, str]] = [
    (4, "Very Low"),
    (8, "Low"),
    (12, "Medium"),
    (16, "High"),
    (20, "Very High"),
]

# (inclusive lower bound, exclusive upper bound, label); the last band closes at 25
HALF_OPEN_BANDS: list[tuple[float, float, str]] = [
    (1, 3, "Very Low"),
    (3, 5, "Low"),
    (5, 10, "Medium"),
    (10, 15, "High"),
    (15, 20, "Very High"),
]

SCORE_PALETTE: dict[int, str] = {
    1: "#C6EFCE", 2: "#C9F2D0", 3: "#CCFFCC", 4: "#E5FFD6", 5: "#FFFFCC",
    6: "#FFFEBF", 7: "#FFFEB2", 8: "#FFED9C", 9: "#FFEA8A", 10: "#FFD966",
    11: "#FFD157", 12: "#FFC848", 13: "#FFBF39", 14: "#FFB62A", 15: "#F4B084",
    16: "#F3A677", 17: "#F29C6A", 18: "#F1925D", 19: "#F08851", 20: "#FF9999",
    21: "#FF8A8A", 22: "#FF7B7B", 23: "#FF6C6C", 24: "#FF5D5D", 25: "#FF4E4E",
}

BAND_PALETTE: dict[str, str] = {
    "Very Low": "#a8e6a3",
    "Low": "#d4f7a3",
    "Medium": "#f7f7a3",
    "High": "#f7d4a3",
    "Very High": "#f7b8a3",
    "Extreme": "#f7a8a8",
}


def _check_number(score: float) -> float:
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ValidationError(f"Score must be a number, got {score!r}", field="score")
    if math.isnan(score):
        raise ValidationError("Score must not be NaN", field="score")
    return score


def classify_threshold(score: float) -> str:
    score = _check_number(score)
    for upper, label in THRESHOLD_BANDS:
        if score <= upper:
            return label
    return "Extreme"


def classify_half_open(score: float) -> str:
    score = _check_number(score)
    for lower, upper, label in HALF_OPEN_BANDS:
        if lower <= score < upper:
            return label
    if 20 <= score <= MAX_SCORE:
        return "Extreme"
    return INVALID_BAND


def classify(score: float, rule: ClassifierRule | str = ClassifierRule.THRESHOLD) -> str:
    """Band label of ``score`` under the named rule."""
    try:
        rule = ClassifierRule(rule)
    except ValueError:
        raise ValueError(f"Unknown classifier rule: {rule}") from None
    if rule == ClassifierRule.HALF_OPEN:
        return classify_half_open(score)
    return classify_threshold(score)


def display_score(score: float) -> int:
    """Score as shown to the user: rounded half-up."""
    score = _check_number(score)
    if math.isinf(score):
        raise ValidationError("Score must be finite", field="score")
    return round_half_up(score)


def score_color(score: float) -> str:
    """Palette colour of the rounded score; white outside 1..25."""
    score = _check_number(score)
    if math.isinf(score):
        return DEFAULT_COLOR
    return SCORE_PALETTE.get(round_half_up(score), DEFAULT_COLOR)


def band_color(score: float) -> str:
    """Pastel colour of the threshold band ``score`` falls in."""
    return BAND_PALETTE[classify_threshold(score)]

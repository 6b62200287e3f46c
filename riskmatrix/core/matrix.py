"""
Matrix & Spectrum Layout - Data behind the visual 5x5 grid and gradient bar.

Rendering is left to the caller; this module only decides what goes where.
"""

from __future__ import annotations

import math

from riskmatrix.core.aggregator import round_half_up
from riskmatrix.core.classifier import MAX_SCORE, MIN_SCORE, ClassifierRule, band_color, classify
from riskmatrix.models.rating_models import MAX_RATING, MIN_RATING
from riskmatrix.models.risk_models import HighlightCoordinates, MatrixCell

# Hand-tuned indicator positions, score → percent of bar width
CALIBRATED_POSITIONS: dict[int, float] = {
    1: 0, 2: 10, 3: 21, 4: 21.6, 5: 39.6, 6: 40, 8: 45, 9: 49,
    10: 58, 12: 59, 15: 77, 16: 82, 20: 90, 25: 100,
}


def clamp_axis(value: float) -> int:
    """Round an axis aggregate onto the matrix grid."""
    return min(MAX_RATING, max(MIN_RATING, round_half_up(value)))


def highlight_for(likelihood: float, severity: float) -> HighlightCoordinates:
    return HighlightCoordinates(likelihood=clamp_axis(likelihood), severity=clamp_axis(severity))


def build_risk_matrix(
    highlight: HighlightCoordinates | None = None,
    rule: ClassifierRule | str = ClassifierRule.THRESHOLD,
) -> list[list[MatrixCell]]:
    """
    Build the 5x5 matrix.

    Rows run from likelihood 5 (top) down to 1 so the lowest likelihood sits
    at the bottom; columns run severity 1..5 left to right.
    """
    grid: list[list[MatrixCell]] = []
    for likelihood in range(MAX_RATING, MIN_RATING - 1, -1):
        row: list[MatrixCell] = []
        for severity in range(MIN_RATING, MAX_RATING + 1):
            score = likelihood * severity
            row.append(
                MatrixCell(
                    likelihood=likelihood,
                    severity=severity,
                    score=score,
                    label=classify(score, rule),
                    color=band_color(score),
                    highlighted=(
                        highlight is not None
                        and highlight.likelihood == likelihood
                        and highlight.severity == severity
                    ),
                )
            )
        grid.append(row)
    return grid


def spectrum_position(score: float, calibrated: bool = False) -> float:
    """
    Indicator position on the spectrum bar, as a percentage in [0, 100].

    The linear mapping spreads 1..25 evenly across the bar. The calibrated
    mapping interpolates between the anchors in CALIBRATED_POSITIONS.
    """
    if math.isnan(score):
        return 0.0
    score = min(float(MAX_SCORE), max(float(MIN_SCORE), score))

    if not calibrated:
        return (score - MIN_SCORE) / (MAX_SCORE - MIN_SCORE) * 100

    anchors = sorted(CALIBRATED_POSITIONS)
    lower = max(k for k in anchors if k <= score)
    upper = min(k for k in anchors if k >= score)
    if lower == upper:
        return float(CALIBRATED_POSITIONS[lower])

    low_pct = CALIBRATED_POSITIONS[lower]
    high_pct = CALIBRATED_POSITIONS[upper]
    return low_pct + (score - lower) / (upper - lower) * (high_pct - low_pct)

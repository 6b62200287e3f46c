"""
Snapshot Summary - Plain-text description copied alongside an image export.
"""

from __future__ import annotations

from riskmatrix.models.assessment_models import Assessment
from riskmatrix.models.risk_models import RiskBreakdown


def snapshot_summary(assessment: Assessment, breakdown: RiskBreakdown) -> str:
    """
    Text representation of the scored assessment, e.g.::

        Risk Assessment for Acme v. Widgets
        Likelihood: 4.50 (3 factors)
        Severity: 3.00 (1 factor)
        Risk Value: 13.50
        Assessed Risk: High (14)
    """
    lines = [f"Risk Assessment for {assessment.matter_name}"]
    for axis_score in (breakdown.likelihood, breakdown.severity):
        count = len(axis_score.ratings)
        noun = "factor" if count == 1 else "factors"
        lines.append(f"{axis_score.axis.capitalize()}: {axis_score.value:.2f} ({count} {noun})")
    lines.append(f"Risk Value: {breakdown.composite_score:.2f}")
    lines.append(f"Assessed Risk: {breakdown.display_band} ({breakdown.display_score})")
    return "\n".join(lines)

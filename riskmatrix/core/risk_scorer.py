"""
Risk Scoring Engine - Computes explainable composite scores from assessments.

Risk Score = aggregate(likelihood ratings) × aggregate(severity ratings)

The raw composite drives spectrum positioning; the half-up rounded value is
what gets labelled and coloured for display.
"""

from __future__ import annotations

import logging

from riskmatrix.config import settings
from riskmatrix.core.aggregator import AggregationStrategy, aggregate
from riskmatrix.core.classifier import ClassifierRule, classify, display_score, score_color
from riskmatrix.core.matrix import highlight_for, spectrum_position
from riskmatrix.models.assessment_models import Assessment
from riskmatrix.models.rating_models import Axis
from riskmatrix.models.risk_models import AxisScore, RiskBreakdown

logger = logging.getLogger("riskmatrix.core.scorer")

NOT_RATED = "N/A"


def composite_score(
    likelihood_ratings: list[int],
    severity_ratings: list[int],
    strategy: AggregationStrategy | str = AggregationStrategy.MEAN_BIASED,
) -> float:
    """Product of the two axis aggregates."""
    return aggregate(likelihood_ratings, strategy) * aggregate(severity_ratings, strategy)


def compute_risk_score(
    assessment: Assessment,
    strategy: AggregationStrategy | str | None = None,
    rule: ClassifierRule | str | None = None,
    calibrated_spectrum: bool | None = None,
) -> RiskBreakdown:
    """
    Compute an explainable risk breakdown for an assessment.

    Args:
        assessment: Assessment whose factor ratings are scored
        strategy: Aggregation strategy (default: settings.aggregation_strategy)
        rule: Classifier rule (default: settings.classifier_rule)
        calibrated_spectrum: Use calibrated spectrum anchors
            (default: settings.calibrated_spectrum)

    Returns:
        RiskBreakdown with axis aggregates, composite score, band and layout data.
        Empty factor lists score without raising.
    """
    strategy = AggregationStrategy(strategy or settings.aggregation_strategy)
    rule = ClassifierRule(rule or settings.classifier_rule)
    if calibrated_spectrum is None:
        calibrated_spectrum = settings.calibrated_spectrum

    likelihood_ratings = assessment.ratings(Axis.LIKELIHOOD)
    severity_ratings = assessment.ratings(Axis.SEVERITY)

    likelihood_value = aggregate(likelihood_ratings, strategy)
    severity_value = aggregate(severity_ratings, strategy)
    raw = likelihood_value * severity_value
    shown = display_score(raw)

    breakdown = RiskBreakdown(
        likelihood=AxisScore(axis=Axis.LIKELIHOOD.value, ratings=likelihood_ratings, value=likelihood_value),
        severity=AxisScore(axis=Axis.SEVERITY.value, ratings=severity_ratings, value=severity_value),
        composite_score=raw,
        display_score=shown,
        band=classify(raw, rule),
        display_band=classify(shown, rule) if raw > 0 else NOT_RATED,
        color=score_color(raw),
        highlight=highlight_for(likelihood_value, severity_value),
        spectrum_position=spectrum_position(raw, calibrated=calibrated_spectrum),
        aggregation_strategy=strategy.value,
        classifier_rule=rule.value,
    )

    logger.debug(
        f"Scored '{assessment.matter_name}': {likelihood_value:.2f} × {severity_value:.2f} "
        f"= {raw:.2f} ({breakdown.display_band})"
    )
    return breakdown

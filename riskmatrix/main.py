"""
Risk Matrix Tool - Session facade driven by the assessment UI.

Holds the matter name and the append-only factor lists of the assessment
being edited, and exposes scoring, layout, save/load and exports:

    session = RiskAssessmentSession()
    session.matter_name = "Acme v. Widgets"
    session.add_factor("likelihood", ["Financial"], "Prior fines", 4)
    session.score().display_band
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from pydantic import ValidationError as PydanticValidationError

from riskmatrix.config import settings
from riskmatrix.core.aggregator import AggregationStrategy
from riskmatrix.core.classifier import ClassifierRule
from riskmatrix.core.matrix import build_risk_matrix
from riskmatrix.core.risk_scorer import compute_risk_score
from riskmatrix.errors import ValidationError
from riskmatrix.export.markdown import generate_markdown_table
from riskmatrix.export.summary import snapshot_summary
from riskmatrix.models.assessment_models import Assessment, RiskFactor
from riskmatrix.models.rating_models import Axis, rating_label_for, rating_options_for
from riskmatrix.models.risk_models import MatrixCell, RiskBreakdown
from riskmatrix.persistence.repository import AssessmentRepository

logger = logging.getLogger("riskmatrix")

DRAFT_MATTER_NAME = "assessment"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the hosting process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class RiskAssessmentSession:
    """
    In-progress assessment plus the operations the UI triggers on it.

    Factors are appended only through ``add_factor``; a rejected factor
    leaves the lists untouched. A failed load leaves the whole session
    untouched.
    """

    def __init__(
        self,
        repository: AssessmentRepository | None = None,
        matter_name: str = "",
        strategy: AggregationStrategy | str | None = None,
        rule: ClassifierRule | str | None = None,
    ) -> None:
        if repository is None:
            from riskmatrix.dependencies import get_repository
            repository = get_repository()
        self.repository = repository
        self.matter_name = matter_name
        self.strategy = AggregationStrategy(strategy or settings.aggregation_strategy)
        self.rule = ClassifierRule(rule or settings.classifier_rule)
        self._likelihood: list[RiskFactor] = []
        self._severity: list[RiskFactor] = []

    @property
    def likelihood_factors(self) -> tuple[RiskFactor, ...]:
        return tuple(self._likelihood)

    @property
    def severity_factors(self) -> tuple[RiskFactor, ...]:
        return tuple(self._severity)

    # ── Editing ──

    def add_factor(
        self,
        axis: Axis | str,
        categories: list[str] | tuple[str, ...] | str,
        explanation: str,
        rating: int,
    ) -> RiskFactor:
        """
        Validate and append a factor to ``axis``.

        Raises:
            ValidationError: no category, blank explanation, or a rating the
                effective catalog does not offer. Nothing is appended.
        """
        axis = Axis(axis)
        if isinstance(categories, str):
            categories = [categories]
        tags = [c.strip() for c in categories if isinstance(c, str) and c.strip()]
        if not tags:
            logger.info(f"Rejected {axis.value} factor: no category")
            raise ValidationError("Please select at least one category.", field="categories")
        if not explanation or not explanation.strip():
            logger.info(f"Rejected {axis.value} factor: blank explanation")
            raise ValidationError("Please enter an explanation.", field="explanation")

        label = None
        if isinstance(rating, int) and not isinstance(rating, bool):
            label = rating_label_for(axis, tags, rating)
        if label is None:
            offered = [o.value for o in rating_options_for(axis, tags)]
            logger.info(f"Rejected {axis.value} factor: rating {rating!r} not in {offered}")
            raise ValidationError(f"Rating must be one of {offered}.", field="rating")

        try:
            factor = RiskFactor(
                categories=tuple(tags), explanation=explanation, rating=rating, rating_label=label
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid risk factor: {e}") from e

        if axis == Axis.LIKELIHOOD:
            self._likelihood.append(factor)
        else:
            self._severity.append(factor)
        logger.debug(f"Added {axis.value} factor {list(tags)} rated {label} ({rating})")
        return factor

    def add_likelihood_factor(self, categories: list[str] | str, explanation: str, rating: int) -> RiskFactor:
        return self.add_factor(Axis.LIKELIHOOD, categories, explanation, rating)

    def add_severity_factor(self, categories: list[str] | str, explanation: str, rating: int) -> RiskFactor:
        return self.add_factor(Axis.SEVERITY, categories, explanation, rating)

    def reset(self) -> None:
        """Start a fresh, unnamed assessment."""
        self.matter_name = ""
        self._likelihood.clear()
        self._severity.clear()

    # ── Snapshots ──

    def to_assessment(self) -> Assessment:
        """The current state as an assessment record. Requires a matter name."""
        if not self.matter_name or not self.matter_name.strip():
            raise ValidationError(
                "Please enter a matter name before saving.", field="matter_name"
            )
        return Assessment(
            matter_name=self.matter_name,
            likelihood_factors=self.likelihood_factors,
            severity_factors=self.severity_factors,
        )

    def _draft(self) -> Assessment:
        name = self.matter_name if self.matter_name and self.matter_name.strip() else DRAFT_MATTER_NAME
        return Assessment(
            matter_name=name,
            likelihood_factors=self.likelihood_factors,
            severity_factors=self.severity_factors,
        )

    # ── Persistence ──

    def save(self) -> Assessment:
        """Save under the current matter name, overwriting any previous record."""
        assessment = self.to_assessment()
        self.repository.save(assessment)
        return assessment

    def load(self, matter_name: str | None = None) -> Assessment:
        """
        Replace the session state with a saved assessment.

        Raises:
            ValidationError: no matter name given.
            NotFoundError: nothing saved under that name.
            MalformedDataError: the saved record cannot be decoded.
        """
        name = matter_name if matter_name is not None else self.matter_name
        if not name or not name.strip():
            raise ValidationError("Please enter the matter name to load.", field="matter_name")

        assessment = self.repository.load(name)
        self.matter_name = assessment.matter_name
        self._likelihood = list(assessment.likelihood_factors)
        self._severity = list(assessment.severity_factors)
        return assessment

    def saved_matters(self) -> list[str]:
        return self.repository.list_matters()

    # ── Scoring & export ──

    def score(self) -> RiskBreakdown:
        return compute_risk_score(self._draft(), self.strategy, self.rule)

    def matrix(self) -> list[list[MatrixCell]]:
        """5x5 matrix with the current score's cell highlighted."""
        return build_risk_matrix(self.score().highlight, self.rule)

    def markdown(self) -> str:
        return generate_markdown_table(self._draft())

    def summary(self) -> str:
        draft = self._draft()
        return snapshot_summary(draft, compute_risk_score(draft, self.strategy, self.rule))

"""
Test fixtures shared across all risk matrix tests.
"""

import pytest

from riskmatrix.models.assessment_models import Assessment, RiskFactor
from riskmatrix.persistence.repository import AssessmentRepository
from riskmatrix.persistence.storage import InMemoryStorage


@pytest.fixture
def sample_assessment():
    """Assessment with two likelihood factors and one severity factor."""
    return Assessment(
        matter_name="Acme v. Widgets",
        likelihood_factors=(
            RiskFactor(
                categories=("Legal Requirements", "Prior Commitment"),
                explanation="Contract clause 4.2 is explicit.",
                rating=4,
                rating_label="Likely",
            ),
            RiskFactor(
                categories=("Defensibility",),
                explanation="Arguments are thin.",
                rating=4,
                rating_label="Weak",
            ),
        ),
        severity_factors=(
            RiskFactor(
                categories=("Financial",),
                explanation="Damages capped at fees paid.",
                rating=3,
                rating_label="Significant",
            ),
        ),
    )


@pytest.fixture
def legacy_record():
    """Unversioned record as written by the browser tool."""
    return {
        "matterName": "Legacy Matter",
        "likelihoodRisks": [
            {
                "categories": ["Regulatory Interest"],
                "explanation": "Regulator issued guidance last year.",
                "rating": 3,
                "ratingLabel": "Possible",
            }
        ],
        "severityRisks": [
            {
                "categories": ["Reputational", "Compliance"],
                "explanation": "Press coverage likely.",
                "rating": 5,
                "ratingLabel": "Severe",
            }
        ],
    }


@pytest.fixture
def memory_storage():
    return InMemoryStorage()


@pytest.fixture
def repository(memory_storage):
    return AssessmentRepository(memory_storage, layout="per_matter")


@pytest.fixture
def session(repository):
    from riskmatrix.main import RiskAssessmentSession

    return RiskAssessmentSession(
        repository=repository, strategy="mean_biased", rule="threshold"
    )

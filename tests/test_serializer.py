"""
Tests for Assessment Serializer - JSON contract, legacy shape and bad input.
"""

import json

import pytest

from riskmatrix.errors import MalformedDataError
from riskmatrix.models.assessment_models import SCHEMA_VERSION, Assessment
from riskmatrix.persistence.serializer import deserialize, serialize


def test_round_trip(sample_assessment):
    assert deserialize(serialize(sample_assessment)) == sample_assessment


def test_round_trip_without_factors():
    assessment = Assessment(matter_name="Empty")
    assert deserialize(serialize(assessment)) == assessment


def test_serialized_shape_is_camel_case_and_versioned(sample_assessment):
    data = json.loads(serialize(sample_assessment))
    assert data["version"] == SCHEMA_VERSION
    assert data["matterName"] == "Acme v. Widgets"
    assert len(data["likelihoodFactors"]) == 2
    assert len(data["severityFactors"]) == 1
    factor = data["likelihoodFactors"][0]
    assert factor["categories"] == ["Legal Requirements", "Prior Commitment"]
    assert factor["ratingLabel"] == "Likely"
    assert factor["rating"] == 4


def test_legacy_unversioned_shape_accepted(legacy_record):
    assessment = deserialize(json.dumps(legacy_record))
    assert assessment.matter_name == "Legacy Matter"
    assert assessment.version == SCHEMA_VERSION
    assert assessment.likelihood_factors[0].rating == 3
    assert assessment.severity_factors[0].categories == ("Reputational", "Compliance")


def test_legacy_single_category_accepted():
    record = {
        "matterName": "Old",
        "likelihoodRisks": [{"category": "Financial", "explanation": "x", "rating": 2}],
        "severityRisks": [],
    }
    assessment = deserialize(json.dumps(record))
    assert assessment.likelihood_factors[0].categories == ("Financial",)


@pytest.mark.parametrize("text", ["", "{not json", "[1, 2]", "null", '"text"'])
def test_unparsable_or_wrong_type_is_malformed(text):
    with pytest.raises(MalformedDataError):
        deserialize(text)


@pytest.mark.parametrize(
    "record",
    [
        {"likelihoodFactors": []},
        {"matterName": ""},
        {"matterName": "X", "likelihoodFactors": [{"categories": [], "explanation": "x", "rating": 3}]},
        {"matterName": "X", "likelihoodFactors": [{"categories": ["A"], "explanation": " ", "rating": 3}]},
        {"matterName": "X", "severityFactors": [{"categories": ["A"], "explanation": "x", "rating": 9}]},
        {"matterName": "X", "severityFactors": [{"categories": ["A"], "explanation": "x", "rating": True}]},
        {"matterName": "X", "severityFactors": [{"categories": ["A"], "explanation": "x", "rating": "4"}]},
        {"matterName": "X", "severityFactors": [{"categories": ["A"], "explanation": "x", "rating": 4.0}]},
        {
            "matterName": "X",
            "severityFactors": [
                {"categories": ["A"], "explanation": "x", "rating": 4, "ratingLabel": "Rare"}
            ],
        },
        {
            "matterName": "X",
            "likelihoodFactors": [
                {"categories": ["Defensibility"], "explanation": "x", "rating": 1, "ratingLabel": "Rare"}
            ],
        },
        {"matterName": "X", "version": 99},
        {"matterName": "X", "likelihood": 3, "impact": 4, "riskValue": 12},
    ],
)
def test_invalid_shapes_are_malformed(record):
    with pytest.raises(MalformedDataError):
        deserialize(json.dumps(record))


def test_invalid_utf8_bytes_are_malformed():
    with pytest.raises(MalformedDataError):
        deserialize(b'{"matterName": "\xff\xfe"}')


def test_matching_label_accepted():
    record = {
        "matterName": "X",
        "likelihoodFactors": [
            {"categories": ["Defensibility"], "explanation": "x", "rating": 1, "ratingLabel": "Very Strong"}
        ],
    }
    assert deserialize(json.dumps(record)).likelihood_factors[0].rating_label == "Very Strong"


def test_malformed_error_keeps_raw_text():
    with pytest.raises(MalformedDataError) as exc_info:
        deserialize("{oops")
    assert exc_info.value.raw == "{oops"

"""
Assessment Serializer - JSON contract for stored assessments.

Output always carries a ``version`` field. Input may be either the current
shape or the unversioned browser-tool shape:

    {"matterName": ..., "likelihoodRisks": [...], "severityRisks": [...]}
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from riskmatrix.errors import MalformedDataError
from riskmatrix.models.assessment_models import SCHEMA_VERSION, Assessment

logger = logging.getLogger("riskmatrix.persistence.serializer")

# Keys of the matrix-click variant that stored one likelihood/impact pair
SINGLE_RATING_KEYS = {"likelihood", "impact", "riskValue"}


def to_record(assessment: Assessment) -> dict[str, Any]:
    """Plain JSON-compatible dict for an assessment."""
    return assessment.model_dump(mode="json", by_alias=True)


def from_record(record: Any, raw: str | None = None) -> Assessment:
    """Rebuild an assessment from a decoded JSON value."""
    if not isinstance(record, dict):
        raise MalformedDataError(
            f"Expected a JSON object, got {type(record).__name__}", raw=raw
        )

    if record.keys() & SINGLE_RATING_KEYS:
        raise MalformedDataError(
            "Single-rating records carry no risk factors and cannot be loaded", raw=raw
        )

    version = record.get("version")
    if version is not None and version != SCHEMA_VERSION:
        raise MalformedDataError(f"Unsupported assessment version: {version!r}", raw=raw)

    try:
        return Assessment.model_validate(record)
    except PydanticValidationError as e:
        logger.warning(f"Stored assessment failed validation: {e.error_count()} error(s)")
        raise MalformedDataError(f"Invalid assessment data: {e}", raw=raw) from e


def serialize(assessment: Assessment) -> str:
    """Encode an assessment as a JSON string."""
    return json.dumps(to_record(assessment))


def deserialize(text: str | bytes) -> Assessment:
    """
    Decode a JSON string into an assessment.

    Raises:
        MalformedDataError: text is not JSON, or does not describe a valid
            assessment.
    """
    try:
        record = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        raise MalformedDataError(f"Stored assessment is not valid JSON: {e}", raw=text) from e
    return from_record(record, raw=text)

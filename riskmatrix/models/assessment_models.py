"""
Assessment Data Models - Risk factors and the persisted assessment record.

Field names serialize in camelCase to stay readable by the browser tool's
stored records; legacy key names are accepted on input.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from riskmatrix.models.rating_models import MAX_RATING, MIN_RATING, Axis, rating_label_for

SCHEMA_VERSION = 1


class RiskFactor(BaseModel):
    """A single rated factor on one axis. Immutable once built."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    categories: tuple[str, ...] = Field(..., min_length=1, description="Category tags, in selection order")
    explanation: str = Field(..., min_length=1)
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING, strict=True)
    rating_label: str = Field(default="", alias="ratingLabel")

    @model_validator(mode="before")
    @classmethod
    def _accept_single_category(cls, data: Any) -> Any:
        # Earliest records stored one "category" string instead of a list
        if isinstance(data, dict) and "categories" not in data and "category" in data:
            data = dict(data)
            data["categories"] = data.pop("category")
        return data

    @field_validator("categories", mode="before")
    @classmethod
    def _normalize_categories(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set, frozenset)):
            return value
        seen: list[str] = []
        for item in value:
            if not isinstance(item, str):
                raise ValueError("categories must be strings")
            item = item.strip()
            if item and item not in seen:
                seen.append(item)
        return tuple(seen)

    @field_validator("explanation")
    @classmethod
    def _explanation_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("explanation must not be blank")
        return value


class Assessment(BaseModel):
    """A named, saved risk assessment keyed by matter name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: int = Field(default=SCHEMA_VERSION, ge=1)
    matter_name: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("matterName", "matter_name"),
        serialization_alias="matterName",
    )
    likelihood_factors: tuple[RiskFactor, ...] = Field(
        default=(),
        validation_alias=AliasChoices("likelihoodFactors", "likelihoodRisks", "likelihood_factors"),
        serialization_alias="likelihoodFactors",
    )
    severity_factors: tuple[RiskFactor, ...] = Field(
        default=(),
        validation_alias=AliasChoices("severityFactors", "severityRisks", "severity_factors"),
        serialization_alias="severityFactors",
    )

    @field_validator("matter_name")
    @classmethod
    def _matter_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("matter name must not be blank")
        return value

    @model_validator(mode="after")
    def _labels_match_catalog(self) -> Assessment:
        # An empty label is derived at export time
        for axis in (Axis.LIKELIHOOD, Axis.SEVERITY):
            for factor in self.factors(axis):
                expected = rating_label_for(axis, factor.categories, factor.rating)
                if factor.rating_label and factor.rating_label != expected:
                    raise ValueError(
                        f"{axis.value} rating {factor.rating} is labelled "
                        f"'{factor.rating_label}', expected '{expected}'"
                    )
        return self

    def factors(self, axis: Axis) -> tuple[RiskFactor, ...]:
        """Factors recorded on ``axis``."""
        if axis == Axis.LIKELIHOOD:
            return self.likelihood_factors
        return self.severity_factors

    def ratings(self, axis: Axis) -> list[int]:
        """Integer ratings recorded on ``axis``, in entry order."""
        return [f.rating for f in self.factors(axis)]


class ExportRow(BaseModel):
    """One flat row consumed by the markdown generator."""

    model_config = ConfigDict(populate_by_name=True)

    axis: Axis
    categories: tuple[str, ...]
    explanation: str
    rating_label: str = Field(..., alias="ratingLabel")
    rating: int

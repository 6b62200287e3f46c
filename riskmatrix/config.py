"""
Risk Matrix Configuration - pydantic-settings based.

All settings are read from environment variables or .env file.
Unknown strategy or rule names fail fast at startup.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Scoring ──
    aggregation_strategy: Literal["mean_biased", "range_sensitive"] = Field(
        default="mean_biased",
        description="Axis aggregation policy applied to per-factor ratings",
    )
    classifier_rule: Literal["threshold", "half_open"] = Field(
        default="threshold",
        description="Band threshold convention used to label scores",
    )
    calibrated_spectrum: bool = Field(
        default=False,
        description="Position the spectrum indicator with the calibrated anchor table",
    )

    # ── Storage ──
    storage_layout: Literal["per_matter", "global_list"] = Field(
        default="per_matter",
        description="One key per matter, or a single list under one global key",
    )
    storage_key_prefix: str = Field(
        default="assessment_", description="Key prefix for per-matter records"
    )
    global_storage_key: str = Field(
        default="savedAssessments", description="Key holding the global list layout"
    )
    store_path: str = Field(
        default="assessments.json", description="Path of the JSON file storage backend"
    )

    # ── Logging ──
    log_level: str = Field(default="INFO", description="Root log level")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance, imported by other modules
settings = Settings()

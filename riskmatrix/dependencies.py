"""
Shared singletons for callers that do not inject their own storage.
"""

from __future__ import annotations

from functools import lru_cache

from riskmatrix.config import settings
from riskmatrix.persistence.repository import AssessmentRepository
from riskmatrix.persistence.storage import JsonFileStorage


@lru_cache
def get_storage() -> JsonFileStorage:
    """Shared file storage singleton."""
    return JsonFileStorage(settings.store_path)


@lru_cache
def get_repository() -> AssessmentRepository:
    """Shared assessment repository singleton."""
    return AssessmentRepository(get_storage())

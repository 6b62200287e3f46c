"""
Assessment Repository - Save and load named assessments through a StoragePort.

Two storage layouts are supported:

    per_matter:   one JSON record per key, "<prefix><matterName>"
    global_list:  one JSON list of records under a single key

Saving under an existing matter name replaces the previous record.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

from riskmatrix.config import settings
from riskmatrix.errors import MalformedDataError, NotFoundError
from riskmatrix.models.assessment_models import Assessment
from riskmatrix.persistence.serializer import deserialize, from_record, serialize, to_record
from riskmatrix.persistence.storage import StoragePort

logger = logging.getLogger("riskmatrix.persistence.repository")


class StorageLayout(str, Enum):
    PER_MATTER = "per_matter"
    GLOBAL_LIST = "global_list"


class AssessmentRepository:
    """
    Named assessment store on top of an injected StoragePort.

    Usage:
        repo = AssessmentRepository(InMemoryStorage())
        repo.save(assessment)
        loaded = repo.load("Acme v. Widgets")
    """

    def __init__(
        self,
        storage: StoragePort,
        layout: StorageLayout | str | None = None,
        key_prefix: str | None = None,
        global_key: str | None = None,
    ) -> None:
        self.storage = storage
        self.layout = StorageLayout(layout or settings.storage_layout)
        self.key_prefix = key_prefix if key_prefix is not None else settings.storage_key_prefix
        self.global_key = global_key or settings.global_storage_key

    def key_for(self, matter_name: str) -> str:
        """Storage key of a per-matter record."""
        return f"{self.key_prefix}{matter_name}"

    # ── Global list helpers ──

    def _read_list(self) -> list[dict[str, Any]]:
        raw = self.storage.get(self.global_key)
        if raw is None:
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedDataError(
                f"Saved assessment list under '{self.global_key}' is not valid JSON: {e}",
                raw=raw,
            ) from e
        if not isinstance(records, list):
            raise MalformedDataError(
                f"Saved assessment list under '{self.global_key}' is not a list", raw=raw
            )
        return records

    def _write_list(self, records: list[dict[str, Any]]) -> None:
        self.storage.set(self.global_key, json.dumps(records))

    @staticmethod
    def _record_name(record: Any) -> str | None:
        if isinstance(record, dict):
            return record.get("matterName", record.get("matter_name"))
        return None

    # ── Public API ──

    def save(self, assessment: Assessment) -> None:
        """Store an assessment, replacing any record with the same matter name."""
        if self.layout == StorageLayout.PER_MATTER:
            self.storage.set(self.key_for(assessment.matter_name), serialize(assessment))
        else:
            records = [
                r for r in self._read_list() if self._record_name(r) != assessment.matter_name
            ]
            records.append(to_record(assessment))
            self._write_list(records)
        logger.info(f"Assessment saved: '{assessment.matter_name}' ({self.layout.value})")

    def load(self, matter_name: str) -> Assessment:
        """
        Load the assessment saved under ``matter_name``.

        Raises:
            NotFoundError: nothing is stored under that name.
            MalformedDataError: the stored record cannot be decoded.
        """
        if self.layout == StorageLayout.PER_MATTER:
            raw = self.storage.get(self.key_for(matter_name))
            if raw is None:
                logger.info(f"No saved assessment for '{matter_name}'")
                raise NotFoundError(matter_name)
            assessment = deserialize(raw)
        else:
            record = next(
                (r for r in self._read_list() if self._record_name(r) == matter_name), None
            )
            if record is None:
                logger.info(f"No saved assessment for '{matter_name}'")
                raise NotFoundError(matter_name)
            assessment = from_record(record, raw=json.dumps(record))

        logger.info(f"Assessment loaded: '{matter_name}'")
        return assessment

    def exists(self, matter_name: str) -> bool:
        if self.layout == StorageLayout.PER_MATTER:
            return self.storage.get(self.key_for(matter_name)) is not None
        return any(self._record_name(r) == matter_name for r in self._read_list())

    def list_matters(self) -> list[str]:
        """Matter names with a saved record, in storage order."""
        if self.layout == StorageLayout.PER_MATTER:
            return [
                key[len(self.key_prefix):]
                for key in self.storage.keys()
                if key.startswith(self.key_prefix) and len(key) > len(self.key_prefix)
            ]
        names = (self._record_name(r) for r in self._read_list())
        return [name for name in names if name]

    def delete(self, matter_name: str) -> bool:
        """Remove a saved assessment. Returns True if one was removed."""
        if not self.exists(matter_name):
            return False
        if self.layout == StorageLayout.PER_MATTER:
            self.storage.remove(self.key_for(matter_name))
        else:
            self._write_list(
                [r for r in self._read_list() if self._record_name(r) != matter_name]
            )
        logger.info(f"Assessment deleted: '{matter_name}'")
        return True

"""
Storage Port - Key/value string storage injected into the repository.

Mirrors the browser's localStorage surface. Two adapters ship here: an
in-memory dict and a single JSON file on disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from riskmatrix.config import settings
from riskmatrix.errors import MalformedDataError

logger = logging.getLogger("riskmatrix.persistence.storage")


@runtime_checkable
class StoragePort(Protocol):
    """Minimal string key/value store."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def keys(self) -> list[str]: ...


class InMemoryStorage:
    """Dict-backed storage; contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def remove(self, key: str) -> None:
        self._store.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._store)


class JsonFileStorage:
    """
    Storage persisted as one JSON object of string values in a file.

    The whole file is rewritten on every change.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path or settings.store_path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedDataError(f"Storage file {self.path} is not valid JSON: {e}") from e
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise MalformedDataError(f"Storage file {self.path} is not a key/value object")
        return data

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        logger.debug(f"Wrote key '{key}' to {self.path}")

    def remove(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def keys(self) -> list[str]:
        return list(self._read())

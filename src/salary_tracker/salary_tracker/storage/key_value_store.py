from __future__ import annotations

import json
import logging
import os
import shutil
from pathlib import Path
from typing import Optional, Protocol

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


CORRUPT_SUFFIX = ".corrupt"


class KeyValueStore(Protocol):
    """String blob store keyed by name (records and settings are one key each)."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryKeyValueStore:
    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileKeyValueStore:
    """All keys live in one JSON object on disk.

    Note: Each ``set`` rewrites the whole file through a temp file + rename.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def corrupt_path(self) -> Path:
        return self._path.with_suffix(self._path.suffix + CORRUPT_SUFFIX)

    def _set_aside(self, reason: str) -> dict[str, str]:
        """Copy the unreadable file next to itself before it can be overwritten."""
        try:
            shutil.copy2(self._path, self.corrupt_path)
        except OSError as e:
            raise StorageError(f"cannot keep a copy of {self._path}: {e}") from e
        logger.warning("Store file %s %s, kept a copy at %s, starting empty", self._path, reason, self.corrupt_path)
        return {}

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except OSError as e:
            raise StorageError(f"cannot read {self._path}: {e}") from e
        except json.JSONDecodeError:
            return self._set_aside("is not valid JSON")
        if not isinstance(data, dict):
            return self._set_aside("does not hold an object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageError(f"cannot write {self._path}: {e}") from e


def keep_unreadable(store: KeyValueStore, key: str, raw: str) -> None:
    """Save an unreadable value under ``<key>.corrupt`` so the next write does not lose it."""
    corrupt_key = key + CORRUPT_SUFFIX
    if store.get(corrupt_key) != raw:
        store.set(corrupt_key, raw)

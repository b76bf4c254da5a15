"""
JSON-based persistence adapter.

A ``KeyValueStorage`` is the string-to-string surface records are kept in
(a JSON file on disk, or memory for tests and admin sessions). ``EntityStore``
keeps one collection on top of it: the records as a serialized JSON array under
one key, and the next-id counter as a decimal string under another.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence

from catalog.repositories import StorageError

logger = logging.getLogger(__name__)

COURSES_KEY = "tnqdo_courses"
COURSES_COUNTER_KEY = "tnqdo_courses_counter"
BLOG_KEY = "tnqdo_blog_posts"
BLOG_COUNTER_KEY = "tnqdo_blog_counter"


class StorageQuotaExceeded(StorageError):
    """Raised by a storage when a write would go over its size limit."""


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage with an optional byte quota."""

    def __init__(self, quota: Optional[int] = None) -> None:
        self._items: dict[str, str] = {}
        self.quota = quota

    def _size_with(self, key: str, value: str) -> int:
        items = dict(self._items)
        items[key] = value
        return sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in items.items())

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        value = str(value)
        if self.quota is not None and self._size_with(key, value) > self.quota:
            raise StorageQuotaExceeded(f"Storage quota of {self.quota} bytes exceeded writing {key}")
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)


class JsonFileStorage:
    """All keys in one JSON object file; every write replaces the file in a single step."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Could not read {self.path}: {exc}") from exc
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            raise StorageError(f"Could not write {self.path}: {exc}") from exc

    def get_item(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        self._save(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

    def keys(self) -> list[str]:
        return list(self._load())


class EntityStore:
    """
    One collection of JSON documents plus its id counter.

    Public operations never raise: reads degrade to ``[]`` / defaults and
    writes report ``False``, with the failure logged.
    """

    def __init__(self, storage: KeyValueStorage, key: str, counter_key: str) -> None:
        self.storage = storage
        self.key = key
        self.counter_key = counter_key

    def load_all(self) -> list[dict[str, Any]]:
        try:
            raw = self.storage.get_item(self.key)
            if not raw:
                return []
            items = json.loads(raw)
        except (StorageError, ValueError) as exc:
            logger.error("Error reading %s from storage: %s", self.key, exc)
            return []
        if not isinstance(items, list):
            logger.error("Stored value for %s is not a list; ignoring it", self.key)
            return []
        return [item for item in items if isinstance(item, dict)]

    def save_all(self, items: Sequence[dict[str, Any]]) -> bool:
        try:
            # Serialize before touching storage so a bad record never half-writes.
            payload = json.dumps(list(items), ensure_ascii=False)
            self.storage.set_item(self.key, payload)
        except (StorageError, TypeError, ValueError) as exc:
            logger.error("Error saving %s to storage: %s", self.key, exc)
            return False
        return True

    def next_id(self) -> int:
        try:
            raw = self.storage.get_item(self.counter_key)
            return int(raw) if raw else 1
        except (StorageError, ValueError) as exc:
            logger.error("Error reading counter %s: %s", self.counter_key, exc)
            return 1

    def advance_counter(self) -> bool:
        try:
            self.storage.set_item(self.counter_key, str(self.next_id() + 1))
        except StorageError as exc:
            logger.error("Error incrementing counter %s: %s", self.counter_key, exc)
            return False
        return True

    def seed_if_empty(self, defaults: Sequence[dict[str, Any]]) -> bool:
        """Write ``defaults`` only when nothing is stored yet; returns True when it seeded."""
        if self.load_all():
            return False
        if not self.save_all(defaults):
            return False
        try:
            self.storage.set_item(self.counter_key, str(len(defaults) + 1))
        except StorageError as exc:
            logger.error("Error setting counter %s: %s", self.counter_key, exc)
        logger.info("Initialized %d default records in %s", len(defaults), self.key)
        return True

    def clear(self) -> None:
        try:
            self.storage.remove_item(self.key)
            self.storage.remove_item(self.counter_key)
        except StorageError as exc:
            logger.error("Error clearing %s: %s", self.key, exc)

    def export_snapshot(self) -> str:
        return json.dumps(self.load_all(), ensure_ascii=False, indent=2)

    def import_snapshot(self, text: str) -> bool:
        """Replace the whole collection with a JSON array; the counter is left alone."""
        try:
            items = json.loads(text)
        except (TypeError, ValueError) as exc:
            logger.error("Error importing data into %s: %s", self.key, exc)
            return False
        if not isinstance(items, list):
            return False
        return self.save_all(items)

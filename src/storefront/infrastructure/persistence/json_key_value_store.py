"""JSON-file-backed implementation of KeyValueStore.

The whole store is one JSON object of string keys to string values,
rewritten on every change.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.repository.key_value_store import KeyValueStore


class JsonKeyValueStore(KeyValueStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- KeyValueStore interface ----------------------------------------------

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        entries = self._load()
        entries[key] = value
        self._persist(entries)

    def remove(self, key: str) -> None:
        entries = self._load()
        if entries.pop(key, None) is not None:
            self._persist(entries)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, str]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist(self, entries: dict[str, str]) -> None:
        self._file_path.write_text(
            json.dumps(entries, indent=2, sort_keys=True) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")

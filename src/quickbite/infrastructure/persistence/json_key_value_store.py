"""JSON-file-backed implementation of KeyValueStore."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from quickbite.domain.repository.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """All keys live in one JSON object on disk.

    Every write rewrites the whole file via a temporary sibling and an
    atomic rename, so readers see either the old or the new state.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- KeyValueStore interface ----------------------------------------------

    def get(self, key: str) -> str | None:
        return self._load_raw().get(key)

    def set(self, key: str, value: str) -> None:
        records = self._load_raw()
        records[key] = value
        self._persist_raw(records)

    def remove(self, key: str) -> None:
        records = self._load_raw()
        if records.pop(key, None) is not None:
            self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, str]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Store file %s unreadable (%s); treating as empty", self._file_path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Store file %s is not a JSON object; treating as empty", self._file_path)
            return {}
        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def _persist_raw(self, records: dict[str, str]) -> None:
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        tmp_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
        os.replace(tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")

"""Fail-closed decoding for values kept in the key-value store.

Every typed repository stores a small JSON document. Anything that
cannot be decoded into the expected schema is reported once and then
treated exactly like a missing key.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from quickbite.domain.repository.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class DecodeError(ValueError):
    """A stored value does not match its schema."""


def read_json(store: KeyValueStore, key: str) -> Any | None:
    """Parse the JSON stored under *key*; None if absent or not JSON."""
    raw = store.get(key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        report(key, "not valid JSON")
        return None


def write_json(store: KeyValueStore, key: str, value: Any) -> None:
    store.set(key, json.dumps(value, separators=(",", ":"), ensure_ascii=False))


def versioned(payload: Any, version: int = SCHEMA_VERSION) -> dict:
    """Return *payload* if it is a dict tagged with *version*."""
    if not isinstance(payload, dict):
        raise DecodeError("expected an object")
    if payload.get("v") != version:
        raise DecodeError(f"unsupported schema version {payload.get('v')!r}")
    return payload


def report(key: str, reason: object) -> None:
    logger.warning("Discarding stored value for %s: %s", key, reason)

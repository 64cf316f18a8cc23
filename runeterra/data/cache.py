"""Durable JSON file cache with caller-supplied TTLs."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import re
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS_RE = re.compile(r"[^A-Za-z0-9_.-]+")


def _epoch_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CacheEntry:
    key: str
    fetched_at_ms: int
    ttl_ms: int
    payload: Any

    def is_valid(self, now_ms: int) -> bool:
        return now_ms - self.fetched_at_ms < self.ttl_ms


class CacheStore:
    """One JSON record per key: ``{"fetched_at_ms": ..., "payload": ...}``.

    Records are replaced atomically, so concurrent readers see either the old
    or the new record. Unreadable records are cache misses.
    """

    def __init__(self, cache_dir: Path, *, clock: Callable[[], int] | None = None) -> None:
        self._dir = Path(cache_dir)
        self._clock = clock or _epoch_ms

    @property
    def dir(self) -> Path:
        return self._dir

    def now(self) -> int:
        return self._clock()

    def path_for(self, key: str) -> Path:
        safe = _UNSAFE_KEY_CHARS_RE.sub("_", key).strip("._") or "_"
        return self._dir / f"{safe}.json"

    def read(self, key: str, ttl_ms: int) -> CacheEntry | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("[Cache] Ignoring unreadable record %s: %s", path.name, exc)
            return None

        if not isinstance(raw, dict) or "payload" not in raw:
            return None
        fetched_at = raw.get("fetched_at_ms")
        if not isinstance(fetched_at, int) or isinstance(fetched_at, bool):
            return None
        return CacheEntry(key=key, fetched_at_ms=fetched_at, ttl_ms=ttl_ms, payload=raw["payload"])

    def read_valid(self, key: str, ttl_ms: int) -> Any | None:
        """Return the payload for ``key`` only if it has not expired."""
        entry = self.read(key, ttl_ms)
        if entry is None or not entry.is_valid(self.now()):
            return None
        return entry.payload

    def write(self, key: str, payload: Any) -> None:
        fetched_at = self.now()
        path = self.path_for(key)
        self._dir.mkdir(parents=True, exist_ok=True)
        record = json.dumps({"fetched_at_ms": fetched_at, "payload": payload}, ensure_ascii=False)

        fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=f".{path.stem}-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(record)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def aread_valid(self, key: str, ttl_ms: int) -> Any | None:
        return await asyncio.to_thread(self.read_valid, key, ttl_ms)

    async def awrite(self, key: str, payload: Any) -> None:
        """Write-through that never fails the caller; the payload is still usable."""
        try:
            await asyncio.to_thread(self.write, key, payload)
        except OSError as exc:
            logger.error("[Cache] Failed to write %s: %s", key, exc)

"""A thread-safe, time-expiring cache of raw response bodies."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    contents: bytes
    created_at: float = field(default_factory=time.monotonic)


class Cache:
    """Maps keys to byte strings; entries older than ``interval`` seconds are reaped.

    A background daemon thread reaps old entries every ``interval`` seconds
    until :meth:`close` is called.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any previous entry."""
        with self._lock:
            self._entries[key] = _Entry(bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the bytes stored under ``key``, or None if there are none."""
        log.debug("Checking cache for: %s", key)
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            log.debug("No data found in cache...")
            return None
        log.debug("Loading existing data...")
        return entry.contents

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def reap(self, now: float) -> None:
        """Drop every entry created before ``now - interval`` (monotonic seconds)."""
        cutoff = now - self.interval
        with self._lock:
            log.debug("Running check for old cache data...")
            stale = [k for k, e in self._entries.items() if e.created_at < cutoff]
            for key in stale:
                log.debug("Removing %s", key)
                del self._entries[key]

    def close(self) -> None:
        """Stop the background reaper."""
        self._stop.set()
        if self._reaper.is_alive() and self._reaper is not threading.current_thread():
            self._reaper.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self.interval):
            self.reap(time.monotonic())
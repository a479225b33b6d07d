"""A thread-safe byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class _Entry:
    created_at: datetime
    val: bytes


def _as_timedelta(value: timedelta | float | int) -> timedelta:
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected seconds or timedelta, got {type(value).__name__}")
    return timedelta(seconds=value)


class Cache:
    """Stores byte values by key and drops those older than the interval.

    A background thread reaps stale entries once per interval until the
    cache is closed.
    """

    def __init__(self, interval: timedelta | float | int) -> None:
        self._interval = _as_timedelta(interval)
        if self._interval <= timedelta(0):
            raise ValueError("cache interval must be positive")
        self._data: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(target=self._reap_loop, daemon=True)
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, stamped with the current time."""
        entry = _Entry(created_at=datetime.now(timezone.utc), val=bytes(val))
        with self._lock:
            self._data[key] = entry

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._data.get(key)
        return entry.val if entry is not None else None

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def reap(self, now: datetime, last: timedelta | float | int) -> None:
        """Remove every entry created before ``now - last``."""
        cutoff = now - _as_timedelta(last)
        with self._lock:
            stale = [k for k, v in self._data.items() if v.created_at < cutoff]
            for key in stale:
                del self._data[key]

    def _reap_loop(self) -> None:
        seconds = self._interval.total_seconds()
        while not self._stopped.wait(seconds):
            self.reap(datetime.now(timezone.utc), self._interval)

    def close(self) -> None:
        """Stop the background reaper."""
        self._stopped.set()
        if self._reaper.is_alive() and threading.current_thread() is not self._reaper:
            self._reaper.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
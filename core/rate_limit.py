"""
core/rate_limit.py
────────────────────────────────────────────────────────────────────────
Fixed-window admission control per (user, operation).

* A window opens on the first request after the previous one expired and
  lasts `window_seconds`; it is not aligned to wall-clock boundaries.
* At most `limit` requests are admitted per window.  Bursts straddling a
  window boundary can therefore reach 2 × limit.
* Entries live in an injected `RateLimitStore`.  The in-memory store is
  per process: a restart resets every counter and separate processes do
  not share counts.
* Expired entries are swept at most once per `sweep_interval` seconds,
  piggy-backing on `check()`; `sweep()` can also be called directly.

`check()` never raises for a denial; the caller branches on `allowed`.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Protocol

_LOG = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL = 5 * 60


@dataclass(frozen=True)
class RateLimitConfig:
    limit: int            # max admitted requests per window
    window_seconds: int

    def __post_init__(self) -> None:
        if self.limit < 1 or self.window_seconds < 1:
            raise ValueError(
                f"rate limit needs limit >= 1 and window_seconds >= 1, got {self}"
            )


@dataclass(frozen=True)
class RateLimitEntry:
    count: int
    reset_at: float       # absolute, same timebase as the limiter clock


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    limit: int
    remaining: int
    retry_after: int      # seconds; 0 when allowed


RATE_LIMITS: Dict[str, RateLimitConfig] = {
    # AI-backed, per day
    "analyze": RateLimitConfig(limit=20, window_seconds=86400),
    "score": RateLimitConfig(limit=30, window_seconds=86400),
    "weekly_report": RateLimitConfig(limit=5, window_seconds=86400),
    # CRUD, per hour
    "meals_read": RateLimitConfig(limit=120, window_seconds=3600),
    "meals_write": RateLimitConfig(limit=60, window_seconds=3600),
    "meals_delete": RateLimitConfig(limit=30, window_seconds=3600),
    "profile_read": RateLimitConfig(limit=120, window_seconds=3600),
    "profile_write": RateLimitConfig(limit=30, window_seconds=3600),
    "measurements": RateLimitConfig(limit=60, window_seconds=3600),
    "templates": RateLimitConfig(limit=60, window_seconds=3600),
}


# ──────────────────────────────────────────────────────────────────────
#  Store
# ──────────────────────────────────────────────────────────────────────
class RateLimitStore(Protocol):
    def get(self, key: str) -> RateLimitEntry | None: ...
    def set(self, key: str, entry: RateLimitEntry) -> None: ...
    def delete(self, key: str) -> None: ...
    def keys(self) -> Iterable[str]: ...


class InMemoryRateLimitStore:
    """Dict-backed store; lives as long as the process."""

    def __init__(self) -> None:
        self._entries: Dict[str, RateLimitEntry] = {}

    def get(self, key: str) -> RateLimitEntry | None:
        return self._entries.get(key)

    def set(self, key: str, entry: RateLimitEntry) -> None:
        self._entries[key] = entry

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


# ──────────────────────────────────────────────────────────────────────
#  Limiter
# ──────────────────────────────────────────────────────────────────────
class RateLimiter:
    def __init__(
        self,
        store: RateLimitStore | None = None,
        clock: Callable[[], float] = time.time,
        sweep_interval: float = DEFAULT_SWEEP_INTERVAL,
    ) -> None:
        self.store = store if store is not None else InMemoryRateLimitStore()
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._last_sweep = clock()
        # check() is read-modify-write on the store
        self._lock = threading.Lock()

    @staticmethod
    def key(user_id: str, operation: str) -> str:
        return f"{user_id}:{operation}"

    def sweep(self) -> int:
        """Drop every expired entry now. Returns how many were removed."""
        with self._lock:
            return self._sweep(self._clock())

    def _sweep(self, now: float) -> int:
        self._last_sweep = now
        stale = []
        for key in list(self.store.keys()):
            entry = self.store.get(key)
            if entry is not None and now > entry.reset_at:
                stale.append(key)
        for key in stale:
            self.store.delete(key)
        _LOG.debug("rate-limit sweep removed %d entries", len(stale))
        return len(stale)

    def check(self, user_id: str, operation: str, config: RateLimitConfig) -> RateLimitResult:
        with self._lock:
            now = self._clock()
            if now - self._last_sweep >= self._sweep_interval:
                self._sweep(now)

            key = self.key(user_id, operation)
            entry = self.store.get(key)

            if entry is None or now > entry.reset_at:
                self.store.set(key, RateLimitEntry(count=1, reset_at=now + config.window_seconds))
                return RateLimitResult(
                    allowed=True,
                    limit=config.limit,
                    remaining=config.limit - 1,
                    retry_after=0,
                )

            if entry.count < config.limit:
                count = entry.count + 1
                self.store.set(key, RateLimitEntry(count=count, reset_at=entry.reset_at))
                return RateLimitResult(
                    allowed=True,
                    limit=config.limit,
                    remaining=config.limit - count,
                    retry_after=0,
                )

            # at now == reset_at the window is still open; report at least 1s
            retry_after = max(1, math.ceil(entry.reset_at - now))
            _LOG.info(
                "rate limit hit: user=%s op=%s retry_after=%ss", user_id, operation, retry_after
            )
            return RateLimitResult(
                allowed=False,
                limit=config.limit,
                remaining=0,
                retry_after=retry_after,
            )


def rate_limit_headers(result: RateLimitResult) -> dict[str, str]:
    headers = {
        "X-RateLimit-Limit": str(result.limit),
        "X-RateLimit-Remaining": str(result.remaining),
    }
    if not result.allowed:
        headers["Retry-After"] = str(result.retry_after)
    return headers

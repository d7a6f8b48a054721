"""Timeout configuration for the bridge.

Centralizes the timeout values used by the execution adapter (per-call
``httpx`` transport) and by the client handle (lock acquisition). Values are
parsed from the environment once and cached; tests may call
``reset_timeout_config`` after changing the environment.

Supported environment variables (all optional, positive floats):
    ALCHEMIND_TIMEOUT_HTTP_SECONDS
    ALCHEMIND_TIMEOUT_CONNECT_SECONDS
    ALCHEMIND_TIMEOUT_LOCK_SECONDS
"""
from __future__ import annotations

from dataclasses import dataclass
import os

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool timeout for one provider call.
        connect_timeout_seconds: Connection establishment timeout.
        lock_timeout_seconds: Maximum wait for exclusive access to a client
            handle before the call fails with ``LockError``.
    """

    http_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0
    lock_timeout_seconds: float = 60.0

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout`` for a per-call transport."""
        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds)


_CACHED: TimeoutConfig | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float with a fallback default."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED  # noqa: PLW0603 - documented module cache
    if _CACHED is None:
        _CACHED = TimeoutConfig(
            http_timeout_seconds=_parse_env_float("ALCHEMIND_TIMEOUT_HTTP_SECONDS", 30.0),
            connect_timeout_seconds=_parse_env_float("ALCHEMIND_TIMEOUT_CONNECT_SECONDS", 10.0),
            lock_timeout_seconds=_parse_env_float("ALCHEMIND_TIMEOUT_LOCK_SECONDS", 60.0),
        )
    return _CACHED


def reset_timeout_config() -> None:
    """Drop the cached configuration so the next read re-parses the environment."""
    global _CACHED  # noqa: PLW0603
    _CACHED = None


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "reset_timeout_config",
]

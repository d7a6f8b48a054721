"""Client handle: a shareable, lock-guarded reference to a network client.

A handle is created once per host-side client object and reused across
calls. The wrapped client is never mutated after construction; the lock
serializes in-flight operations so at most one network exchange runs per
handle at a time. Concurrent callers queue on the lock; a caller that waits
longer than ``lock_timeout_seconds`` gets a ``LockError``.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from openai import AsyncOpenAI

from ..config.defaults import DEFAULT_BASE_URL
from .client_protocol import BridgeClient
from .errors import LockError
from .timeouts import get_timeout_config


class ClientHandle:
    """Opaque handle around one configured client.

    Parameters:
        client: Object satisfying :class:`BridgeClient`.
        default_model: Chat model used when a call does not name one.
        base_url: Endpoint the client was configured with (informational).
    """

    def __init__(
        self,
        client: BridgeClient,
        *,
        default_model: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> None:
        self._client = client
        self._lock = threading.Lock()
        self.default_model = default_model
        self.base_url = base_url

    @classmethod
    def create(
        cls,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        default_model: Optional[str] = None,
    ) -> "ClientHandle":
        """Build an ``AsyncOpenAI`` client for ``api_key``/``base_url`` and wrap it.

        SDK retries are disabled; retry policy belongs to the caller. The
        client timeout follows ``TimeoutConfig``.
        """
        client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=0,
            timeout=get_timeout_config().to_httpx(),
        )
        return cls(client, default_model=default_model, base_url=base_url)

    def locked(self) -> bool:
        """Return True while an operation holds the handle."""
        return self._lock.locked()

    @contextmanager
    def acquire(self, *, operation: Optional[str] = None) -> Iterator[BridgeClient]:
        """Hold exclusive access to the client for the duration of the block.

        Raises:
            LockError: The lock was not obtained within the configured timeout.
        """
        timeout = get_timeout_config().lock_timeout_seconds
        if not self._lock.acquire(timeout=timeout):
            raise LockError(
                message=f"Failed to lock client: not released within {timeout}s",
                operation=operation,
            )
        try:
            yield self._client
        finally:
            self._lock.release()

    def __repr__(self) -> str:
        return f"ClientHandle(base_url={self.base_url!r}, default_model={self.default_model!r})"


def create_client(
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    *,
    default_model: Optional[str] = None,
) -> ClientHandle:
    """Construct a handle around a client configured with the given credentials."""
    return ClientHandle.create(api_key, base_url, default_model=default_model)


__all__ = ["ClientHandle", "create_client"]

"""Synchronous execution adapter.

Purpose:
- Run exactly one asynchronous network exchange to completion from a plain
  synchronous call site, so host code never sees a coroutine or event loop.

Mechanism:
- Each call creates its own single-use event loop (no reuse, no pooling) and
  a per-call ``httpx`` transport bound to that loop. The handle's client is
  re-targeted onto the transport with ``with_options(http_client=..., timeout=...)``, so
  the shared client never holds connections from a loop that has been
  closed.
- The handle lock is held from before the request is sent until its result
  is available.

Failure classes:
- ``ContextCreationError``: the loop could not be created, or the caller is
  itself running inside an event loop (blocking there would deadlock).
- ``LockError``: propagated from :meth:`ClientHandle.acquire`.
- ``TransportError``: any non-bridge exception raised by the operation,
  classified with :func:`classify_exception` and carrying the provider text.
- Bridge errors raised by the operation (e.g. ``EmptyResultError``) pass
  through unchanged.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional, TypeVar

import openai

from .client_protocol import BridgeClient
from .errors import BridgeError, ContextCreationError, TransportError, classify_exception
from .handle import ClientHandle
from .logging import LogContext, get_logger, normalized_log_event
from .timeouts import get_timeout_config

T = TypeVar("T")

Operation = Callable[[BridgeClient], Awaitable[T]]

_logger = get_logger("alchemind.execution")


def new_execution_context(operation: Optional[str] = None) -> asyncio.AbstractEventLoop:
    """Create a fresh event loop dedicated to one call.

    Raises:
        ContextCreationError: A loop is already running in this thread, or
            the loop could not be allocated.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise ContextCreationError(
            message="Failed to create execution context: called from a running event loop",
            operation=operation,
        )
    try:
        return asyncio.new_event_loop()
    except (OSError, RuntimeError) as exc:
        raise ContextCreationError(
            message=f"Failed to create execution context: {exc}",
            operation=operation,
            raw=exc,
        ) from exc


def _close_execution_context(loop: asyncio.AbstractEventLoop) -> None:
    try:
        loop.run_until_complete(loop.shutdown_asyncgens())
    finally:
        loop.close()


async def _run_isolated(client: BridgeClient, operation: Operation[T], name: Optional[str]) -> T:
    """Await ``operation`` against a view of ``client`` using a per-call transport."""
    timeout = get_timeout_config().to_httpx()
    async with openai.DefaultAsyncHttpxClient(timeout=timeout) as http_client:
        # SDK clients carry a per-request timeout that overrides the transport default
        scoped = client.with_options(http_client=http_client, timeout=timeout)
        try:
            return await operation(scoped)
        except BridgeError:
            raise
        except Exception as exc:  # noqa: BLE001 - every provider failure is classified
            raise TransportError(
                code=classify_exception(exc),
                message=f"API request failed: {exc}",
                operation=name,
                raw=exc,
            ) from exc


def run_blocking(
    handle: ClientHandle,
    operation: Operation[T],
    *,
    ctx: LogContext,
    logger: Optional[logging.Logger] = None,
    outcome_code: Optional[Callable[[T], Optional[str]]] = None,
) -> T:
    """Execute ``operation`` to completion and return its result synchronously.

    Parameters:
        handle: Client handle; locked for the duration of the exchange.
        operation: Coroutine function receiving the (transport-scoped) client.
        ctx: Log context; ``ctx.operation`` names the call in events and errors.
        logger: Optional logger; defaults to ``alchemind.execution``.
        outcome_code: Optional callable returning an error code for a result
            that reports failure in-band (streaming passes). When it returns a
            code, the ``.end`` event carries it and is logged at WARNING.

    Returns:
        Whatever ``operation`` returns.
    """
    log = logger or _logger
    name = ctx.operation
    loop = new_execution_context(name)
    t0 = time.perf_counter()
    normalized_log_event(log, f"{name}.start", ctx, phase="start")
    try:
        with handle.acquire(operation=name) as client:
            result = loop.run_until_complete(_run_isolated(client, operation, name))
    except BridgeError as exc:
        normalized_log_event(
            log,
            f"{name}.error",
            ctx,
            phase="finalize",
            error_code=exc.code.value,
            error=exc.message,
            error_type=type(exc).__name__,
            latency_ms=(time.perf_counter() - t0) * 1000.0,
            level=logging.WARNING,
        )
        raise
    finally:
        _close_execution_context(loop)
    error_code = outcome_code(result) if outcome_code is not None else None
    normalized_log_event(
        log,
        f"{name}.end",
        ctx,
        phase="finalize",
        error_code=error_code,
        latency_ms=(time.perf_counter() - t0) * 1000.0,
        level=logging.WARNING if error_code else logging.INFO,
    )
    return result


__all__ = ["Operation", "new_execution_context", "run_blocking"]

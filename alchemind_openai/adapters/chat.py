"""Chat adapters: blocking completion and the streaming chunk emulator.

Both adapters translate host messages with ``build_chat_request`` and run the
exchange through ``run_blocking``. Completion returns the first choice's text;
streaming performs one bounded polling pass and reports through a notifier.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Optional

from ..base.client_protocol import BridgeClient
from ..base.dto.chat import ChatCompletionRequest
from ..base.errors import BridgeError, ContextCreationError, EmptyResultError, RequestBuildError, ValidationError
from ..base.execution import run_blocking
from ..base.handle import ClientHandle
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.notifications import Notifier
from ..base.streaming import ACCEPTED, StreamPass, StreamState, deliver, poll_stream
from ..base.translator import build_chat_request
from ..config.defaults import DEFAULT_MAX_FRAMES

_logger = get_logger("alchemind.chat")


def _resolve_model(handle: ClientHandle, model: Optional[str], operation: str) -> str:
    resolved = model or handle.default_model
    if not resolved:
        raise RequestBuildError(
            message="No model specified. Provide a model via the client or as an option.",
            operation=operation,
        )
    return resolved


def _build(operation: str, *args: Any, **kwargs: Any) -> ChatCompletionRequest:
    try:
        return build_chat_request(*args, **kwargs)
    except RequestBuildError as exc:
        exc.operation = exc.operation or operation
        raise


def extract_text(completion: Any) -> str:
    """Return the first choice's message content (``""`` when it is ``None``).

    Raises:
        EmptyResultError: The completion has no choices.
    """
    choices = getattr(completion, "choices", None)
    if not choices:
        raise EmptyResultError(operation="chat")
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else ""


def complete_chat(
    handle: ClientHandle,
    messages: Iterable[Any],
    model: Optional[str] = None,
    *,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
) -> str:
    """Run a non-streaming chat completion and return the first choice's text.

    Parameters:
        handle: Client handle from ``create_client``.
        messages: Host messages (mappings, objects or ``(role, content)`` pairs).
        model: Model identifier; falls back to the handle's default model.
        temperature: Optional sampling temperature in [0, 2].
        max_tokens: Optional positive completion token limit.

    Raises:
        RequestBuildError: Messages or request parameters are invalid.
        ContextCreationError, LockError, TransportError, EmptyResultError.
    """
    resolved = _resolve_model(handle, model, "chat")
    request = _build("chat", messages, resolved, False, temperature=temperature, max_tokens=max_tokens)
    ctx = LogContext(operation="chat", model=resolved)

    async def _complete(client: BridgeClient) -> str:
        completion = await client.chat.completions.create(**request.to_params())
        return extract_text(completion)

    return run_blocking(handle, _complete, ctx=ctx, logger=_logger)


def stream_chat_chunk(
    handle: ClientHandle,
    messages: Iterable[Any],
    model: Optional[str],
    caller: Notifier,
    correlation: Hashable,
    *,
    max_frames: int = DEFAULT_MAX_FRAMES,
) -> str:
    """Perform one bounded streaming pass and notify ``caller``.

    Every collected fragment is sent as a ``chunk`` notification, followed by
    exactly one ``done`` or ``error`` notification, all tagged with
    ``correlation``. Calling again restarts the exchange from the first frame.

    Returns:
        ``ACCEPTED``; failures other than context creation arrive as an
        ``error`` notification.

    Raises:
        ContextCreationError: No execution context could be created.
        ValidationError: ``max_frames`` is not a positive integer.
    """
    if isinstance(max_frames, bool) or not isinstance(max_frames, int) or max_frames < 1:
        raise ValidationError(message=f"max_frames must be a positive integer, got {max_frames!r}", operation="stream")
    ctx = LogContext(operation="stream", model=model or handle.default_model, correlation=str(correlation))
    try:
        resolved = _resolve_model(handle, model, "stream")
        request = _build("stream", messages, resolved, True)
        result: StreamPass = run_blocking(
            handle,
            lambda client: poll_stream(client, request, max_frames=max_frames),
            ctx=ctx,
            logger=_logger,
            outcome_code=lambda p: p.error_code,
        )
    except ContextCreationError:
        raise
    except BridgeError as exc:
        result = StreamPass.failed(exc.message, exc.code.value)

    emitted = deliver(result, caller, correlation)
    normalized_log_event(
        _logger,
        "stream.finalize",
        ctx,
        phase="finalize",
        error_code=result.error_code,
        emitted=emitted,
        frames=result.frames_read,
        chunks=len(result.fragments),
        state=result.state.value,
        truncated=result.truncated,
        level=logging.WARNING if result.state is StreamState.ERROR else logging.INFO,
    )
    return ACCEPTED


__all__ = ["complete_chat", "stream_chat_chunk", "extract_text"]

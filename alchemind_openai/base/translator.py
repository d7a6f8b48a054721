"""Message/request translation.

Converts host-supplied role/content pairs into role-specific message
variants and assembles the chat request. Translation is pure: it performs no
I/O and only fails on validation.

Accepted message shapes
-----------------------
- mappings with ``role`` and ``content`` keys;
- objects exposing ``role`` and ``content`` attributes (dataclasses,
  pydantic models, named tuples);
- ``(role, content)`` pairs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from .dto.chat import ChatCompletionRequest, ChatMessage, message_variant
from .errors import RequestBuildError

_MISSING = object()


def _field(message: Any, name: str) -> Any:
    if isinstance(message, Mapping):
        return message.get(name, _MISSING)
    return getattr(message, name, _MISSING)


def _role_and_content(message: Any) -> Tuple[Any, Any]:
    if isinstance(message, tuple) and len(message) == 2:
        return message[0], message[1]
    role = _field(message, "role")
    content = _field(message, "content")
    if content is _MISSING:
        raise RequestBuildError(message=f"Failed to build message: no content in {message!r}")
    return (None if role is _MISSING else role), content


def _role_name(role: Any) -> Any:
    """Normalize enum/bytes roles to their string value; anything else is returned as-is."""
    value = getattr(role, "value", role)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def to_message(message: Any) -> ChatMessage:
    """Translate one host message into its provider variant (user by default).

    Raises:
        RequestBuildError: The message has no content or its content is not a string.
    """
    role, content = _role_and_content(message)
    variant = message_variant(_role_name(role))
    try:
        return variant(content=content)
    except PydanticValidationError as exc:
        kind = variant.model_fields["role"].default
        raise RequestBuildError(
            message=f"Failed to build {kind} message: {exc.errors()[0]['msg']}",
            raw=exc,
        ) from exc


def to_messages(messages: Iterable[Any]) -> List[ChatMessage]:
    """Translate a sequence of host messages, preserving order.

    Raises:
        RequestBuildError: ``messages`` is not iterable, or a message fails.
    """
    try:
        items = list(messages)
    except TypeError as exc:
        raise RequestBuildError(
            message="Failed to build request: messages must be a sequence",
            raw=exc,
        ) from exc
    return [to_message(m) for m in items]


def build_chat_request(
    messages: Iterable[Any],
    model: Optional[str],
    streaming: bool = False,
    *,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
) -> ChatCompletionRequest:
    """Assemble a chat completion request.

    Raises:
        RequestBuildError: A message failed to translate, or the aggregate
            request is invalid (missing model, no messages, out-of-range
            sampling parameters).
    """
    chat_messages = to_messages(messages)
    try:
        return ChatCompletionRequest(
            model=model,
            messages=chat_messages,
            stream=streaming,
            temperature=temperature,
            max_tokens=max_tokens,
        )
    except PydanticValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'request'}: {err['msg']}" for err in exc.errors()
        )
        raise RequestBuildError(message=f"Failed to build request: {details}", raw=exc) from exc


__all__ = ["to_message", "to_messages", "build_chat_request"]

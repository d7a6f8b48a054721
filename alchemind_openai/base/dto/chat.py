"""
Pydantic DTOs for chat completion requests.

Purpose
-------
Role-specific message variants and the aggregate chat request sent to
``chat.completions.create``. Validation happens here so a malformed message
or request fails before any network I/O.

External dependencies: Pydantic only.

Failure modes
-------------
Construction raises ``pydantic.ValidationError``; the translator converts it
into ``RequestBuildError`` at the bridge edge.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr


Role = Literal["system", "assistant", "user"]


class _MessageBase(BaseModel):
    """Common shape of every message variant."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    content: StrictStr

    def to_param(self) -> Dict[str, str]:
        """Return the provider's JSON shape for this message."""
        return {"role": self.role, "content": self.content}  # type: ignore[attr-defined]


class SystemMessage(_MessageBase):
    role: Literal["system"] = "system"


class AssistantMessage(_MessageBase):
    role: Literal["assistant"] = "assistant"


class UserMessage(_MessageBase):
    role: Literal["user"] = "user"


ChatMessage = Annotated[
    Union[SystemMessage, AssistantMessage, UserMessage],
    Field(discriminator="role"),
]

_VARIANTS: Dict[str, Type[_MessageBase]] = {
    "system": SystemMessage,
    "assistant": AssistantMessage,
}


def message_variant(role: Any) -> Type[_MessageBase]:
    """Return the message class for ``role``; anything unrecognized maps to ``UserMessage``."""
    return _VARIANTS.get(role, UserMessage) if isinstance(role, str) else UserMessage


class ChatCompletionRequest(BaseModel):
    """Chat completion request assembled from translated messages.

    Parameters:
        model: Target model identifier (non-empty).
        messages: Ordered, non-empty list of message variants.
        stream: Whether the provider should stream the response.
        temperature: If provided, within [0.0, 2.0].
        max_tokens: If provided, positive.
    """

    model_config = ConfigDict(frozen=True)

    model: StrictStr = Field(..., min_length=1)
    messages: List[ChatMessage] = Field(..., min_length=1)
    stream: bool = False
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    max_tokens: Optional[int] = Field(default=None, gt=0)

    def to_params(self) -> Dict[str, Any]:
        """Return keyword arguments for ``chat.completions.create``."""
        params: Dict[str, Any] = {
            "model": self.model,
            "messages": [m.to_param() for m in self.messages],
        }
        if self.stream:
            params["stream"] = True
        if self.temperature is not None:
            params["temperature"] = self.temperature
        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens
        return params


__all__ = [
    "Role",
    "SystemMessage",
    "AssistantMessage",
    "UserMessage",
    "ChatMessage",
    "message_variant",
    "ChatCompletionRequest",
]

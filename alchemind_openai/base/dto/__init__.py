"""Request DTOs (pydantic) for the chat and audio endpoints."""

from .chat import (
    AssistantMessage,
    ChatCompletionRequest,
    ChatMessage,
    Role,
    SystemMessage,
    UserMessage,
    message_variant,
)
from .audio import (
    SpeechFormat,
    SpeechModel,
    SpeechRequest,
    TranscriptionFormat,
    TranscriptionRequest,
    Voice,
)

__all__ = [
    "AssistantMessage",
    "ChatCompletionRequest",
    "ChatMessage",
    "Role",
    "SystemMessage",
    "UserMessage",
    "message_variant",
    "SpeechFormat",
    "SpeechModel",
    "SpeechRequest",
    "TranscriptionFormat",
    "TranscriptionRequest",
    "Voice",
]

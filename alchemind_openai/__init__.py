"""alchemind_openai: synchronous bridge to OpenAI-compatible APIs.

Chat completion, emulated chat streaming, audio transcription and speech
synthesis, callable from plain synchronous code.
"""

from .base.errors import (
    BridgeError,
    ConfigurationError,
    ContextCreationError,
    DecodeError,
    EmptyResultError,
    ErrorCode,
    LockError,
    RequestBuildError,
    TransportError,
    ValidationError,
)
from .base.notifications import CallbackNotifier, Notification, NotificationTag, Notifier, QueueNotifier
from .base.options import ABSENT
from .bridge import (
    ACCEPTED,
    ClientHandle,
    complete_chat,
    create_client,
    stream_chat_chunk,
    synthesize_speech,
    transcribe_audio,
)
from .client import OpenAIBridge

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ABSENT",
    "ACCEPTED",
    "OpenAIBridge",
    "ClientHandle",
    "create_client",
    "complete_chat",
    "stream_chat_chunk",
    "transcribe_audio",
    "synthesize_speech",
    "CallbackNotifier",
    "Notification",
    "NotificationTag",
    "Notifier",
    "QueueNotifier",
    "BridgeError",
    "ConfigurationError",
    "ContextCreationError",
    "DecodeError",
    "EmptyResultError",
    "ErrorCode",
    "LockError",
    "RequestBuildError",
    "TransportError",
    "ValidationError",
]

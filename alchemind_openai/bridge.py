"""Flat bridge API.

Synchronous entry points a host calls with a client handle:

    handle = create_client(api_key)
    text = complete_chat(handle, [{"role": "user", "content": "hi"}], "gpt-4o-mini")
    stream_chat_chunk(handle, messages, "gpt-4o-mini", QueueNotifier(), "req-1")
    transcript = transcribe_audio(handle, wav_bytes, {"language": "en"})
    audio = synthesize_speech(handle, "Hello", {"voice": "nova"})

Every failure is raised as a :class:`~alchemind_openai.base.errors.BridgeError`
subclass, except streaming failures, which arrive as ``error`` notifications.
"""

from __future__ import annotations

from .adapters import complete_chat, stream_chat_chunk, synthesize_speech, transcribe_audio
from .base.handle import ClientHandle, create_client
from .base.streaming import ACCEPTED

__all__ = [
    "ACCEPTED",
    "ClientHandle",
    "create_client",
    "complete_chat",
    "stream_chat_chunk",
    "transcribe_audio",
    "synthesize_speech",
]

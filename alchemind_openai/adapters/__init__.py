"""Operation adapters wiring translation, execution and result extraction."""

from .chat import complete_chat, stream_chat_chunk
from .speech import synthesize_speech
from .transcription import transcribe_audio

__all__ = ["complete_chat", "stream_chat_chunk", "transcribe_audio", "synthesize_speech"]

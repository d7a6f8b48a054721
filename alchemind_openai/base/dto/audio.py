"""
Pydantic DTOs and closed enumerations for the audio endpoints.

The enums mirror the provider's accepted values; the request models carry
the numeric bounds the provider enforces so out-of-range values fail before
any upload.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBytes, StrictStr

from ...config.defaults import MAX_SPEECH_INPUT_CHARS, MAX_SPEECH_SPEED, MIN_SPEECH_SPEED


class TranscriptionFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"


class SpeechModel(str, Enum):
    TTS_1 = "tts-1"
    TTS_1_HD = "tts-1-hd"


class Voice(str, Enum):
    ALLOY = "alloy"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"


class SpeechFormat(str, Enum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"


class TranscriptionRequest(BaseModel):
    """Transcription upload with its decoded options."""

    model_config = ConfigDict(frozen=True)

    file_name: StrictStr = Field(..., min_length=1)
    audio: StrictBytes
    model: StrictStr = Field(..., min_length=1)
    language: Optional[str] = None
    prompt: Optional[str] = None
    response_format: TranscriptionFormat = TranscriptionFormat.TEXT
    temperature: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    def file(self) -> Tuple[str, bytes]:
        """Return the ``(name, content)`` pair the SDK accepts as an upload."""
        return (self.file_name, self.audio)

    def to_params(self) -> Dict[str, Any]:
        """Return keyword arguments for ``audio.transcriptions.create``."""
        params: Dict[str, Any] = {
            "file": self.file(),
            "model": self.model,
            "response_format": self.response_format.value,
        }
        if self.language is not None:
            params["language"] = self.language
        if self.prompt is not None:
            params["prompt"] = self.prompt
        if self.temperature is not None:
            params["temperature"] = self.temperature
        return params


class SpeechRequest(BaseModel):
    """Speech synthesis request."""

    model_config = ConfigDict(frozen=True)

    input: StrictStr = Field(..., min_length=1, max_length=MAX_SPEECH_INPUT_CHARS)
    model: SpeechModel = SpeechModel.TTS_1
    voice: Voice = Voice.ALLOY
    response_format: SpeechFormat = SpeechFormat.MP3
    speed: Optional[float] = Field(default=None, ge=MIN_SPEECH_SPEED, le=MAX_SPEECH_SPEED)

    def to_params(self) -> Dict[str, Any]:
        """Return keyword arguments for ``audio.speech.create``."""
        params: Dict[str, Any] = {
            "input": self.input,
            "model": self.model.value,
            "voice": self.voice.value,
            "response_format": self.response_format.value,
        }
        if self.speed is not None:
            params["speed"] = self.speed
        return params


__all__ = [
    "TranscriptionFormat",
    "SpeechModel",
    "Voice",
    "SpeechFormat",
    "TranscriptionRequest",
    "SpeechRequest",
]

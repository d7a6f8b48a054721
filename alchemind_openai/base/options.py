"""Option decoding for the audio adapters.

Host callers pass options as a loosely typed mapping. This module turns that
mapping into typed, defaulted option structs in one pure step:

    decode_transcription_options(mapping) -> (TranscriptionOptions, [DecodeError])
    decode_speech_options(mapping) -> (SpeechOptions, [DecodeError])

Rules
-----
- A missing key, ``None`` and the :data:`ABSENT` marker are equivalent: the
  option takes its default.
- String options must be ``str``; numeric options accept ``int`` or
  ``float`` (never ``bool``). Anything else is a ``DecodeError`` naming the
  key, and that option keeps its default.
- Enum-typed options tolerate unknown strings by falling back to the
  default. This is deliberate; the fallback is logged at DEBUG level only.
- Unknown keys are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import StrictFloat, StrictInt, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..config.defaults import DEFAULT_TRANSCRIPTION_MODEL
from .dto.audio import SpeechFormat, SpeechModel, TranscriptionFormat, Voice
from .errors import DecodeError
from .logging import get_logger, normalized_log_event

E = TypeVar("E", bound=Enum)

_logger = get_logger("alchemind.options")


class _Absent:
    """Marker type for "option not provided"."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

_STRING = TypeAdapter(StrictStr)
_NUMBER = TypeAdapter(Union[StrictInt, StrictFloat])


def is_absent(value: Any) -> bool:
    """Return True for the values that mean "not provided"."""
    return value is None or value is ABSENT


@dataclass(frozen=True)
class TranscriptionOptions:
    model: str = DEFAULT_TRANSCRIPTION_MODEL
    language: Optional[str] = None
    prompt: Optional[str] = None
    response_format: TranscriptionFormat = TranscriptionFormat.TEXT
    temperature: Optional[float] = None


@dataclass(frozen=True)
class SpeechOptions:
    model: SpeechModel = SpeechModel.TTS_1
    voice: Voice = Voice.ALLOY
    response_format: SpeechFormat = SpeechFormat.MP3
    speed: Optional[float] = None


class _Decoder:
    """Collects decoded values and errors for one options mapping."""

    def __init__(self, options: Optional[Mapping[str, Any]], operation: str) -> None:
        self.options: Mapping[str, Any] = options or {}
        self.operation = operation
        self.errors: List[DecodeError] = []

    def _diagnostics(self) -> str:
        return f"Opts: {sorted(str(k) for k in self.options)}"

    def _decode(self, key: str, adapter: TypeAdapter, target: str) -> Any:
        value = self.options.get(key, ABSENT)
        if is_absent(value):
            return ABSENT
        try:
            return adapter.validate_python(value)
        except PydanticValidationError as exc:
            self.errors.append(
                DecodeError(
                    message=(
                        f"Failed to decode {key}: expected {target}, got "
                        f"{type(value).__name__} {value!r}. {self._diagnostics()}"
                    ),
                    operation=self.operation,
                    key=key,
                    raw=exc,
                )
            )
            return ABSENT

    def string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._decode(key, _STRING, "string")
        return default if value is ABSENT else value

    def number(self, key: str) -> Optional[float]:
        value = self._decode(key, _NUMBER, "float")
        return None if value is ABSENT else float(value)

    def choice(self, key: str, enum_cls: Type[E], default: E) -> E:
        raw = self._decode(key, _STRING, "string")
        if raw is ABSENT:
            return default
        try:
            return enum_cls(raw)
        except ValueError:
            normalized_log_event(
                _logger,
                "options.fallback",
                None,
                phase="decode",
                operation=self.operation,
                key=key,
                value=raw,
                fallback=default.value,
                level=logging.DEBUG,
            )
            return default


def decode_transcription_options(
    options: Optional[Mapping[str, Any]],
    *,
    operation: str = "transcribe_audio",
) -> Tuple[TranscriptionOptions, List[DecodeError]]:
    """Decode a transcription options mapping; never raises."""
    d = _Decoder(options, operation)
    decoded = TranscriptionOptions(
        model=d.string("model", DEFAULT_TRANSCRIPTION_MODEL),
        language=d.string("language"),
        prompt=d.string("prompt"),
        response_format=d.choice("response_format", TranscriptionFormat, TranscriptionFormat.TEXT),
        temperature=d.number("temperature"),
    )
    return decoded, d.errors


def decode_speech_options(
    options: Optional[Mapping[str, Any]],
    *,
    operation: str = "synthesize_speech",
) -> Tuple[SpeechOptions, List[DecodeError]]:
    """Decode a speech options mapping; never raises."""
    d = _Decoder(options, operation)
    decoded = SpeechOptions(
        model=d.choice("model", SpeechModel, SpeechModel.TTS_1),
        voice=d.choice("voice", Voice, Voice.ALLOY),
        response_format=d.choice("response_format", SpeechFormat, SpeechFormat.MP3),
        speed=d.number("speed"),
    )
    return decoded, d.errors


def raise_first(errors: List[DecodeError]) -> None:
    """Raise the first decode error, if any."""
    if errors:
        raise errors[0]


__all__ = [
    "ABSENT",
    "is_absent",
    "TranscriptionOptions",
    "SpeechOptions",
    "decode_transcription_options",
    "decode_speech_options",
    "raise_first",
]

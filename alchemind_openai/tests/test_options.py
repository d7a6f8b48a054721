from __future__ import annotations

import pytest

from alchemind_openai.base.dto.audio import SpeechFormat, SpeechModel, TranscriptionFormat, Voice
from alchemind_openai.base.errors import DecodeError
from alchemind_openai.base.options import (
    ABSENT,
    decode_speech_options,
    decode_transcription_options,
    raise_first,
)


def test_transcription_defaults():
    opts, errors = decode_transcription_options(None)
    assert errors == []
    assert opts.model == "whisper-1"
    assert opts.response_format is TranscriptionFormat.TEXT
    assert opts.language is None and opts.prompt is None and opts.temperature is None


def test_absent_none_and_missing_are_equivalent():
    a, _ = decode_speech_options({})
    b, _ = decode_speech_options({"voice": None, "speed": None})
    c, _ = decode_speech_options({"voice": ABSENT, "speed": ABSENT})
    assert a == b == c


def test_wrong_type_names_the_key():
    opts, errors = decode_transcription_options({"language": 7, "prompt": "p"})
    assert len(errors) == 1
    assert errors[0].key == "language"
    assert "language" in errors[0].message
    assert opts.language is None
    assert opts.prompt == "p"
    with pytest.raises(DecodeError):
        raise_first(errors)


def test_numbers_accept_int_and_float_but_not_bool():
    opts, errors = decode_speech_options({"speed": 2})
    assert errors == [] and opts.speed == 2.0
    _, errors = decode_speech_options({"speed": True})
    assert [e.key for e in errors] == ["speed"]
    _, errors = decode_transcription_options({"temperature": "0.2"})
    assert [e.key for e in errors] == ["temperature"]


def test_enum_values_decode():
    opts, _ = decode_speech_options({"voice": "nova", "model": "tts-1-hd", "response_format": "flac"})
    assert opts.voice is Voice.NOVA
    assert opts.model is SpeechModel.TTS_1_HD
    assert opts.response_format is SpeechFormat.FLAC


def test_unknown_enum_falls_back_and_logs(log_records):
    opts, errors = decode_speech_options({"voice": "robot"})
    assert errors == []
    assert opts.voice is Voice.ALLOY
    fallbacks = [e for e in log_records.events() if e["event"] == "options.fallback"]
    assert fallbacks and fallbacks[0]["key"] == "voice"
    assert fallbacks[0]["fallback"] == "alloy"


def test_unknown_keys_are_ignored():
    _, errors = decode_speech_options({"colour": "blue"})
    assert errors == []

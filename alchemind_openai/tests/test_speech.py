from __future__ import annotations

from types import SimpleNamespace

import pytest

from alchemind_openai.base.errors import DecodeError, RequestBuildError, TransportError
from alchemind_openai.bridge import synthesize_speech


def test_defaults(handle, stub_client):
    stub_client.speech.response = b"ID3audio"
    assert synthesize_speech(handle, "Hello") == b"ID3audio"
    assert stub_client.speech.calls[0] == {
        "input": "Hello",
        "model": "tts-1",
        "voice": "alloy",
        "response_format": "mp3",
    }


def test_known_voice_and_binary_response(handle, stub_client):
    stub_client.speech.response = SimpleNamespace(content=b"OggS")
    out = synthesize_speech(handle, "Hi", {"voice": "nova", "response_format": "opus", "speed": 1.5})
    assert out == b"OggS"
    sent = stub_client.speech.calls[0]
    assert sent["voice"] == "nova"
    assert sent["response_format"] == "opus"
    assert sent["speed"] == 1.5


def test_unknown_voice_falls_back_to_alloy(handle, stub_client):
    stub_client.speech.response = b"x"
    synthesize_speech(handle, "Hi", {"voice": "robot", "model": "tts-9"})
    sent = stub_client.speech.calls[0]
    assert sent["voice"] == "alloy"
    assert sent["model"] == "tts-1"


@pytest.mark.parametrize("speed", [0.1, 5, 4.01])
def test_out_of_range_speed_fails_before_request(handle, stub_client, speed):
    with pytest.raises(RequestBuildError) as ei:
        synthesize_speech(handle, "Hi", {"speed": speed})
    assert "Input text length: 2" in ei.value.message
    assert stub_client.speech.calls == []


@pytest.mark.parametrize("text", ["", "x" * 4097])
def test_input_length_bounds(handle, text):
    with pytest.raises(RequestBuildError):
        synthesize_speech(handle, text)


def test_wrong_typed_speed_is_decode_error(handle):
    with pytest.raises(DecodeError) as ei:
        synthesize_speech(handle, "Hi", {"speed": "fast"})
    assert ei.value.key == "speed"


def test_unexpected_response_type(handle, stub_client):
    stub_client.speech.response = 12
    with pytest.raises(TransportError):
        synthesize_speech(handle, "Hi")

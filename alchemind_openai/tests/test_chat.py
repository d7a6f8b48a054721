from __future__ import annotations

import pytest

from alchemind_openai.base.errors import EmptyResultError, RequestBuildError
from alchemind_openai.base.handle import ClientHandle
from alchemind_openai.bridge import complete_chat

from .fakes import StubClient, completion

MESSAGES = [{"role": "system", "content": "terse"}, {"role": "user", "content": "hello"}]


def test_returns_first_choice_text(handle, stub_client):
    stub_client.completions.response = completion("Hi there", "ignored")
    assert complete_chat(handle, MESSAGES, "gpt-4o-mini") == "Hi there"
    sent = stub_client.completions.calls[0]
    assert sent["model"] == "gpt-4o-mini"
    assert sent["messages"] == MESSAGES
    assert "stream" not in sent


def test_none_content_returns_empty_string(handle, stub_client):
    stub_client.completions.response = completion(None)
    assert complete_chat(handle, MESSAGES) == ""


def test_zero_choices_is_empty_result(handle, stub_client):
    stub_client.completions.response = completion()
    with pytest.raises(EmptyResultError) as ei:
        complete_chat(handle, MESSAGES)
    assert ei.value.message == "No completion choices returned"


def test_handle_default_model_and_sampling_options(handle, stub_client):
    stub_client.completions.response = completion("x")
    complete_chat(handle, MESSAGES, temperature=0.1, max_tokens=5)
    sent = stub_client.completions.calls[0]
    assert sent["model"] == "gpt-test"
    assert sent["temperature"] == 0.1
    assert sent["max_tokens"] == 5


def test_missing_model_fails_before_any_request():
    client = StubClient()
    with pytest.raises(RequestBuildError) as ei:
        complete_chat(ClientHandle(client), MESSAGES)
    assert "No model specified" in ei.value.message
    assert client.completions.calls == []


def test_bad_message_fails_before_any_request(handle, stub_client):
    with pytest.raises(RequestBuildError) as ei:
        complete_chat(handle, [{"role": "user", "content": ["not", "text"]}])
    assert ei.value.operation == "chat"
    assert stub_client.completions.calls == []


def test_non_iterable_messages_fail_before_any_request(handle, stub_client):
    with pytest.raises(RequestBuildError) as ei:
        complete_chat(handle, None)
    assert "messages must be a sequence" in ei.value.message
    assert ei.value.operation == "chat"
    assert stub_client.completions.calls == []

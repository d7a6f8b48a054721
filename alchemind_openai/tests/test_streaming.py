"""Streaming chunk emulator: bounded passes, ordering and terminal notifications."""

from __future__ import annotations

import asyncio

import pytest

from alchemind_openai.base.errors import ContextCreationError, ValidationError
from alchemind_openai.base.notifications import CallbackNotifier, NotificationTag, QueueNotifier
from alchemind_openai.base.streaming import translate_frame
from alchemind_openai.base.timeouts import reset_timeout_config
from alchemind_openai.bridge import ACCEPTED, stream_chat_chunk

from .fakes import frame, stream_factory

MESSAGES = [{"role": "user", "content": "count"}]


def _run(handle, **kwargs):
    q = QueueNotifier()
    assert stream_chat_chunk(handle, MESSAGES, None, q, "ref-1", **kwargs) == ACCEPTED
    return q.drain()


def test_translate_frame_collects_every_choice():
    fragments, finished = translate_frame(frame("a", "", None, "b"))
    assert fragments == ["a", "b"]
    assert finished is False
    assert translate_frame(frame(finish="stop")) == ([], True)


def test_finished_stream_delivers_chunks_then_done(handle, stub_client):
    opener = stream_factory([frame("Hel"), frame("lo"), frame("!", finish="stop"), frame("late")])
    stub_client.completions.response = opener
    got = _run(handle)
    assert [n.as_tuple() for n in got] == [
        ("chunk", "Hel", "ref-1"),
        ("chunk", "lo", "ref-1"),
        ("chunk", "!", "ref-1"),
        ("done", "ref-1"),
    ]
    assert got[-1].truncated is False
    assert opener.streams[0].pulled == 3
    assert opener.streams[0].closed
    assert stub_client.completions.calls[0]["stream"] is True


def test_frame_cap_truncates(handle, stub_client):
    opener = stream_factory([frame(f"t{i}") for i in range(12)])
    stub_client.completions.response = opener
    got = _run(handle)
    chunks = [n for n in got if n.tag is NotificationTag.CHUNK]
    assert [n.text for n in chunks] == [f"t{i}" for i in range(10)]
    assert got[-1].tag is NotificationTag.DONE
    assert got[-1].truncated is True
    assert sum(1 for n in got if n.is_terminal) == 1
    assert opener.streams[0].pulled == 10


def test_reinvocation_restarts_from_first_frame(handle, stub_client):
    opener = stream_factory([frame(f"t{i}") for i in range(12)])
    stub_client.completions.response = opener
    first = [n.text for n in _run(handle)]
    second = [n.text for n in _run(handle)]
    assert first == second
    assert len(stub_client.completions.calls) == 2


def test_short_stream_without_finish_is_done(handle, stub_client):
    stub_client.completions.response = stream_factory([frame("only")])
    got = _run(handle)
    assert [n.tag for n in got] == [NotificationTag.CHUNK, NotificationTag.DONE]
    assert got[-1].truncated is False


def test_custom_frame_cap(handle, stub_client):
    stub_client.completions.response = stream_factory([frame(f"t{i}") for i in range(5)])
    got = _run(handle, max_frames=2)
    assert [n.text for n in got[:-1]] == ["t0", "t1"]
    assert got[-1].truncated is True


def test_mid_stream_error_keeps_partial_chunks(handle, stub_client):
    stub_client.completions.response = stream_factory(
        [frame("a"), frame("b")], error=RuntimeError("connection reset by peer")
    )
    got = _run(handle)
    assert [n.tag for n in got] == [NotificationTag.CHUNK, NotificationTag.CHUNK, NotificationTag.ERROR]
    assert "connection reset by peer" in got[-1].message
    assert got[-1].token == "ref-1"


def test_open_failure_is_single_error(handle, stub_client):
    stub_client.completions.response = RuntimeError("model not found")
    got = _run(handle)
    assert len(got) == 1
    assert got[0].tag is NotificationTag.ERROR
    assert got[0].message.startswith("not_found:")


def test_build_failure_is_reported_as_error(handle, stub_client):
    got = _run_with(handle, [{"role": "user", "content": 3}])
    assert [n.tag for n in got] == [NotificationTag.ERROR]
    assert "Failed to build user message" in got[0].message
    assert stub_client.completions.calls == []


def _run_with(handle, messages):
    q = QueueNotifier()
    assert stream_chat_chunk(handle, messages, None, q, "ref-1") == ACCEPTED
    return q.drain()


def test_lock_failure_is_reported_as_error(handle, stub_client, monkeypatch):
    monkeypatch.setenv("ALCHEMIND_TIMEOUT_LOCK_SECONDS", "0.05")
    reset_timeout_config()
    stub_client.completions.response = stream_factory([frame("x")])
    handle._lock.acquire()
    try:
        got = _run(handle)
    finally:
        handle._lock.release()
    assert [n.tag for n in got] == [NotificationTag.ERROR]
    assert "Failed to lock client" in got[0].message


def test_context_creation_failure_is_raised(handle, stub_client):
    stub_client.completions.response = stream_factory([frame("x")])
    q = QueueNotifier()

    async def _inside_loop():
        with pytest.raises(ContextCreationError):
            stream_chat_chunk(handle, MESSAGES, None, q, "ref-1")

    asyncio.run(_inside_loop())
    assert q.drain() == []


def test_invalid_frame_cap_is_rejected(handle):
    with pytest.raises(ValidationError):
        stream_chat_chunk(handle, MESSAGES, None, QueueNotifier(), "ref-1", max_frames=0)


def test_callback_notifier_receives_ordered_notifications(handle, stub_client):
    stub_client.completions.response = stream_factory([frame("a"), frame("b", finish="length")])
    seen = []
    stream_chat_chunk(handle, MESSAGES, "gpt-other", CallbackNotifier(seen.append), ("pid", 7))
    assert [n.as_tuple() for n in seen] == [
        ("chunk", "a", ("pid", 7)),
        ("chunk", "b", ("pid", 7)),
        ("done", ("pid", 7)),
    ]
    assert stub_client.completions.calls[0]["model"] == "gpt-other"


def test_finalize_event_reports_pass(handle, stub_client, log_records):
    stub_client.completions.response = stream_factory([frame(f"t{i}") for i in range(12)])
    _run(handle)
    final = [e for e in log_records.events() if e["event"] == "stream.finalize"][0]
    assert final["emitted"] == 11
    assert final["frames"] == 10
    assert final["truncated"] is True
    assert final["state"] == "done"
    assert final["correlation"] == "ref-1"


def test_failed_pass_end_event_carries_error_code(handle, stub_client, log_records):
    stub_client.completions.response = stream_factory([frame("a")], error=RuntimeError("connection reset"))
    _run(handle)
    end = [e for e in log_records.events() if e["event"] == "stream.end"][0]
    assert end["error_code"] == "unknown"


def test_successful_pass_end_event_has_no_error_code(handle, stub_client, log_records):
    stub_client.completions.response = stream_factory([frame("a", finish="stop")])
    _run(handle)
    end = [e for e in log_records.events() if e["event"] == "stream.end"][0]
    assert "error_code" not in end


def test_non_iterable_messages_are_reported_as_error(handle, stub_client):
    got = _run_with(handle, None)
    assert [n.tag for n in got] == [NotificationTag.ERROR]
    assert "messages must be a sequence" in got[0].message
    assert stub_client.completions.calls == []

from __future__ import annotations

import types

import httpx

from alchemind_openai.base.errors import (
    BridgeError,
    ErrorCode,
    LockError,
    TransportError,
    classify_exception,
)


def test_classify_bridge_error_passthrough():
    e = LockError(operation="chat")
    assert classify_exception(e) is ErrorCode.UNAVAILABLE  # nosec B101


def test_classify_http_status_mapping():
    assert classify_exception(types.SimpleNamespace(status_code=401)) is ErrorCode.AUTH  # nosec B101
    e = types.SimpleNamespace(response=types.SimpleNamespace(status_code=429))
    assert classify_exception(e) is ErrorCode.RATE_LIMIT  # nosec B101


def test_classify_httpx_failures():
    assert classify_exception(httpx.ReadTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused")) is ErrorCode.TRANSIENT  # nosec B101


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(Exception("Invalid API key")) is ErrorCode.AUTH  # nosec B101
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101


def test_error_defaults_and_str():
    e = TransportError(code=ErrorCode.SERVER_ERROR, message="boom", operation="speech")
    assert isinstance(e, BridgeError)
    assert str(e) == "speech server_error: boom"
    assert LockError().message == "failed to lock client"

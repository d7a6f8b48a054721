"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping, and message-based
heuristics as a fallback so failures raised by the ``openai`` SDK, ``httpx``
or test stubs all land in the same taxonomy.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

import httpx
import openai

from .bridge_error import BridgeError
from .error_code import ErrorCode


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from a provider exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


_PATTERN_GROUPS = (
    (ErrorCode.TIMEOUT, ("timeout", "timed out")),
    (ErrorCode.AUTH, ("api key", "unauthorized", "forbidden", "auth")),
    (ErrorCode.UNSUPPORTED, ("unsupported", "not supported")),
    (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
    (ErrorCode.CONFLICT, ("conflict", "already exists")),
    (ErrorCode.UNAVAILABLE, ("unavailable", "temporarily down")),
    (ErrorCode.VALIDATION, ("validation", "invalid", "malformed")),
    (ErrorCode.SERVER_ERROR, ("server error", "internal error")),
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    """Substring heuristic mapping for exceptions without an HTTP status."""
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    for code, patterns in _PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. BridgeError passthrough.
        2. Timeout exceptions (sync/async/httpx).
        3. Connection-level ``httpx`` and SDK failures (transient).
        4. HTTP status mapping.
        5. Substring heuristics.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, BridgeError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException, openai.APITimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (httpx.TransportError, openai.APIConnectionError)):
        return ErrorCode.TRANSIENT
    status = _extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]

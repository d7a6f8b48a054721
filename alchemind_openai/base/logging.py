"""Base structured logging utilities for the bridge.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup in the adapters.

Every adapter obtains a child of the shared ``alchemind`` logger through
``get_logger`` and emits events via ``normalized_log_event``, which guarantees
the canonical keys ``structured``, ``phase``, ``attempt``, ``error_code``,
``emitted`` and ``tokens`` on every payload.
"""
from __future__ import annotations

import logging
import json
import sys
import os
import contextlib
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext


BASE_LOGGER_NAME = "alchemind"
_BASE_LOGGER_ATTR = "_alchemind_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_alchemind_console_handler"
_FILE_HANDLER_ATTR = "_alchemind_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``alchemind`` logger.

    The console handler writes to the *current* ``sys.stderr`` so that test
    harnesses swapping the stream (capsys) still see output.
    """
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv("ALCHEMIND_LOG_LEVEL"), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(desired_level)
        for existing in logger.handlers:
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            existing.setLevel(desired_level)
            with contextlib.suppress(ValueError):
                existing.setStream(sys.stderr)  # type: ignore[attr-defined]
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_make_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return the shared base logger or a propagating child of it."""
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared bridge logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (replacing any previously managed one). When ``None``, any
        managed file handler is removed.
    json_mode: bool
        Whether to use the JSON formatter or a plain text formatter.

    Returns
    -------
    logging.Logger
        The configured base logger.
    """
    logger = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)

    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for h in managed:
        if abs_path is not None and getattr(h, "baseFilename", None) == abs_path:
            h.setFormatter(_make_formatter(json_mode))
            h.setLevel(logger.level)
            return logger
        logger.removeHandler(h)
        h.close()
    if abs_path is None:
        return logger

    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    # 10MB x 5 backups
    fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(fh, _FILE_HANDLER_ATTR, True)
    fh.setLevel(logger.level)
    fh.setFormatter(_make_formatter(json_mode))
    logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Keys whose values are ``None`` are dropped unless ``keep_none`` is set,
    which ``normalized_log_event`` uses to guarantee the schema keys.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


# ---------------------- Normalization Layer ---------------------------------
REQUIRED_NORMALIZED_KEYS = (
    "structured",
    "phase",
    "attempt",
    "error_code",
    "emitted",
    "tokens",
)


def _coerce_tokens(tokens: Any) -> Any:
    """Coerce token usage info into a JSON-friendly mapping (or ``None``)."""
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    for attr in ("model_dump", "dict"):
        dump = getattr(tokens, attr, None)
        if callable(dump):
            return dump()
    return {"value": repr(tokens)}


def normalized_log_event(  # noqa: PLR0913
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | int | None = None,
    tokens: Any = None,
    structured: bool = True,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a normalized structured log event with required keys.

    Notes
    -----
    - Required keys are always present, except ``error_code`` which is
      omitted when ``None`` to reflect "no error".
    - ``extra_fields`` never clobber a normalized value; ``None`` extras are
      dropped.
    """
    base_fields: Dict[str, Any] = {
        "structured": structured,
        "phase": phase,
        "attempt": attempt,
        "error_code": error_code,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is None:
        base_fields.pop("error_code")
    for k, v in extra_fields.items():
        if v is None:
            continue
        if k in base_fields and base_fields[k] is not None:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]

"""Unified bridge error taxonomy public surface.

This module re-exports the implementations under
``alchemind_openai.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.bridge_error import BridgeError
from .errors_parts.error_types import (
    ConfigurationError,
    ContextCreationError,
    DecodeError,
    EmptyResultError,
    LockError,
    RequestBuildError,
    TransportError,
    ValidationError,
)
from .errors_parts.classification import classify_exception

__all__ = [
    "ErrorCode",
    "BridgeError",
    "ConfigurationError",
    "ContextCreationError",
    "DecodeError",
    "EmptyResultError",
    "LockError",
    "RequestBuildError",
    "TransportError",
    "ValidationError",
    "classify_exception",
]

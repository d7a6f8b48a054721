"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `alchemind_openai.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .bridge_error import BridgeError
from .error_types import (
    ConfigurationError,
    ContextCreationError,
    DecodeError,
    EmptyResultError,
    LockError,
    RequestBuildError,
    TransportError,
    ValidationError,
)
from .classification import classify_exception

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

"""
Concrete bridge error classes.

Each class fixes a default :class:`ErrorCode` so call sites only supply the
message (and operation). `DecodeError` additionally records the offending
option key.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .bridge_error import BridgeError
from .error_code import ErrorCode


@dataclass
class ContextCreationError(BridgeError):
    """The per-call asynchronous execution context could not be created."""

    code: ErrorCode = ErrorCode.INTERNAL
    message: str = "failed to create execution context"


@dataclass
class LockError(BridgeError):
    """The client handle could not be acquired."""

    code: ErrorCode = ErrorCode.UNAVAILABLE
    message: str = "failed to lock client"


@dataclass
class ValidationError(BridgeError):
    """Caller input rejected before any request was built."""

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "invalid input"


@dataclass
class DecodeError(BridgeError):
    """An option value could not be interpreted as its target type."""

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "failed to decode option"
    key: Optional[str] = None


@dataclass
class RequestBuildError(BridgeError):
    """A request could not be assembled from well-typed fields."""

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "failed to build request"


@dataclass
class TransportError(BridgeError):
    """Network or provider-side failure; ``message`` carries the provider text."""

    code: ErrorCode = ErrorCode.UNKNOWN
    message: str = "request failed"


@dataclass
class EmptyResultError(BridgeError):
    """A chat completion returned no choices."""

    code: ErrorCode = ErrorCode.SERVER_ERROR
    message: str = "No completion choices returned"


@dataclass
class ConfigurationError(BridgeError):
    """Bridge construction is missing a required setting."""

    code: ErrorCode = ErrorCode.AUTH
    message: str = "invalid configuration"
    missing: list[str] = field(default_factory=list)


__all__ = [
    "ContextCreationError",
    "LockError",
    "ValidationError",
    "DecodeError",
    "RequestBuildError",
    "TransportError",
    "EmptyResultError",
    "ConfigurationError",
]

"""
Structured bridge error exception type.

Every failure surfaced by the bridge is a `BridgeError` (or a subclass) so a
host can match on the class for the failure kind and on `code` for the
normalized category.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class BridgeError(Exception):
    """Represents a classified bridge failure.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for the caller.
        operation: Bridge operation where the error originated
            (e.g., ``"complete_chat"``).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    operation: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining operation, code, and message."""
        return f"{self.operation or '-'} {self.code.value}: {self.message}"


__all__ = ["BridgeError"]

"""Notification channel for streaming results.

The streaming emulator reports through a *notifier*: any object with a
``send(notification)`` method. Every notification carries the caller's
correlation token so the caller can match it to the originating call.

Two ready-made notifiers are provided:

- :class:`QueueNotifier` - a thread-safe mailbox; ``drain()`` returns what
  has arrived so far.
- :class:`CallbackNotifier` - forwards each notification to a callable.
"""
from __future__ import annotations

import queue
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Hashable, List, Optional, Protocol, runtime_checkable


class NotificationTag(str, Enum):
    """Kinds of streaming notifications."""

    CHUNK = "chunk"
    DONE = "done"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """One message delivered to a streaming caller.

    Attributes:
        tag: ``chunk``, ``done`` or ``error``.
        token: Correlation token supplied by the caller, echoed verbatim.
        text: Content fragment (``chunk`` only).
        message: Error description (``error`` only).
        truncated: On ``done``, True when the pass stopped at the frame cap
            before the provider signalled completion.
    """

    tag: NotificationTag
    token: Hashable
    text: Optional[str] = None
    message: Optional[str] = None
    truncated: bool = False

    @classmethod
    def chunk(cls, text: str, token: Hashable) -> "Notification":
        return cls(tag=NotificationTag.CHUNK, token=token, text=text)

    @classmethod
    def done(cls, token: Hashable, *, truncated: bool = False) -> "Notification":
        return cls(tag=NotificationTag.DONE, token=token, truncated=truncated)

    @classmethod
    def error(cls, message: str, token: Hashable) -> "Notification":
        return cls(tag=NotificationTag.ERROR, token=token, message=message)

    @property
    def is_terminal(self) -> bool:
        return self.tag is not NotificationTag.CHUNK

    def as_tuple(self) -> tuple[Any, ...]:
        """Return the compact host form: ``(tag, text, token)``, ``(tag, token)`` or ``(tag, message, token)``."""
        if self.tag is NotificationTag.CHUNK:
            return (self.tag.value, self.text, self.token)
        if self.tag is NotificationTag.ERROR:
            return (self.tag.value, self.message, self.token)
        return (self.tag.value, self.token)


@runtime_checkable
class Notifier(Protocol):
    """Addressable caller identity able to receive notifications."""

    def send(self, notification: Notification) -> None:  # pragma: no cover - protocol
        ...


class QueueNotifier:
    """Mailbox notifier backed by :class:`queue.Queue`."""

    def __init__(self) -> None:
        self._queue: "queue.Queue[Notification]" = queue.Queue()

    def send(self, notification: Notification) -> None:
        self._queue.put(notification)

    def get(self, timeout: Optional[float] = None) -> Notification:
        """Block until the next notification arrives (``queue.Empty`` on timeout)."""
        return self._queue.get(timeout=timeout)

    def drain(self) -> List[Notification]:
        """Return every notification received so far, oldest first."""
        items: List[Notification] = []
        while True:
            try:
                items.append(self._queue.get_nowait())
            except queue.Empty:
                return items


class CallbackNotifier:
    """Notifier forwarding each notification to ``callback``."""

    def __init__(self, callback: Callable[[Notification], Any]) -> None:
        self._callback = callback

    def send(self, notification: Notification) -> None:
        self._callback(notification)


__all__ = [
    "NotificationTag",
    "Notification",
    "Notifier",
    "QueueNotifier",
    "CallbackNotifier",
]

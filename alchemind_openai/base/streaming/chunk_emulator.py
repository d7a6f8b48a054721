"""Streaming chunk emulator.

One invocation performs one bounded polling pass over a chat stream:

    Start -> Streaming -> Done | Error

- Start: the request (``stream=True``) is built by the caller.
- Streaming: the stream is opened and at most ``max_frames`` frames are
  read. Fragments are collected in arrival order. A finish reason on any
  choice, or the end of the stream, ends the pass as Done. Reaching the cap
  ends it as Done with ``truncated=True``. A transport error, at open time or
  mid-stream, ends it as Error; fragments read before the error are kept.
- Delivery: every fragment as a ``chunk`` notification, then exactly one
  ``done`` or ``error`` notification, all carrying the correlation token.

No state survives a pass. Calling again re-sends the full request and
restarts the exchange from the first frame.
"""

from __future__ import annotations

import inspect
from contextlib import suppress
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, List, Optional

from ..client_protocol import BridgeClient
from ..dto.chat import ChatCompletionRequest
from ..errors import classify_exception
from ..notifications import Notification, Notifier
from .frames import translate_frame

ACCEPTED = "accepted"


class StreamState(str, Enum):
    START = "start"
    STREAMING = "streaming"
    DONE = "done"
    ERROR = "error"


@dataclass
class StreamPass:
    """Outcome of one polling pass."""

    state: StreamState = StreamState.START
    fragments: List[str] = field(default_factory=list)
    frames_read: int = 0
    truncated: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def failed(cls, message: str, code: Optional[str] = None) -> "StreamPass":
        return cls(state=StreamState.ERROR, error=message, error_code=code)

    def fail(self, exc: BaseException) -> None:
        code = classify_exception(exc)
        self.state = StreamState.ERROR
        self.error = f"{code.value}: {exc}"
        self.error_code = code.value

    def notifications(self, token: Hashable) -> List[Notification]:
        """Chunks in order followed by the single terminal notification."""
        out = [Notification.chunk(text, token) for text in self.fragments]
        if self.state is StreamState.ERROR:
            out.append(Notification.error(self.error or "stream failed", token))
        else:
            out.append(Notification.done(token, truncated=self.truncated))
        return out


async def _close_stream(stream: Any) -> None:
    close = getattr(stream, "close", None)
    if not callable(close):
        return
    with suppress(Exception):
        result = close()
        if inspect.isawaitable(result):
            await result


async def poll_stream(client: BridgeClient, request: ChatCompletionRequest, *, max_frames: int) -> StreamPass:
    """Run one polling pass; never raises for provider or transport failures."""
    result = StreamPass(state=StreamState.STREAMING)
    try:
        stream = await client.chat.completions.create(**request.to_params())
    except Exception as exc:  # noqa: BLE001 - reported through the error notification
        result.fail(exc)
        return result
    try:
        frames = stream.__aiter__()
        for _ in range(max_frames):
            try:
                frame = await frames.__anext__()
            except StopAsyncIteration:
                result.state = StreamState.DONE
                break
            result.frames_read += 1
            fragments, finished = translate_frame(frame)
            result.fragments.extend(fragments)
            if finished:
                result.state = StreamState.DONE
                break
        else:
            result.state = StreamState.DONE
            result.truncated = True
    except Exception as exc:  # noqa: BLE001 - reported through the error notification
        result.fail(exc)
    finally:
        await _close_stream(stream)
    return result


def deliver(result: StreamPass, caller: Notifier, token: Hashable) -> int:
    """Send the pass's notifications to ``caller``; returns how many were sent."""
    notifications = result.notifications(token)
    for notification in notifications:
        caller.send(notification)
    return len(notifications)


__all__ = [
    "ACCEPTED",
    "StreamState",
    "StreamPass",
    "poll_stream",
    "deliver",
]

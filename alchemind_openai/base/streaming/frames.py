"""Frame translation for chat streams.

A *frame* is one streamed ``chat.completion.chunk``: zero or more choices,
each with a ``delta`` that may carry a content fragment, and an optional
``finish_reason``. Only the members below are read, so SDK objects and test
stubs are interchangeable.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, Sequence, Tuple


class FrameDelta(Protocol):
    content: Optional[str]


class FrameChoice(Protocol):
    delta: Optional[FrameDelta]
    finish_reason: Optional[str]


class StreamFrame(Protocol):
    choices: Sequence[FrameChoice]


def translate_frame(frame: Any) -> Tuple[List[str], bool]:
    """Return ``(fragments, finished)`` for one frame.

    Fragments are the non-empty ``delta.content`` strings of every choice in
    order; ``finished`` is True when any choice carries a finish reason.
    """
    fragments: List[str] = []
    finished = False
    for choice in getattr(frame, "choices", None) or ():
        delta = getattr(choice, "delta", None)
        content = getattr(delta, "content", None) if delta is not None else None
        if isinstance(content, str) and content:
            fragments.append(content)
        if getattr(choice, "finish_reason", None):
            finished = True
    return fragments, finished


__all__ = ["FrameDelta", "FrameChoice", "StreamFrame", "translate_frame"]

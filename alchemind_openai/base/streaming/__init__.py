"""Streaming emulation: frame translation and bounded polling passes."""

from .frames import StreamFrame, translate_frame
from .chunk_emulator import ACCEPTED, StreamPass, StreamState, deliver, poll_stream

__all__ = [
    "ACCEPTED",
    "StreamFrame",
    "StreamPass",
    "StreamState",
    "deliver",
    "poll_stream",
    "translate_frame",
]

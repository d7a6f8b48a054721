"""Protocol definition for the network client wrapped by a handle.

Purpose:
- Describe the minimal async client surface the bridge drives, without tying
  the adapters to a concrete SDK class. ``openai.AsyncOpenAI`` satisfies it;
  tests supply in-memory stubs.

External dependencies:
- None (typing only).
"""

from __future__ import annotations

from typing import Any, Protocol


class _AsyncCreate(Protocol):  # pragma: no cover - structural hint only
    async def create(self, **params: Any) -> Any:
        """Issue one provider request."""
        ...


class _ChatNS(Protocol):  # pragma: no cover - structural hint only
    completions: _AsyncCreate


class _AudioNS(Protocol):  # pragma: no cover - structural hint only
    transcriptions: _AsyncCreate
    speech: _AsyncCreate


class BridgeClient(Protocol):
    """Protocol describing an OpenAI-compatible async client.

    Implementations expose ``chat.completions.create``,
    ``audio.transcriptions.create`` and ``audio.speech.create`` as coroutines,
    and ``with_options(http_client=...)`` returning a view of the client that
    uses the given transport.
    """

    chat: _ChatNS
    audio: _AudioNS

    def with_options(self, **options: Any) -> "BridgeClient":  # pragma: no cover
        ...


__all__ = ["BridgeClient"]

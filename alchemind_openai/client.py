"""High-level bridge object.

``OpenAIBridge`` bundles a client handle with its resolved configuration and
exposes the bridge operations as methods. Settings that are not passed
explicitly are resolved through :func:`alchemind_openai.config.get_bridge_config`.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Optional

from .adapters import complete_chat, stream_chat_chunk, synthesize_speech, transcribe_audio
from .base.errors import ConfigurationError
from .base.handle import ClientHandle, create_client
from .base.logging import get_logger, normalized_log_event
from .base.notifications import Notifier
from .config import get_bridge_config
from .config.defaults import DEFAULT_MAX_FRAMES

_logger = get_logger("alchemind.client")


class OpenAIBridge:
    """Configured bridge around one client handle."""

    def __init__(self, handle: ClientHandle) -> None:
        self.handle = handle

    @classmethod
    def new(
        cls,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
    ) -> "OpenAIBridge":
        """Create a bridge, filling missing settings from configuration.

        Raises:
            ConfigurationError: No API key was given or configured.
        """
        cfg = get_bridge_config({"api_key": api_key, "base_url": base_url, "model": model})
        key = cfg.get("api_key")
        if not isinstance(key, str) or not key.strip():
            raise ConfigurationError(
                message="OpenAI API key not provided. Please provide an api_key option.",
                operation="new",
                missing=["api_key"],
            )
        handle = create_client(key, cfg["base_url"], default_model=cfg.get("model"))
        normalized_log_event(
            _logger,
            "client.init",
            None,
            phase="init",
            base_url=handle.base_url,
            model=handle.default_model,
        )
        return cls(handle)

    @property
    def model(self) -> Optional[str]:
        return self.handle.default_model

    @property
    def base_url(self) -> Optional[str]:
        return self.handle.base_url

    def complete(
        self,
        messages: Iterable[Any],
        *,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        return complete_chat(self.handle, messages, model, temperature=temperature, max_tokens=max_tokens)

    def stream_chunk(
        self,
        messages: Iterable[Any],
        caller: Notifier,
        correlation: Hashable,
        *,
        model: Optional[str] = None,
        max_frames: int = DEFAULT_MAX_FRAMES,
    ) -> str:
        return stream_chat_chunk(self.handle, messages, model, caller, correlation, max_frames=max_frames)

    def transcribe(self, audio: bytes, **options: Any) -> str:
        return transcribe_audio(self.handle, audio, options)

    def speak(self, text: str, **options: Any) -> bytes:
        return synthesize_speech(self.handle, text, options)

    def __repr__(self) -> str:
        return f"OpenAIBridge(base_url={self.base_url!r}, model={self.model!r})"


__all__ = ["OpenAIBridge"]

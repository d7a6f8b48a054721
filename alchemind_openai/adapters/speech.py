"""Speech synthesis adapter.

Options are decoded leniently: unknown ``model``, ``voice`` or
``response_format`` strings fall back to ``tts-1``, ``alloy`` and ``mp3``.
Type errors and out-of-range values still fail before any request is sent.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from ..base.client_protocol import BridgeClient
from ..base.dto.audio import SpeechRequest
from ..base.errors import ErrorCode, RequestBuildError, TransportError
from ..base.execution import run_blocking
from ..base.handle import ClientHandle
from ..base.logging import LogContext, get_logger
from ..base.options import decode_speech_options, raise_first

_logger = get_logger("alchemind.speech")


def audio_bytes(response: Any) -> bytes:
    """Return the raw audio from a provider response."""
    if isinstance(response, (bytes, bytearray)):
        return bytes(response)
    content = getattr(response, "content", None)
    if isinstance(content, (bytes, bytearray)):
        return bytes(content)
    raise TransportError(
        code=ErrorCode.SERVER_ERROR,
        message=f"Unexpected speech response: {type(response).__name__}",
        operation="speech",
    )


def synthesize_speech(
    handle: ClientHandle,
    input: str,  # noqa: A002 - provider parameter name
    options: Optional[Mapping[str, Any]] = None,
) -> bytes:
    """Synthesize ``input`` and return the encoded audio bytes.

    Raises:
        DecodeError: An option has the wrong type.
        RequestBuildError: ``input`` is empty or too long, or ``speed`` is
            outside [0.25, 4.0].
        ContextCreationError, LockError, TransportError.
    """
    opts, errors = decode_speech_options(options, operation="speech")
    raise_first(errors)
    try:
        request = SpeechRequest(
            input=input,
            model=opts.model,
            voice=opts.voice,
            response_format=opts.response_format,
            speed=opts.speed,
        )
    except PydanticValidationError as exc:
        length = len(input) if isinstance(input, str) else None
        keys = sorted(str(k) for k in (options or {}))
        raise RequestBuildError(
            message=(
                f"Failed to build speech request: {exc.errors()[0]['msg']}. "
                f"Input text length: {length}, Opts: {keys}"
            ),
            operation="speech",
            raw=exc,
        ) from exc

    async def _speak(client: BridgeClient) -> bytes:
        response = await client.audio.speech.create(**request.to_params())
        return audio_bytes(response)

    ctx = LogContext(operation="speech", model=request.model.value, extra={"voice": request.voice.value})
    return run_blocking(handle, _speak, ctx=ctx, logger=_logger)


__all__ = ["synthesize_speech", "audio_bytes"]

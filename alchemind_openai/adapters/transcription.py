"""Audio transcription adapter."""

from __future__ import annotations

import threading
import time
from typing import Any, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from ..base.client_protocol import BridgeClient
from ..base.dto.audio import TranscriptionRequest
from ..base.errors import ErrorCode, RequestBuildError, TransportError, ValidationError
from ..base.execution import run_blocking
from ..base.handle import ClientHandle
from ..base.logging import LogContext, get_logger
from ..base.options import decode_transcription_options, raise_first
from ..config.defaults import AUDIO_UPLOAD_EXTENSION, MIN_AUDIO_BYTES

_logger = get_logger("alchemind.transcribe")

_UPLOAD_ID_LOCK = threading.Lock()
_last_upload_id = 0


def next_upload_id() -> int:
    """Return a process-wide, strictly increasing nanosecond identifier."""
    global _last_upload_id  # noqa: PLW0603 - process-wide counter
    with _UPLOAD_ID_LOCK:
        _last_upload_id = max(time.time_ns(), _last_upload_id + 1)
        return _last_upload_id


def upload_file_name(extension: str = AUDIO_UPLOAD_EXTENSION) -> str:
    return f"audio-{next_upload_id()}.{extension}"


def _option_keys(options: Optional[Mapping[str, Any]]) -> list[str]:
    return sorted(str(k) for k in (options or {}))


def transcript_text(result: Any) -> str:
    """Return the transcript from a provider response (plain text or an object with ``text``)."""
    if isinstance(result, str):
        return result
    text = getattr(result, "text", None)
    if isinstance(text, str):
        return text
    raise TransportError(
        code=ErrorCode.SERVER_ERROR,
        message=f"Unexpected transcription response: {type(result).__name__}",
        operation="transcribe",
    )


def transcribe_audio(
    handle: ClientHandle,
    audio: bytes,
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Upload ``audio`` for transcription and return the transcript verbatim.

    Options: ``model`` (default ``whisper-1``), ``language``, ``prompt``,
    ``response_format`` (default ``text``) and ``temperature``.

    Raises:
        ValidationError: ``audio`` is not bytes or shorter than 10 bytes.
        DecodeError: An option has the wrong type.
        RequestBuildError: Decoded options are out of range.
        ContextCreationError, LockError, TransportError.
    """
    if isinstance(audio, (bytearray, memoryview)):
        audio = bytes(audio)
    if not isinstance(audio, bytes):
        raise ValidationError(
            message=f"Audio must be binary, got {type(audio).__name__}. Opts: {_option_keys(options)}",
            operation="transcribe",
        )
    if len(audio) < MIN_AUDIO_BYTES:
        raise ValidationError(
            message=(
                f"Audio binary too small. Audio binary length: {len(audio)}, "
                f"Opts: {_option_keys(options)}"
            ),
            operation="transcribe",
        )

    opts, errors = decode_transcription_options(options, operation="transcribe")
    raise_first(errors)
    try:
        request = TranscriptionRequest(
            file_name=upload_file_name(),
            audio=audio,
            model=opts.model,
            language=opts.language,
            prompt=opts.prompt,
            response_format=opts.response_format,
            temperature=opts.temperature,
        )
    except PydanticValidationError as exc:
        raise RequestBuildError(
            message=f"Failed to build transcription request: {exc.errors()[0]['msg']}",
            operation="transcribe",
            raw=exc,
        ) from exc

    async def _transcribe(client: BridgeClient) -> str:
        result = await client.audio.transcriptions.create(**request.to_params())
        return transcript_text(result)

    ctx = LogContext(operation="transcribe", model=request.model)
    return run_blocking(handle, _transcribe, ctx=ctx, logger=_logger)


__all__ = ["transcribe_audio", "transcript_text", "upload_file_name", "next_upload_id"]

"""alchemind_openai.config.defaults
================================

Central place for the small, stable default values of the bridge. They can
be overridden via environment variables or an external config file, but give
sensible fallbacks for local development and tests.

Only plain constants live here; no imports from the rest of the package.
"""

from __future__ import annotations

# ---- Provider endpoint ----
DEFAULT_BASE_URL = "https://api.openai.com/v1"

# ---- Transcription ----
DEFAULT_TRANSCRIPTION_MODEL = "whisper-1"
# Smallest audio buffer accepted for transcription.
MIN_AUDIO_BYTES = 10
# Extension used for the synthesized upload file name.
AUDIO_UPLOAD_EXTENSION = "webm"

# ---- Speech synthesis ----
MAX_SPEECH_INPUT_CHARS = 4096
MIN_SPEECH_SPEED = 0.25
MAX_SPEECH_SPEED = 4.0

# ---- Streaming emulation ----
# Frames read per polling pass.
DEFAULT_MAX_FRAMES = 10


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TRANSCRIPTION_MODEL",
    "MIN_AUDIO_BYTES",
    "AUDIO_UPLOAD_EXTENSION",
    "MAX_SPEECH_INPUT_CHARS",
    "MIN_SPEECH_SPEED",
    "MAX_SPEECH_SPEED",
    "DEFAULT_MAX_FRAMES",
]

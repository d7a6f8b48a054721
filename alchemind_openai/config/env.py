"""alchemind_openai.config.env
===========================

Environment variable names used by the bridge and small helpers to read
them.

Design Notes
------------
- ``ENV_FIELD_MAP`` maps configuration fields to their ``OPENAI_*`` variables
  so the bridge honours the same names as the provider's own SDK.
- Helpers never raise on unset variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

ENV_PREFIX = "OPENAI"

ENV_FIELD_MAP: Dict[str, str] = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "model": "MODEL",
}

CONFIG_FILE_ENV = "ALCHEMIND_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and tolerant of surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def env_var_name(field: str) -> Optional[str]:
    """Return the environment variable backing a config field, if any."""
    suffix = ENV_FIELD_MAP.get(field)
    return f"{ENV_PREFIX}_{suffix}" if suffix else None


def env_overrides() -> Dict[str, str]:
    """Collect non-empty, non-placeholder ``OPENAI_*`` values keyed by field."""
    out: Dict[str, str] = {}
    for field in ENV_FIELD_MAP:
        name = env_var_name(field)
        val = os.getenv(name) if name else None
        if val and not is_placeholder(val):
            out[field] = val
    return out


__all__ = [
    "ENV_PREFIX",
    "ENV_FIELD_MAP",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "is_placeholder",
    "env_var_name",
    "env_overrides",
]

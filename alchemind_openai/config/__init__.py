"""Unified configuration layer for the bridge.

Merge order (later wins):
    1. Built-in defaults
    2. Optional JSON config file pointed to by ``ALCHEMIND_CONFIG_FILE``
       (the ``openai`` section)
    3. Environment variables (``OPENAI_API_KEY``, ``OPENAI_BASE_URL``,
       ``OPENAI_MODEL``), after loading ``.env`` once
    4. In-code overrides passed to the helper

Example config file::

    {"openai": {"base_url": "https://proxy.internal/v1", "model": "gpt-4o-mini"}}

Public API
----------
* get_bridge_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

from .env import CONFIG_FILE_ENV, DOTENV_FILE_ENV, env_overrides, is_placeholder
from .defaults import DEFAULT_BASE_URL


DEFAULTS: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "model": None,
}

CONFIG_SECTION = "openai"

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Existing
    environment variables win unless their value looks like a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    """Return the parsed config file (cached); ``{}`` when unset or unreadable."""
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    data: Any = {}
    if path and Path(path).is_file():
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            data = {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def get_bridge_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for the bridge.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    ``None`` override values are ignored.
    """
    _load_dotenv_once()
    cfg: Dict[str, Any] = dict(DEFAULTS)

    file_cfg = _load_external_config().get(CONFIG_SECTION)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= env_overrides()

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file and ``.env`` state (used by tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "get_bridge_config",
    "reset_config_cache",
    "DEFAULTS",
    "CONFIG_SECTION",
]

from __future__ import annotations

import json

from alchemind_openai.base.timeouts import get_timeout_config, reset_timeout_config
from alchemind_openai.config import get_bridge_config, reset_config_cache
from alchemind_openai.config.env import env_var_name, is_placeholder


def test_defaults():
    cfg = get_bridge_config()
    assert cfg["base_url"] == "https://api.openai.com/v1"
    assert cfg["model"] is None
    assert "api_key" not in cfg


def test_merge_order_file_env_overrides(monkeypatch, tmp_path):
    path = tmp_path / "bridge.json"
    path.write_text(json.dumps({"openai": {"base_url": "https://file/v1", "model": "file-model"}}))
    monkeypatch.setenv("ALCHEMIND_CONFIG_FILE", str(path))
    reset_config_cache()
    assert get_bridge_config()["base_url"] == "https://file/v1"

    monkeypatch.setenv("OPENAI_MODEL", "env-model")
    cfg = get_bridge_config()
    assert cfg["model"] == "env-model"
    assert cfg["base_url"] == "https://file/v1"

    cfg = get_bridge_config({"model": "explicit", "base_url": None})
    assert cfg["model"] == "explicit"
    assert cfg["base_url"] == "https://file/v1"


def test_placeholder_env_values_are_skipped(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "changeme")
    assert "api_key" not in get_bridge_config()
    assert is_placeholder("  PLACEHOLDER-key ")
    assert env_var_name("api_key") == "OPENAI_API_KEY"
    assert env_var_name("unknown") is None


def test_dotenv_file_is_loaded_once(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("# local\nOPENAI_BASE_URL='https://dotenv/v1'\n")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    monkeypatch.delenv("OPENAI_BASE_URL", raising=False)
    reset_config_cache()
    assert get_bridge_config()["base_url"] == "https://dotenv/v1"
    monkeypatch.delenv("OPENAI_BASE_URL")


def test_invalid_config_file_is_ignored(monkeypatch, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    monkeypatch.setenv("ALCHEMIND_CONFIG_FILE", str(path))
    reset_config_cache()
    assert get_bridge_config()["base_url"] == "https://api.openai.com/v1"


def test_timeout_env_parsing(monkeypatch):
    monkeypatch.setenv("ALCHEMIND_TIMEOUT_HTTP_SECONDS", "12.5")
    monkeypatch.setenv("ALCHEMIND_TIMEOUT_CONNECT_SECONDS", "-1")
    monkeypatch.setenv("ALCHEMIND_TIMEOUT_LOCK_SECONDS", "soon")
    reset_timeout_config()
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 12.5
    assert cfg.connect_timeout_seconds == 10.0
    assert cfg.lock_timeout_seconds == 60.0
    assert cfg.to_httpx().connect == 10.0

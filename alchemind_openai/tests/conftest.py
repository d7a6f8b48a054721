"""Pytest configuration for the bridge test suite.

Every test starts from a clean configuration: provider variables are unset,
``.env`` loading points at a file that does not exist, and the cached config
file and timeout values are dropped before and after the test.
"""

from __future__ import annotations

import json
import logging
from typing import Iterator, List

import pytest

from alchemind_openai.base.handle import ClientHandle
from alchemind_openai.base.logging import BASE_LOGGER_NAME
from alchemind_openai.base.timeouts import reset_timeout_config
from alchemind_openai.config import reset_config_cache

from .fakes import StubClient

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_MODEL",
    "ALCHEMIND_CONFIG_FILE",
    "ALCHEMIND_TIMEOUT_HTTP_SECONDS",
    "ALCHEMIND_TIMEOUT_CONNECT_SECONDS",
    "ALCHEMIND_TIMEOUT_LOCK_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    reset_timeout_config()
    yield
    reset_config_cache()
    reset_timeout_config()


@pytest.fixture()
def stub_client() -> StubClient:
    return StubClient()


@pytest.fixture()
def handle(stub_client: StubClient) -> ClientHandle:
    return ClientHandle(stub_client, default_model="gpt-test", base_url="https://stub.invalid/v1")


class _ListHandler(logging.Handler):
    """Capture formatted log payloads into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())

    def events(self) -> List[dict]:
        return [json.loads(m) for m in self.messages]


@pytest.fixture()
def log_records() -> Iterator[_ListHandler]:
    """Attach a collecting handler to the shared bridge logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    handler = _ListHandler()
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(previous)

import socket

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from app.core.config import Settings
from app.main import create_app


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("PORT", "HOST", "LOG_LEVEL", "PROJECT_NAME", "VERSION"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_settings():
    return Settings(_env_file=None)


@pytest.fixture
def client(test_settings):
    return TestClient(create_app(test_settings))


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(handler_id)


@pytest.fixture
def busy_port():
    """A port on 127.0.0.1 that another listener already holds."""
    holder = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    holder.bind(("127.0.0.1", 0))
    holder.listen(1)
    try:
        yield holder.getsockname()[1]
    finally:
        holder.close()

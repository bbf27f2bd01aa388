"""Shared pytest fixtures."""

import logging

import pytest
from fastapi.testclient import TestClient

from hello_server.core.config import get_settings
from hello_server.core.logging_config import ACCESS_LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point LOG_DIR at a temp dir and reset the cached settings around each test."""
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    for name in (None, ACCESS_LOGGER_NAME):
        logger = logging.getLogger(name)
        for h in logger.handlers[:]:
            if type(h) in (logging.FileHandler, logging.StreamHandler):
                logger.removeHandler(h)
                h.close()


@pytest.fixture
def log_dir(tmp_path):
    return tmp_path / "logs"


@pytest.fixture
def client():
    """TestClient with lifespan events (logging setup) running."""
    from hello_server.main import app

    with TestClient(app) as c:
        yield c

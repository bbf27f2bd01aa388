"""Tests for logging setup and the access-log middleware."""

import logging

from hello_server.core.logging_config import ACCESS_LOGGER_NAME, resolve_log_level, setup_logging


def _flush(name=None):
    for h in logging.getLogger(name).handlers:
        h.flush()


def test_setup_logging_creates_files(tmp_path):
    target = tmp_path / "nested" / "logs"

    setup_logging(log_dir=str(target), log_level="debug")

    assert (target / "app.log").exists()
    assert (target / "access.log").exists()
    assert logging.getLogger().level == logging.DEBUG


def test_access_logger_does_not_propagate(tmp_path):
    setup_logging(log_dir=str(tmp_path))

    logging.getLogger(ACCESS_LOGGER_NAME).info("GET / 200")
    _flush()
    _flush(ACCESS_LOGGER_NAME)

    assert "GET / 200" in (tmp_path / "access.log").read_text(encoding="utf-8")
    assert "GET / 200" not in (tmp_path / "app.log").read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info(tmp_path):
    setup_logging(log_dir=str(tmp_path), log_level="chatty")

    assert logging.getLogger().level == logging.INFO


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    setup_logging(log_dir=str(tmp_path))
    setup_logging(log_dir=str(tmp_path))

    assert len(logging.getLogger().handlers) == 2
    assert len(logging.getLogger(ACCESS_LOGGER_NAME).handlers) == 1


def test_requests_are_written_to_access_log(client, log_dir):
    client.get("/")
    client.get("/not-exist")
    _flush(ACCESS_LOGGER_NAME)

    lines = (log_dir / "access.log").read_text(encoding="utf-8").splitlines()

    assert any("GET / 200" in line for line in lines)
    assert any("GET /not-exist 404" in line for line in lines)


def test_resolve_log_level_aliases_and_fallback():
    assert resolve_log_level("warn") == logging.WARNING
    assert resolve_log_level("Error") == logging.ERROR
    assert resolve_log_level("chatty") == logging.INFO
    assert resolve_log_level("basic_format") == logging.INFO

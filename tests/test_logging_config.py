"""
test_logging_config.py — Tests for members_api/logging_config.py

Verifies that Settings drive the Loguru sink, that stdlib logging is
forwarded, and that request logs carry the middleware's request id.

Called by: pytest
Depends on: members_api/logging_config.py, members_api/config.py
"""

import logging
from unittest.mock import patch

import pytest
from loguru import logger

from members_api.config import Settings
from members_api.logging_config import DEV_FORMAT, setup_logging


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.fixture(autouse=True)
def _clean_loguru():
    logger.remove()
    yield
    logger.remove()


def test_setup_logging_adds_handler():
    assert len(logger._core.handlers) == 0
    setup_logging(_settings(app_env="development"))
    assert len(logger._core.handlers) > 0


def test_stdlib_logging_forwarded():
    setup_logging(_settings(app_env="development"))

    messages = []
    logger.add(lambda m: messages.append(str(m)), format="{message}")

    logging.getLogger("test.bridge").warning("forwarded message")

    assert any("forwarded message" in m for m in messages)


def test_settings_log_level_controls_sink():
    with patch("loguru.logger.add") as mock_add:
        setup_logging(_settings(log_level="warning"))
    assert mock_add.call_args.kwargs["level"] == "WARNING"


def test_log_level_read_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    with patch("loguru.logger.add") as mock_add:
        setup_logging(_settings())
    assert mock_add.call_args.kwargs["level"] == "ERROR"


def test_production_mode_uses_serialize():
    with patch("loguru.logger.add") as mock_add:
        setup_logging(_settings(app_env="production"))
    assert mock_add.call_args.kwargs.get("serialize") is True


def test_development_format_has_no_extra_placeholder():
    assert "{extra}" not in DEV_FORMAT
    with patch("loguru.logger.add") as mock_add:
        setup_logging(_settings(app_env="development"))
    assert mock_add.call_args.kwargs["format"] == DEV_FORMAT


def test_request_logged_with_request_id(client):
    records = []
    logger.add(lambda m: records.append(m.record), format="{message}")

    resp = client.get("/health")

    request_id = resp.headers["X-Request-ID"]
    assert any(
        r["extra"].get("request_id") == request_id and "/health" in r["message"]
        for r in records
    )

"""
Unit tests for settings and logging setup.
"""
import json
import logging

import pytest

from device_relay.config import AppSettings, AuthSettings, CORSSettings, StoreSettings
from device_relay.logging_config import JsonFormatter, configure_logging


class TestSettings:

    def test_defaults(self):
        settings = AppSettings(_env_file=None)

        assert settings.port == 3000
        assert settings.api_prefix == "/api"
        assert settings.max_body_bytes == 262144
        assert settings.environment == "development"

    def test_store_defaults(self):
        store = StoreSettings(_env_file=None)

        assert store.max_log_entries == 50000
        assert store.default_list_limit == 1000
        assert store.max_list_limit == 10000
        assert store.max_queue_length == 100

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("STORE_MAX_LOG_ENTRIES", "10")
        monkeypatch.setenv("AUTH_SESSION_TTL_HOURS", "1")
        monkeypatch.setenv("CORS_ALLOWED_ORIGINS", '["*"]')

        assert AppSettings(_env_file=None).port == 8080
        assert StoreSettings(_env_file=None).max_log_entries == 10
        assert AuthSettings(_env_file=None).session_ttl_hours == 1
        assert CORSSettings(_env_file=None).allowed_origins == ["*"]

    def test_rejects_zero_retention(self):
        with pytest.raises(ValueError):
            StoreSettings(_env_file=None, max_log_entries=0)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestLogging:

    def test_configure_text(self, restore_root_logger):
        configure_logging("debug", "text")

        assert restore_root_logger.level == logging.DEBUG
        assert not isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)

    def test_configure_json(self, restore_root_logger):
        configure_logging("INFO", "json")

        formatter = restore_root_logger.handlers[0].formatter
        record = logging.LogRecord("device_relay.test", logging.INFO, __file__, 1, "hello %s", ("dev1",), None)
        payload = json.loads(formatter.format(record))

        assert isinstance(formatter, JsonFormatter)
        assert payload["message"] == "hello dev1"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "device_relay.test"

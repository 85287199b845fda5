"""
Unit tests for configuration and logging setup.
"""

import json
import logging

import pytest
from pydantic import ValidationError

from production_service.config.settings import Settings, get_settings
from production_service.core.shared.logger import ColoredFormatter, JSONFormatter, configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ORDER_SERVICE_URL", "PAYMENT_SERVICE_URL", "APP_PORT", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.APP_PORT == 3335
        assert settings.ORDER_SERVICE_URL == "http://localhost:3333"
        assert settings.PAYMENT_SERVICE_URL == "http://localhost:3334"
        assert settings.MICROSERVICE_TIMEOUT == 10.0
        assert not settings.uses_database

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PAYMENT_SERVICE_URL", "http://payment:3334/")
        monkeypatch.setenv("DB_URL", "sqlite+aiosqlite:///./production.db")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.PAYMENT_SERVICE_URL == "http://payment:3334"
        assert settings.uses_database
        assert settings.LOG_LEVEL == "DEBUG"

    def test_invalid_url_rejected(self, monkeypatch):
        monkeypatch.setenv("ORDER_SERVICE_URL", "not a url")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    def _record(self, message: str = "hello") -> logging.LogRecord:
        return logging.LogRecord("production_service.test", logging.INFO, __file__, 10, message, None, None)

    def test_json_formatter(self):
        record = self._record("Pedido pronto")
        record.correlation_id = "abc123"

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["message"] == "Pedido pronto"
        assert data["correlation_id"] == "abc123"

    def test_colored_formatter_leaves_record_untouched(self):
        record = self._record()

        output = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[32m" in output
        assert record.levelname == "INFO"

    def test_configure_logging(self):
        root = logging.getLogger()
        previous_handlers, previous_level = root.handlers[:], root.level
        try:
            configure_logging(level="WARNING", json_format=True)

            assert root.level == logging.WARNING
            assert isinstance(root.handlers[0].formatter, JSONFormatter)
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers[:] = previous_handlers
            root.setLevel(previous_level)

"""
Tests for environment configuration and logging setup.
"""

import logging

import pytest

from mesos_sandbox.config.provider import EnvConfigProvider
from mesos_sandbox.logging_config import HealthCheckFilter, get_logging_config


class TestEnvConfigProvider:
    """Test environment-based configuration."""

    def test_defaults(self, monkeypatch):
        for name in ["MESOS_MASTER_URL", "MESOS_REQUEST_TIMEOUT", "REDIS_URL", "FRAMEWORK_ID_KEY"]:
            monkeypatch.delenv(name, raising=False)
        provider = EnvConfigProvider()

        mesos = provider.get_mesos_config()
        storage = provider.get_storage_config()

        assert mesos.master_url == "http://localhost:5050"
        assert mesos.request_timeout == 5.0
        assert storage.redis_url == "redis://localhost:6379/0"
        assert storage.framework_id_key == "mesos-sandbox:ha:framework_id"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("MESOS_MASTER_URL", "http://master.mesos:5050/")
        monkeypatch.setenv("MESOS_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("API_PORT", "9090")
        monkeypatch.setenv("API_DEBUG", "true")
        provider = EnvConfigProvider()

        mesos = provider.get_mesos_config()
        api = provider.get_api_config()

        assert mesos.master_url == "http://master.mesos:5050/"
        assert mesos.request_timeout == 2.5
        assert api.port == 9090
        assert api.debug is True

    @pytest.mark.parametrize("value", ["soon", "0", "-1"])
    def test_invalid_timeout(self, monkeypatch, value):
        monkeypatch.setenv("MESOS_REQUEST_TIMEOUT", value)

        with pytest.raises(ValueError):
            EnvConfigProvider().get_mesos_config()


class TestLoggingConfig:
    """Test logging configuration."""

    def _record(self, name, message):
        return logging.LogRecord(name, logging.INFO, __file__, 1, message, None, None)

    def test_health_checks_suppressed(self):
        health_filter = HealthCheckFilter()

        assert not health_filter.filter(self._record("uvicorn.access", 'GET /health HTTP/1.1" 200'))
        assert health_filter.filter(self._record("uvicorn.access", 'GET /api/v1/executors HTTP/1.1" 200'))
        assert health_filter.filter(self._record("mesos_sandbox", "GET /health"))

    def test_level_applied(self):
        config = get_logging_config("debug")

        assert config["loggers"]["mesos_sandbox"]["level"] == "DEBUG"
        assert config["root"]["level"] == "DEBUG"

import logging

import pytest
from pydantic import ValidationError

from transmission_client import TransmissionClient
from transmission_client.config import ClientSettings, get_logger, get_settings


class TestClientSettings:
    def test_default_values(self, monkeypatch):
        for name in (
            "URL",
            "USERNAME",
            "PASSWORD",
            "RPC_PATH",
            "TIMEOUT_SECONDS",
            "MAX_CONFLICT_RETRIES",
            "DEBUG",
        ):
            monkeypatch.delenv(f"TRANSMISSION_{name}", raising=False)

        settings = ClientSettings(_env_file=None)

        assert settings.url == "http://127.0.0.1:9091"
        assert settings.username is None
        assert settings.password is None
        assert settings.rpc_path == "/transmission/rpc"
        assert settings.timeout_seconds == 10.0
        assert settings.max_conflict_retries == 1
        assert settings.debug is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TRANSMISSION_URL", "http://nas:9091")
        monkeypatch.setenv("TRANSMISSION_USERNAME", "admin")
        monkeypatch.setenv("TRANSMISSION_TIMEOUT_SECONDS", "2.5")

        settings = get_settings()

        assert settings.url == "http://nas:9091"
        assert settings.username == "admin"
        assert settings.timeout_seconds == 2.5

    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            ClientSettings(timeout_seconds=0)

    def test_invalid_retry_cap(self):
        with pytest.raises(ValidationError):
            ClientSettings(max_conflict_retries=-1)

    def test_client_from_settings(self):
        settings = ClientSettings(
            url="http://nas:9091",
            username="admin",
            password="pw",
            rpc_path="/custom/rpc",
            timeout_seconds=3,
            max_conflict_retries=2,
        )

        client = TransmissionClient.from_settings(settings)

        assert str(client.url) == "http://nas:9091/custom/rpc"
        assert client.credentials.username == "admin"
        assert client.credentials.password == "pw"
        assert client.timeout == 3
        assert client.max_conflict_retries == 2


class TestLogging:
    def test_get_logger_namespace(self):
        assert get_logger("client").name == "transmission_client.client"

    def test_setup_logging_debug(self):
        logger = logging.getLogger("transmission_client")
        previous_level = logger.level
        previous_handlers = list(logger.handlers)
        try:
            ClientSettings(debug=True).setup_logging()
            assert logger.level == logging.DEBUG
            assert logger.handlers
        finally:
            logger.setLevel(previous_level)
            logger.handlers = previous_handlers

    def test_setup_logging_level_name(self):
        logger = logging.getLogger("transmission_client")
        previous_level = logger.level
        try:
            ClientSettings(log_level="warning").setup_logging()
            assert logger.level == logging.WARNING
        finally:
            logger.setLevel(previous_level)

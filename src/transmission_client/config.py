"""
Configuration management for the client.
"""

import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RPC_PATH = "/transmission/rpc"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_CONFLICT_RETRIES = 1


class ClientSettings(BaseSettings):
    """Connection and logging settings, read from ``TRANSMISSION_*`` env vars."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TRANSMISSION_")

    url: str = "http://127.0.0.1:9091"
    username: Optional[str] = None
    password: Optional[str] = None
    rpc_path: str = DEFAULT_RPC_PATH
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_conflict_retries: int = Field(default=DEFAULT_MAX_CONFLICT_RETRIES, ge=0)

    debug: bool = False
    log_level: str = "INFO"

    def setup_logging(self) -> None:
        """Configure logging for the client."""
        level_name = "DEBUG" if self.debug else self.log_level.upper()
        level = getattr(logging, level_name, logging.INFO)

        logger = logging.getLogger("transmission_client")
        logger.setLevel(level)

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)


def get_settings() -> ClientSettings:
    return ClientSettings()


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"transmission_client.{name}")

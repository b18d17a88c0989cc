"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Protocol


@dataclass
class MesosConfig:
    """Mesos master connection configuration."""
    master_url: str
    request_timeout: float


@dataclass
class StorageConfig:
    """Registry storage configuration."""
    redis_url: str
    framework_id_key: str


@dataclass
class APIConfig:
    """API configuration."""
    port: int
    host: str
    debug: bool
    log_level: str


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_mesos_config(self) -> MesosConfig:
        """Get Mesos configuration."""
        ...

    def get_storage_config(self) -> StorageConfig:
        """Get storage configuration."""
        ...

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_mesos_config(self) -> MesosConfig:
        """Get Mesos configuration from environment variables."""
        timeout_env = os.getenv("MESOS_REQUEST_TIMEOUT", "5.0")
        try:
            request_timeout = float(timeout_env)
        except ValueError:
            raise ValueError(
                f"MESOS_REQUEST_TIMEOUT must be a number of seconds, got {timeout_env!r}"
            )
        if request_timeout <= 0:
            raise ValueError("MESOS_REQUEST_TIMEOUT must be positive")

        return MesosConfig(
            master_url=os.getenv("MESOS_MASTER_URL", "http://localhost:5050"),
            request_timeout=request_timeout,
        )

    def get_storage_config(self) -> StorageConfig:
        """Get storage configuration from environment variables."""
        return StorageConfig(
            redis_url=os.getenv("REDIS_URL", "redis://localhost:6379/0"),
            framework_id_key=os.getenv("FRAMEWORK_ID_KEY", "mesos-sandbox:ha:framework_id"),
        )

    def get_api_config(self) -> APIConfig:
        """Get API configuration from environment variables."""
        return APIConfig(
            port=int(os.getenv("API_PORT", "8080")),
            host=os.getenv("API_HOST", "0.0.0.0"),
            debug=os.getenv("API_DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

"""
Configuration Management.

Loads settings from config/settings/*.yaml and optional environment
overrides from config/.env or the process environment.

Settings (YAML):
    application.yaml   - App identity, server, cors, pagination
    storage.yaml       - Location and formatting of the notes data file
    logging.yaml       - Logging configuration
    concurrency.yaml   - I/O thread pool sizing

Environment overrides (prefix NOTEKEEPER_):
    NOTEKEEPER_DATA_FILE, NOTEKEEPER_HOST, NOTEKEEPER_PORT
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from notekeeper.core.config_schema import (
    ApplicationSchema,
    ConcurrencySchema,
    LoggingSchema,
    StorageSchema,
)


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Environment overrides. Every field is optional; YAML supplies the defaults."""

    data_file: str | None = None
    host: str | None = None
    port: int | None = None

    model_config = SettingsConfigDict(
        env_prefix="NOTEKEEPER_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Missing keys, wrong types, or unknown fields raise a clear error
    immediately instead of causing cryptic KeyErrors later.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._storage = _load_validated(StorageSchema, "storage.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")
        self._concurrency = _load_validated(ConcurrencySchema, "concurrency.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def storage(self) -> StorageSchema:
        """Notes data file settings."""
        return self._storage

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging

    @property
    def concurrency(self) -> ConcurrencySchema:
        """Concurrency settings (I/O pool)."""
        return self._concurrency


@lru_cache
def get_settings() -> Settings:
    """Get cached environment overrides. Reads config/.env when present."""
    env_path = find_project_root() / "config" / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_data_file_path() -> Path:
    """
    Resolve the notes data file.

    NOTEKEEPER_DATA_FILE wins over storage.yaml. Relative paths are
    resolved against the project root.
    """
    configured = get_settings().data_file or get_app_config().storage.data_file
    path = Path(configured)
    if not path.is_absolute():
        path = find_project_root() / path
    return path


def get_server_address() -> tuple[str, int]:
    """
    Get the host and port the server should bind to.

    Returns:
        Tuple of (host, port).
    """
    server = get_app_config().application.server
    settings = get_settings()
    return settings.host or server.host, settings.port or server.port

"""
Schemas for config/settings/*.yaml.

AppConfig validates each file against one of these at first access, so a
typo in a key or a wrong type stops startup with the file name in the error.

    application.yaml  ApplicationSchema
    storage.yaml      StorageSchema
    logging.yaml      LoggingSchema
    concurrency.yaml  ConcurrencySchema
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _StrictBase(BaseModel):
    """Unknown keys are errors."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class ServerSchema(_StrictBase):
    host: str
    port: int


class CorsSchema(_StrictBase):
    origins: list[str]


class PaginationSchema(_StrictBase):
    """Page size used when `limit` is absent or invalid; optional clamp."""

    default_limit: int = Field(ge=1)
    max_limit: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _max_covers_default(self) -> "PaginationSchema":
        if self.max_limit is not None and self.max_limit < self.default_limit:
            raise ValueError("max_limit must not be below default_limit")
        return self


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    environment: str
    debug: bool
    api_prefix: str
    docs_enabled: bool
    server: ServerSchema
    cors: CorsSchema
    pagination: PaginationSchema


# =============================================================================
# storage.yaml
# =============================================================================


class StorageSchema(_StrictBase):
    """data_file is relative to the project root unless absolute. indent 0 writes compact JSON."""

    data_file: str
    indent: int = Field(ge=0)


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int = Field(ge=1)
    backup_count: int = Field(ge=0)


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["console", "json"]
    handlers: HandlersSchema


# =============================================================================
# concurrency.yaml
# =============================================================================


class ThreadPoolSchema(_StrictBase):
    max_workers: int = Field(ge=1)


class ConcurrencySchema(_StrictBase):
    thread_pool: ThreadPoolSchema

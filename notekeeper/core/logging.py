"""
Logging Setup.

notekeeper logs through structlog bound to the stdlib root logger, so
uvicorn and library records share one pipeline. Levels, the console
renderer and the optional rotating JSONL file come from
config/settings/logging.yaml; setup_logging() arguments take precedence.

Usage:
    from notekeeper.core.logging import get_logger, setup_logging

    setup_logging()
    logger = get_logger(__name__)
    logger.info("Note created", extra={"note_id": note.id})

Request handlers get request_id in every record through the contextvars
bound by RequestContextMiddleware.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from notekeeper.core.config import find_project_root, load_yaml_config

_logging_config: dict[str, Any] | None = None

_CALLSITE = [
    structlog.processors.CallsiteParameter.FUNC_NAME,
    structlog.processors.CallsiteParameter.LINENO,
]


def _load_logging_config() -> dict[str, Any]:
    """Read logging.yaml once per process."""
    global _logging_config
    if _logging_config is None:
        _logging_config = load_yaml_config("logging.yaml")
    return _logging_config


def _resolve_log_path(configured_path: str) -> Path:
    return find_project_root() / configured_path


def _pick(override: Any, configured: Any) -> Any:
    return configured if override is None else override


def _processors() -> list[Processor]:
    """Processors applied to structlog and foreign stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(parameters=_CALLSITE),
    ]


def _formatter(renderer: Processor, chain: list[Processor]) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=chain)


def _file_handler(file_config: dict[str, Any], formatter: logging.Formatter) -> logging.Handler:
    """Rotating JSONL handler; creates the log directory."""
    log_path = _resolve_log_path(file_config["path"])
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=file_config["max_bytes"],
        backupCount=file_config["backup_count"],
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structlog and replace the root logger's handlers.

    Args:
        level: Root level name, e.g. "DEBUG"
        format_type: "console" for the coloured dev renderer, "json" otherwise
        enable_console: Write records to stdout
        enable_file_logging: Write JSON records to the configured file
    """
    config = _load_logging_config()
    handlers = config["handlers"]
    chain = _processors()

    structlog.configure(
        processors=chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    json_formatter = _formatter(structlog.processors.JSONRenderer(), chain)
    if _pick(format_type, config["format"]) == "console":
        console_formatter = _formatter(structlog.dev.ConsoleRenderer(colors=True), chain)
    else:
        console_formatter = json_formatter

    root = logging.getLogger()
    root.setLevel(getattr(logging, _pick(level, config["level"]).upper()))
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    if _pick(enable_console, handlers["console"]["enabled"]):
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(console_formatter)
        root.addHandler(console)

    if _pick(enable_file_logging, handlers["file"]["enabled"]):
        root.addHandler(_file_handler(handlers["file"], json_formatter))

    # per-request lines come from RequestContextMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Return a structlog logger named after the calling module."""
    return structlog.get_logger(name)

"""Structured logging configuration for the ingredient normalizer."""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

from ingredient_normalizer.config import get_settings

# Context variables for batch tracking
source_ctx: ContextVar[str | None] = ContextVar("source", default=None)
line_ctx: ContextVar[int | None] = ContextVar("line", default=None)


class StructuredJsonFormatter(logging.Formatter):
    """JSON formatter for machine-readable logs."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add context from context variables
        if source := source_ctx.get():
            log_data["source"] = source
        if (line := line_ctx.get()) is not None:
            log_data["line"] = line

        # Add extra fields from the record
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data, ensure_ascii=False)


class ContextualFormatter(logging.Formatter):
    """Human-readable formatter with batch context."""

    def format(self, record: logging.LogRecord) -> str:
        context_parts = []
        if source := source_ctx.get():
            context_parts.append(f"source={source}")
        if (line := line_ctx.get()) is not None:
            context_parts.append(f"line={line}")

        context_str = f" [{', '.join(context_parts)}]" if context_parts else ""

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)
        message = record.getMessage()

        formatted = f"{timestamp} | {level} | {record.name}{context_str} | {message}"

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context variables."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra", {})

        if source := source_ctx.get():
            extra["source"] = source
        if (line := line_ctx.get()) is not None:
            extra["line"] = line

        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger for the given module name."""
    logger = logging.getLogger(name)
    return ContextLogger(logger, {})


def configure_logging(
    log_level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure logging for command-line use.

    Library code never calls this; applications embedding the parser keep
    their own logging setup.

    Args:
        log_level: Minimum log level. Defaults to the configured setting.
        json_format: Use JSON format for logs. Defaults to the configured setting.
        log_file: Optional file path to write logs to.
    """
    settings = get_settings()
    if json_format is None:
        json_format = settings.json_logs

    level_str = (log_level or settings.log_level).upper()
    level = getattr(logging, level_str, logging.WARNING)

    if json_format:
        formatter: logging.Formatter = StructuredJsonFormatter()
    else:
        formatter = ContextualFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console output goes to stderr so parsed lines on stdout stay clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    logging.getLogger("ingredient_normalizer").setLevel(level)

    logger = get_logger(__name__)
    logger.debug(
        f"Logging configured: level={level_str}, format={'json' if json_format else 'text'}"
    )


class LoggingContext:
    """Context manager for setting logging context."""

    def __init__(self, source: str | None = None, line: int | None = None):
        self.source = source
        self.line = line
        self._tokens: dict[str, Any] = {}

    def __enter__(self) -> "LoggingContext":
        if self.source is not None:
            self._tokens["source"] = source_ctx.set(self.source)
        if self.line is not None:
            self._tokens["line"] = line_ctx.set(self.line)
        return self

    def __exit__(self, *args: Any) -> None:
        for name, token in self._tokens.items():
            ctx_var = {"source": source_ctx, "line": line_ctx}[name]
            ctx_var.reset(token)

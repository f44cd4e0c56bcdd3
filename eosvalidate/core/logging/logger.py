"""
eosvalidate Logging Subsystem

Purpose
-------
Provide the logging setup used by the CLI and by applications that embed the
rule catalog:

- Structured JSON logs for aggregation and analysis.
- LogContext-based propagation of validation context via ContextVars.
- Correlation IDs for tracing a batch of checks.
- Console output: JSON in production, colored human text in dev.

Responsibilities
----------------
- Initialize and configure the root logger on request (`setup_logging()`).
- Enrich all log records with contextual fields:
  - field, rule
  - correlation_id
  - component, operation
- Provide simple helper APIs:
  - get_logger()
  - LogContext (context manager)
  - set_log_context() / clear_log_context()

Design Decisions
----------------
- Importing the package never configures logging; library users keep control
  of their handlers. The CLI calls `setup_logging()`.
- JSONFormatter is the canonical representation.
- Extra fields passed via `logger.debug("msg", extra={...})` are merged into JSON.

Dependencies
------------
- eosvalidate.core.config.config.Config
"""

from __future__ import annotations

import json
import logging
import sys
import uuid
from contextvars import ContextVar, Token
from dataclasses import dataclass
from datetime import datetime, timezone
from logging import Logger
from typing import Any, Dict, Optional, TextIO

from eosvalidate.core.config.config import Config


# ============================================================================
# Validation Context (ContextVars)
# ============================================================================

_request_context: ContextVar[Dict[str, Any]] = ContextVar(
    "request_context",
    default={},
)


# ============================================================================
# Config / Environment
# ============================================================================


@dataclass(frozen=True)
class LoggerConfig:
    """Configuration for the logging subsystem."""

    CONSOLE_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
    DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    @property
    def environment(self) -> str:
        return str(Config.ENVIRONMENT).lower()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def log_level(self) -> int:
        level_name = Config.LOG_LEVEL
        if not isinstance(level_name, str):
            level_name = "INFO"
        return getattr(logging, level_name.upper(), logging.INFO)

    @property
    def use_json(self) -> bool:
        if Config.LOG_JSON is None:
            return self.is_production
        return bool(Config.LOG_JSON)

    @property
    def use_colors(self) -> bool:
        if self.is_production or self.use_json:
            return False
        return bool(Config.LOG_COLORS) and sys.stderr.isatty()


LOGGER_CONFIG = LoggerConfig()


# ============================================================================
# Filters & Formatters
# ============================================================================


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        context: Dict[str, Any] = _request_context.get({})

        record.field = context.get("field", "N/A")
        record.rule = context.get("rule", "N/A")
        record.correlation_id = context.get("correlation_id") or "N/A"
        record.component = context.get("component") or record.name.split(".", 1)[0]
        record.operation = context.get("operation", "N/A")

        return True


class ColoredFormatter(logging.Formatter):
    COLORS: Dict[str, str] = {
        "DEBUG": "\033[90m",
        "INFO": "\033[94m",
        "WARNING": "\033[93m",
        "ERROR": "\033[91m",
        "CRITICAL": "\033[91m\033[1m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        original = record.levelname
        prefix = self.COLORS.get(original, "")
        reset = self.COLORS["RESET"] if prefix else ""

        if prefix:
            record.levelname = f"{prefix}{original}{reset}"

        try:
            return super().format(record)
        finally:
            record.levelname = original


class JSONFormatter(logging.Formatter):
    STANDARD_ATTRS = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }

    CONTEXT_ATTRS = {
        "field",
        "rule",
        "correlation_id",
        "component",
        "operation",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        created_dt = datetime.fromtimestamp(record.created, tz=timezone.utc)

        log_data: Dict[str, Any] = {
            "timestamp": created_dt.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for attr in self.CONTEXT_ATTRS:
            value = getattr(record, attr, None)
            if value not in (None, "N/A"):
                log_data[attr] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra: Dict[str, Any] = {}
        for key, val in record.__dict__.items():
            if key in self.STANDARD_ATTRS or key in self.CONTEXT_ATTRS:
                continue
            if key.startswith("_"):
                continue
            if key in {"levelname", "name", "message", "asctime"}:
                continue
            extra[key] = val

        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, ensure_ascii=False, default=str)


# ============================================================================
# Global Setup
# ============================================================================


def _build_console_handler(stream: Optional[TextIO] = None) -> logging.Handler:
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(LOGGER_CONFIG.log_level)
    handler.addFilter(ContextFilter())

    if LOGGER_CONFIG.use_json:
        handler.setFormatter(JSONFormatter())
    elif LOGGER_CONFIG.use_colors:
        handler.setFormatter(
            ColoredFormatter(
                fmt=LOGGER_CONFIG.CONSOLE_FORMAT,
                datefmt=LOGGER_CONFIG.DATE_FORMAT,
            )
        )
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt=LOGGER_CONFIG.CONSOLE_FORMAT,
                datefmt=LOGGER_CONFIG.DATE_FORMAT,
            )
        )

    return handler


def setup_logging(stream: Optional[TextIO] = None) -> None:
    """Install the console handler on the root logger once."""
    root = logging.getLogger()

    if getattr(root, "_eosvalidate_logging_initialized", False):
        return

    root.setLevel(LOGGER_CONFIG.log_level)
    root.addHandler(_build_console_handler(stream))

    setattr(root, "_eosvalidate_logging_initialized", True)

    log = logging.getLogger(__name__)
    log.debug(
        "Logging initialized",
        extra={
            "environment": LOGGER_CONFIG.environment,
            "log_level": logging.getLevelName(LOGGER_CONFIG.log_level),
            "json": LOGGER_CONFIG.use_json,
            "colors": LOGGER_CONFIG.use_colors,
        },
    )


def shutdown_logging() -> None:
    root = logging.getLogger()
    log = logging.getLogger(__name__)

    if not getattr(root, "_eosvalidate_logging_initialized", False):
        return

    log.debug("Shutting down logging subsystem.")

    for handler in list(root.handlers):
        if not any(isinstance(f, ContextFilter) for f in handler.filters):
            continue
        try:
            handler.flush()
        except Exception:
            log.exception("Error while flushing logging handler.")
        try:
            handler.close()
        except Exception:
            log.exception("Error while closing logging handler.")
        root.removeHandler(handler)

    setattr(root, "_eosvalidate_logging_initialized", False)


# ============================================================================
# Public API
# ============================================================================


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)


class LogContext:
    """
    Bind validation context to every record logged inside the block.

    Example
    -------
    >>> with LogContext(field="accounts", rule="eos_names_list"):
    ...     check("eos_names_list", "accounts", "eosio|6")
    """

    def __init__(
        self,
        field: Optional[str] = None,
        rule: Optional[str] = None,
        component: Optional[str] = None,
        operation: Optional[str] = None,
        correlation_id: Optional[str] = None,
        **extra: Any,
    ) -> None:
        self.context: Dict[str, Any] = {
            "field": field or "N/A",
            "rule": rule or "N/A",
            "component": component,
            "operation": operation,
            "correlation_id": correlation_id or self._generate_correlation_id(),
            **extra,
        }

        self._token: Optional[Token[Dict[str, Any]]] = None

    @staticmethod
    def _generate_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    def __enter__(self) -> "LogContext":
        self._token = _request_context.set(self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            _request_context.reset(self._token)


def set_log_context(
    field: Optional[str] = None,
    rule: Optional[str] = None,
    component: Optional[str] = None,
    operation: Optional[str] = None,
    correlation_id: Optional[str] = None,
    **extra: Any,
) -> None:

    current = _request_context.get({}).copy()

    if field is not None:
        current["field"] = field
    if rule is not None:
        current["rule"] = rule
    if component is not None:
        current["component"] = component
    if operation is not None:
        current["operation"] = operation
    if correlation_id:
        current["correlation_id"] = correlation_id

    current.update(extra)
    _request_context.set(current)


def clear_log_context() -> None:
    _request_context.set({})

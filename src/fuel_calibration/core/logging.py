"""
Centralized logging configuration for the fuel sensor calibration engine.

Provides structured logging with JSON formatting support, a context manager
for tagging log messages (for example with the uploaded file name) and lazy
configuration.

Usage:
    from fuel_calibration.core.logging import get_logger, setup_logging

    setup_logging(level="DEBUG", json_format=True)

    logger = get_logger(__name__)
    logger.info("Calibration loaded", extra={"points": 11})
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

PACKAGE_LOGGER = "fuel_calibration"

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

# Attributes every LogRecord has; anything else came in through ``extra``
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Outputs one JSON object per record with consistent fields, the active
    log context and any ``extra`` values passed by the caller.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        ctx = _log_context.get()
        if ctx:
            log_data["context"] = ctx

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["exception_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None

        return json.dumps(log_data, default=str, ensure_ascii=False)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter for development."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        original = record.levelname
        record.levelname = f"{color}{record.levelname:8}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


_logging_configured = False


def setup_logging(
    level: str | None = None,
    log_file: Path | None = None,
    json_format: bool = False,
    colored: bool = True,
) -> None:
    """Configure package logging.

    Should be called once at application startup. Subsequent calls
    replace the previous configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        log_file: Optional file path for log output. Defaults to config value.
        json_format: Use JSON formatting for structured logs.
        colored: Use colored output in console (ignored if json_format=True).
    """
    global _logging_configured

    from fuel_calibration.config import get_settings

    settings = get_settings()
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    root_logger = logging.getLogger(PACKAGE_LOGGER)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG)

    if json_format:
        console_handler.setFormatter(JSONFormatter())
    elif colored and sys.stderr.isatty():
        console_handler.setFormatter(
            ColoredFormatter(
                "%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s",
                datefmt="%H:%M:%S",
            )
        )
    else:
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())  # Always JSON for files
        root_logger.addHandler(file_handler)

    _logging_configured = True
    root_logger.debug(f"Logging configured: level={level}, file={log_file}, json={json_format}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Names outside the package are normalized under ``fuel_calibration``.
    Configuration is left to the application; a library import never
    installs handlers on its own.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def is_configured() -> bool:
    """Whether setup_logging has been called."""
    return _logging_configured


class LogContext:
    """Context manager for adding context to log messages.

    Example:
        with LogContext(source="calibration.xml"):
            logger.info("Parsing")  # JSON output includes the source
    """

    def __init__(self, **context: Any):
        self.context = context
        self._token = None

    def __enter__(self) -> "LogContext":
        current = _log_context.get()
        self._token = _log_context.set({**current, **self.context})
        return self

    def __exit__(self, *args: Any) -> None:
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


def current_context() -> dict[str, Any]:
    """Return a copy of the active log context."""
    return dict(_log_context.get())


@contextmanager
def log_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
) -> Iterator[None]:
    """Log operation start/end with timing.

    Failures are logged with the exception type and re-raised.

    Example:
        with log_operation(logger, "parse_calibration"):
            ...
    """
    start = time.perf_counter()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        elapsed = time.perf_counter() - start
        logger.warning(
            f"Failed: {operation}",
            extra={
                "duration_seconds": round(elapsed, 4),
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
        raise
    elapsed = time.perf_counter() - start
    logger.log(level, f"Completed: {operation}", extra={"duration_seconds": round(elapsed, 4)})

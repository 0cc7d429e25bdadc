"""
Logging configuration for applications that run sequenced pipelines.

The library itself only creates module loggers. Applications call
setup_logging once to get:
- Console output on stdout
- Optional file output to {log_directory}/{service_name}.log
- Level taken from SEQSTREAM_LOG_LEVEL unless given explicitly
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Optional, Union

from .config import load_settings

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"
_LOG_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # Best-effort cleanup operation
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _build_console_handler() -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    return console_handler


def _build_file_handler(service_name: str, log_directory: Path, append: bool) -> logging.Handler:
    log_directory.mkdir(parents=True, exist_ok=True)
    log_path = log_directory / f"{service_name}.log"
    file_mode = "a" if append else "w"

    file_handler = logging.handlers.WatchedFileHandler(log_path, mode=file_mode, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    return file_handler


def setup_logging(
    service_name: Optional[str] = None,
    level: Optional[Union[int, str]] = None,
    log_directory: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure the root logger.

    Existing root handlers are closed and replaced, so calling this twice does
    not duplicate output.

    Args:
        service_name: Names the log file; no file is written without it
        level: Logging level; defaults to SEQSTREAM_LOG_LEVEL
        log_directory: Directory for the log file (defaults to ./logs)

    Returns:
        The configured root logger
    """
    settings = load_settings()
    resolved_level = level if level is not None else settings.log_level
    if isinstance(resolved_level, str):
        resolved_level = resolved_level.upper()

    with _config_lock:
        root_logger = logging.getLogger()
        _close_handlers(root_logger)
        root_logger.handlers = []

        root_logger.addHandler(_build_console_handler())

        if service_name:
            directory = log_directory if log_directory is not None else Path("logs")
            root_logger.addHandler(_build_file_handler(service_name, directory, settings.log_append))

        root_logger.setLevel(resolved_level)

    _MODULE_LOGGER.debug("Logging configured (service=%s, level=%s)", service_name, resolved_level)
    return root_logger


__all__ = ["setup_logging"]

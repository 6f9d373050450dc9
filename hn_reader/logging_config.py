"""
Logging configuration for HN Reader.

Every logger handed out by get_logger lives under the ``hn_reader``
namespace, so setup_logging only has to configure that one tree.
"""

import logging
import sys
import time
from functools import wraps
from typing import Optional

PACKAGE_LOGGER = "hn_reader"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# HTTP and markup libraries that log per request or per document
NOISY_LOGGERS = ("requests", "urllib3", "charset_normalizer", "bs4")


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Configure the ``hn_reader`` logger tree.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
        log_file: Optional log file, written in addition to stderr.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # stderr keeps log lines out of the story listings on stdout
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Logger for a module or class, placed under the package namespace."""
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def log_performance(logger: logging.Logger, operation: str):
    """
    Decorator timing a network-bound call.

    Failures the caller may retry are logged as warnings, everything else
    as errors. The exception is always re-raised.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            logger.debug(f"Starting {operation}")

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.perf_counter() - start_time
                level = logging.WARNING if getattr(e, "retryable", False) else logging.ERROR
                logger.log(level, f"Failed {operation} after {duration:.2f}s: {e}")
                raise

            duration = time.perf_counter() - start_time
            logger.info(f"Completed {operation} in {duration:.2f}s")
            return result
        return wrapper
    return decorator

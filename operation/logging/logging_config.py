"""
Logging configuration for the credit advisor.
Every record carries the id of the evaluation session that produced it.
"""

import functools
import logging
import os
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime
from typing import Optional

# Id of the evaluation session currently being processed
correlation_id: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

_logging_configured = False


class CorrelationFilter(logging.Filter):
    """Attach the current session id to log records"""
    def filter(self, record):
        record.correlation_id = correlation_id.get() or 'N/A'
        return True


class StructuredFormatter(logging.Formatter):
    """[TIMESTAMP] [LEVEL] [SESSION] [MODULE] MESSAGE"""
    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        session = getattr(record, 'correlation_id', 'N/A')
        line = f"[{timestamp}] [{record.levelname}] [{session}] [{record.name}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _build_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(StructuredFormatter())
    handler.addFilter(CorrelationFilter())
    return handler


def setup_logging(level: str = "INFO", log_file: Optional[str] = None, force: bool = False) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a file that receives a copy of every record
        force: Reconfigure even if logging was already set up
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    log_level = getattr(logging, str(level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    root_logger.addHandler(_build_handler(logging.StreamHandler(sys.stdout), log_level))

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        root_logger.addHandler(
            _build_handler(logging.FileHandler(log_file, encoding='utf-8'), log_level)
        )

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger whose records carry the session id.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)


def set_correlation_id(cid: Optional[str] = None) -> str:
    """
    Bind a session id to the current context, generating one if None.

    Returns:
        The session id now in effect
    """
    if cid is None:
        cid = uuid.uuid4().hex[:12]
    correlation_id.set(cid)
    return cid


def get_correlation_id() -> Optional[str]:
    """Get the session id bound to the current context"""
    return correlation_id.get()


def log_function_call(func):
    """Decorator logging entry/exit of a function at DEBUG, and failures at ERROR"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        logger.debug(f"Entering {func.__name__}")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True)
            raise
        logger.debug(f"Exiting {func.__name__}")
        return result
    return wrapper

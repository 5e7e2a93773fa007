"""
Centralized logging configuration for the Billboard Console.

Provides three dedicated log streams:
    1. Exception log   – log/exceptions.log  – Failures with full tracebacks
    2. UX Action log   – log/ux_actions.log  – Every user-initiated action
    3. Trace log       – log/trace.log       – Entry/exit of data and ledger calls

Each stream is a rotating file inside the ``log/`` directory.

Usage
-----
    from core.app_logging import setup_all_loggers, get_app_logger, log_ux_action, trace

    setup_all_loggers()          # once, in billboard_console.py
    logger = get_app_logger()

    @trace
    def load_data(self):
        ...
"""

from __future__ import annotations

import functools
import logging
import logging.handlers
import os
import sys
import time
from typing import Any, Callable, TypeVar

from core.config import LOG_DIR

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_LOG_DIR = os.path.join(_PROJECT_ROOT, LOG_DIR)

_MAX_BYTES = 5 * 1024 * 1024  # 5 MB per file
_BACKUP_COUNT = 5

EXCEPTION_LOGGER_NAME = "billboard.exception"
UX_ACTION_LOGGER_NAME = "billboard.ux_action"
TRACE_LOGGER_NAME = "billboard.trace"
APP_LOGGER_NAME = "billboard_app"

_REPR_LIMIT = 120
_ARGS_LIMIT = 500
_RESULT_LIMIT = 200

F = TypeVar("F", bound=Callable[..., Any])

# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

_EXCEPTION_FMT = logging.Formatter(
    "[%(asctime)s] %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_UX_ACTION_FMT = logging.Formatter(
    "[%(asctime)s] %(levelname)-8s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_TRACE_FMT = logging.Formatter(
    "[%(asctime)s.%(msecs)03d] %(levelname)-8s | %(threadName)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_CONSOLE_FMT = logging.Formatter(
    "[%(asctime)s] %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _ensure_log_dir() -> None:
    """Create the ``log/`` directory if it does not exist."""
    os.makedirs(_LOG_DIR, exist_ok=True)


def _rotating_handler(filename: str, formatter: logging.Formatter, level: int) -> logging.Handler:
    path = os.path.join(_LOG_DIR, filename)
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _console_handler(level: int = logging.WARNING) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_CONSOLE_FMT)
    return handler


def _clear_logger_handlers(logger: logging.Logger) -> None:
    """Close and remove existing handlers so repeated setup does not leak files."""
    for handler in logger.handlers[:]:
        try:
            handler.close()
        except Exception:
            pass
    logger.handlers.clear()


def _configure(name: str, handlers: list[logging.Handler]) -> logging.Logger:
    logger = logging.getLogger(name)
    _clear_logger_handlers(logger)
    logger.setLevel(logging.DEBUG)
    for handler in handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def setup_all_loggers() -> None:
    """
    Initialize all application loggers. Call once at startup.

        - billboard.exception  → log/exceptions.log (+ console ERROR)
        - billboard.ux_action  → log/ux_actions.log
        - billboard.trace      → log/trace.log
        - billboard_app        → log/exceptions.log (+ console WARNING)
    """
    _ensure_log_dir()
    _configure(
        EXCEPTION_LOGGER_NAME,
        [
            _rotating_handler("exceptions.log", _EXCEPTION_FMT, logging.WARNING),
            _console_handler(logging.ERROR),
        ],
    )
    _configure(
        UX_ACTION_LOGGER_NAME,
        [_rotating_handler("ux_actions.log", _UX_ACTION_FMT, logging.INFO)],
    )
    _configure(
        TRACE_LOGGER_NAME,
        [_rotating_handler("trace.log", _TRACE_FMT, logging.DEBUG)],
    )
    _configure(
        APP_LOGGER_NAME,
        [
            _rotating_handler("exceptions.log", _EXCEPTION_FMT, logging.WARNING),
            _console_handler(logging.WARNING),
        ],
    )


def get_exception_logger() -> logging.Logger:
    return logging.getLogger(EXCEPTION_LOGGER_NAME)


def get_ux_logger() -> logging.Logger:
    return logging.getLogger(UX_ACTION_LOGGER_NAME)


def get_trace_logger() -> logging.Logger:
    return logging.getLogger(TRACE_LOGGER_NAME)


def get_app_logger() -> logging.Logger:
    return logging.getLogger(APP_LOGGER_NAME)


# ---------------------------------------------------------------------------
# UX-action logging helpers
# ---------------------------------------------------------------------------

def log_ux_action(action_name: str, details: str = "", user_context: str = "") -> None:
    """
    Log a user-initiated action to the UX action log.

    Args:
        action_name: Short verb phrase, e.g. "Add Receipt", "Print Statement".
        details: Free-form detail string.
        user_context: Optional extra context (e.g. customer name, entry id).
    """
    parts = [f"ACTION={action_name}"]
    if user_context:
        parts.append(f"CTX={user_context}")
    if details:
        parts.append(f"DETAILS={details}")
    get_ux_logger().info(" | ".join(parts))


def log_ux_action_result(action_name: str, success: bool, details: str = "") -> None:
    """Log the outcome of an action previously logged with ``log_ux_action``."""
    ux = get_ux_logger()
    status = "SUCCESS" if success else "FAILURE"
    msg = f"RESULT={status} | ACTION={action_name}"
    if details:
        msg += f" | DETAILS={details}"
    if success:
        ux.info(msg)
    else:
        ux.warning(msg)


def log_exception(action: str, exc: BaseException, context: str = "") -> None:
    """Log an exception with full traceback to the exception log."""
    msg = f"EXCEPTION in {action}: {exc}"
    if context:
        msg += f" | CTX={context}"
    get_exception_logger().error(msg, exc_info=exc)


# ---------------------------------------------------------------------------
# Trace decorator
# ---------------------------------------------------------------------------

def _short_repr(value: Any, limit: int) -> str:
    r = repr(value)
    if len(r) > limit:
        r = r[: limit - 3] + "..."
    return r


def trace(func: F) -> F:
    """
    Decorator that logs entry and exit with arguments and duration.

    Produces trace entries like::

        [2026-10-17 18:00:00.123] DEBUG | MainThread | ENTER LedgerSession.load_data(<LedgerSession ...>)
        [2026-10-17 18:00:00.131] DEBUG | MainThread | EXIT  LedgerSession.load_data -> True  [0.0081s]
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        tlog = get_trace_logger()
        func_name = func.__qualname__

        arg_parts = [_short_repr(a, _REPR_LIMIT) for a in args]
        arg_parts.extend(f"{k}={_short_repr(v, _REPR_LIMIT)}" for k, v in kwargs.items())
        arg_str = ", ".join(arg_parts)
        if len(arg_str) > _ARGS_LIMIT:
            arg_str = arg_str[: _ARGS_LIMIT - 3] + "..."

        tlog.debug("ENTER %s(%s)", func_name, arg_str)
        t0 = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            elapsed = time.perf_counter() - t0
            tlog.debug("RAISE %s -> %s: %s  [%.4fs]", func_name, type(exc).__name__, exc, elapsed)
            raise
        elapsed = time.perf_counter() - t0
        tlog.debug("EXIT  %s -> %s  [%.4fs]", func_name, _short_repr(result, _RESULT_LIMIT), elapsed)
        return result

    return wrapper  # type: ignore

"""
Centralized error handling for UI actions.

Provides decorators that catch unhandled exceptions in Tk callbacks, log them
and show an error dialog instead of letting the exception reach the Tk event
loop.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from tkinter import messagebox

from core.app_logging import log_ux_action_result

logger = logging.getLogger("billboard_app")

F = TypeVar("F", bound=Callable[..., Any])

_MAX_ERROR_LEN = 500


def _handle_exception(action: str, exc: Exception, show_error_dialog: bool, log_full_traceback: bool) -> None:
    logger.error(f"Error in {action}: {exc}", exc_info=log_full_traceback)
    log_ux_action_result(action, False, str(exc))
    if not show_error_dialog:
        return
    try:
        messagebox.showerror(f"خطأ: {action}", _format_error_message(action, str(exc)))
    except Exception as dialog_exc:
        logger.exception(f"Failed to show error dialog: {dialog_exc}")


def safe_ui_action(
    action_name: str = "",
    show_error_dialog: bool = True,
    log_full_traceback: bool = True,
) -> Callable[[F], F]:
    """
    Wrap a UI action so unexpected exceptions are logged and shown, not raised.

    Args:
        action_name: Human-readable name of the action. Defaults to the function name.
        show_error_dialog: Show a messagebox when the action fails.
        log_full_traceback: Include the traceback in the app log.

    Example:
        @safe_ui_action("Print Statement")
        def print_statement_action(app, session):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            action = action_name or func.__name__
            try:
                return func(*args, **kwargs)
            except KeyboardInterrupt:
                raise
            except Exception as exc:
                _handle_exception(action, exc, show_error_dialog, log_full_traceback)
                return None

        return wrapper  # type: ignore

    return decorator


def safe_ui_action_returning(
    action_name: str = "",
    return_on_error: Any = False,
    show_error_dialog: bool = True,
    log_full_traceback: bool = True,
) -> Callable[[F], F]:
    """
    Like ``safe_ui_action`` but returns ``return_on_error`` when the action fails.

    Dialog submit callbacks use this: returning False keeps the dialog open.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            action = action_name or func.__name__
            try:
                return func(*args, **kwargs)
            except KeyboardInterrupt:
                raise
            except Exception as exc:
                _handle_exception(action, exc, show_error_dialog, log_full_traceback)
                return return_on_error

        return wrapper  # type: ignore

    return decorator


def _format_error_message(action: str, error_msg: str) -> str:
    if len(error_msg) > _MAX_ERROR_LEN:
        error_msg = error_msg[: _MAX_ERROR_LEN - 3] + "..."

    lines = [f"حدث خطأ أثناء: {action}", "", error_msg, "", "حاول مرة أخرى."]
    return "\n".join(lines)


__all__ = [
    "safe_ui_action",
    "safe_ui_action_returning",
]

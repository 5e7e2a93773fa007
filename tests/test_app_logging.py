"""
Tests for the centralized logging infrastructure (app_logging.py).

Verifies:
    - Log directory creation
    - UX Action log records and results
    - Exception log with traceback
    - @trace enter/exit/raise records
"""

import logging
import os
import shutil
import sys
import tempfile
import unittest
from unittest.mock import patch

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from core.app_logging import (
    APP_LOGGER_NAME,
    EXCEPTION_LOGGER_NAME,
    TRACE_LOGGER_NAME,
    UX_ACTION_LOGGER_NAME,
    get_app_logger,
    get_exception_logger,
    get_trace_logger,
    get_ux_logger,
    log_exception,
    log_ux_action,
    log_ux_action_result,
    setup_all_loggers,
    trace,
)


class LoggingTestCase(unittest.TestCase):
    """Route every log file into a temporary directory."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self._patcher = patch("core.app_logging._LOG_DIR", self.temp_dir)
        self._patcher.start()
        setup_all_loggers()

    def tearDown(self):
        for name in (EXCEPTION_LOGGER_NAME, UX_ACTION_LOGGER_NAME, TRACE_LOGGER_NAME, APP_LOGGER_NAME):
            logger = logging.getLogger(name)
            for handler in logger.handlers[:]:
                handler.close()
            logger.handlers.clear()
        self._patcher.stop()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _read(self, filename):
        for handler in logging.getLogger(UX_ACTION_LOGGER_NAME).handlers + get_trace_logger().handlers:
            handler.flush()
        for handler in get_exception_logger().handlers:
            handler.flush()
        with open(os.path.join(self.temp_dir, filename), encoding="utf-8") as f:
            return f.read()


class TestSetup(LoggingTestCase):
    def test_log_files_created(self):
        for name in ("exceptions.log", "ux_actions.log", "trace.log"):
            assert os.path.exists(os.path.join(self.temp_dir, name)), name

    def test_loggers_do_not_propagate(self):
        for logger in (get_exception_logger(), get_ux_logger(), get_trace_logger(), get_app_logger()):
            assert logger.propagate is False

    def test_repeated_setup_does_not_duplicate_handlers(self):
        count = len(get_ux_logger().handlers)
        setup_all_loggers()
        assert len(get_ux_logger().handlers) == count


class TestUxActionLog(LoggingTestCase):
    def test_action_with_context_and_details(self):
        log_ux_action("Print Statement", details="rows=3", user_context="أحمد")
        content = self._read("ux_actions.log")
        assert "ACTION=Print Statement | CTX=أحمد | DETAILS=rows=3" in content

    def test_action_results(self):
        log_ux_action_result("Add Debt", True, "customer=x")
        log_ux_action_result("Delete Entry", False, "no rows affected")
        content = self._read("ux_actions.log")
        assert "RESULT=SUCCESS | ACTION=Add Debt | DETAILS=customer=x" in content
        assert "WARNING" in content and "RESULT=FAILURE | ACTION=Delete Entry" in content


class TestExceptionLog(LoggingTestCase):
    def test_exception_logged_with_traceback(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError as exc:
            log_exception("Load Ledger", exc, context="customer=1")
        content = self._read("exceptions.log")
        assert "EXCEPTION in Load Ledger: boom | CTX=customer=1" in content
        assert "Traceback" in content


class TestTraceDecorator(LoggingTestCase):
    def test_enter_and_exit_logged(self):
        @trace
        def add(a, b):
            return a + b

        assert add(2, b=3) == 5
        content = self._read("trace.log")
        assert "ENTER" in content and "add(2, b=3)" in content
        assert "EXIT" in content and "-> 5" in content

    def test_exception_reraised_and_logged(self):
        @trace
        def fail():
            raise ValueError("bad amount")

        with self.assertRaises(ValueError):
            fail()
        assert "RAISE" in self._read("trace.log")

    def test_preserves_name(self):
        @trace
        def load_ledger():
            return None

        assert load_ledger.__name__ == "load_ledger"

    def test_long_arguments_truncated(self):
        @trace
        def echo(value):
            return value

        echo("x" * 2000)
        content = self._read("trace.log")
        assert "x" * 2000 not in content
        assert "..." in content


if __name__ == "__main__":
    unittest.main()

"""
Enhanced logging system with Rich integration and structured messages.

This module provides:
- Rich-formatted log output through a single root handler
- Operation-specific loggers with timing
- Minimal mode that strips markup for CI and non-TTY output
"""

import logging
import os
import re
import sys
import threading
import time
from contextlib import contextmanager
from enum import Enum
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .rich_cli import SCAFFOLD_THEME


class LogMode(str, Enum):
    """Logging output modes."""

    CLASSIC = "classic"
    MINIMAL = "minimal"


class StructuredLogger:
    """Logger wrapper with operation context and timing."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.logger = logging.getLogger(name)
        # Rely on the root RichHandler
        self.logger.handlers = []
        self.logger.propagate = True

        self._context_stack: list[dict[str, Any]] = []

    @contextmanager
    def operation_context(self, operation: str, **context):
        """Log the start, completion and failure of an operation."""
        if not operation or not isinstance(operation, str):
            raise ValueError("Operation name must be a non-empty string")

        start_time = time.time()
        self._context_stack.append({"operation": operation, **context})

        details = ", ".join(f"{key}={value}" for key, value in context.items())
        self.info(f"Starting {operation}" + (f" ({details})" if details else ""))

        try:
            yield self
        except Exception as e:
            duration = time.time() - start_time
            self.error(f"{operation} failed after {duration:.2f}s: {escape(str(e))}")
            raise
        else:
            duration = time.time() - start_time
            self.info(f"{operation} completed in {duration:.1f}s")
        finally:
            self._context_stack.pop()

    @property
    def current_operation(self) -> str | None:
        if not self._context_stack:
            return None
        return self._context_stack[-1]["operation"]

    def info(self, message: str, **kwargs):
        self.logger.info(LoggerManager._prepare_message(message), **kwargs)

    def debug(self, message: str, **kwargs):
        self.logger.debug(LoggerManager._prepare_message(message), **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(LoggerManager._prepare_message(message), **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(LoggerManager._prepare_message(message), **kwargs)


class LoggerManager:
    """Manager for creating and configuring structured loggers."""

    _loggers: dict[str, StructuredLogger] = {}
    _console: Console | None = None
    log_mode: LogMode = LogMode.CLASSIC
    _setup_complete: bool = False
    _setup_lock: threading.Lock = threading.Lock()

    @classmethod
    def setup_global_logging(
        cls, console: Console | None = None, level: int = logging.INFO
    ):
        """Install the root RichHandler once."""
        with cls._setup_lock:
            if cls._setup_complete and (console is None or console is cls._console):
                logging.getLogger().setLevel(level)
                return

            cls._console = console or Console(theme=SCAFFOLD_THEME, stderr=True)
            root_logger = logging.getLogger()

            for handler in list(root_logger.handlers):
                if isinstance(handler, RichHandler):
                    root_logger.removeHandler(handler)

            rich_handler = RichHandler(
                console=cls._console,
                show_time=True,
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            )
            rich_handler.setFormatter(logging.Formatter(fmt="%(message)s"))

            root_logger.addHandler(rich_handler)
            root_logger.setLevel(level)
            cls._setup_complete = True

    @staticmethod
    def resolve_log_mode(ui_flag: str | None = None) -> LogMode:
        """Explicit --ui choice, then TESTSCAFFOLD_UI, then minimal for CI and non-TTY output."""
        for choice in (ui_flag, os.getenv("TESTSCAFFOLD_UI")):
            if choice and choice.lower() in {mode.value for mode in LogMode}:
                return LogMode(choice.lower())
        if os.getenv("CI") == "true" or not sys.stdout.isatty():
            return LogMode.MINIMAL
        return LogMode.CLASSIC

    @classmethod
    def set_log_mode(
        cls,
        mode: LogMode,
        verbose: bool = False,
        quiet: bool = False,
        default_level: int = logging.INFO,
    ) -> None:
        """Configure log mode and root level appropriately."""
        cls.log_mode = mode
        # quiet > verbose > default
        if quiet or os.getenv("TESTSCAFFOLD_QUIET", "").lower() in {"1", "true", "yes"}:
            level = logging.WARNING
        elif verbose:
            level = logging.DEBUG
        elif mode == LogMode.MINIMAL:
            level = max(default_level, logging.WARNING)
        else:
            level = default_level

        logging.getLogger().setLevel(level)

    @staticmethod
    def _strip_rich_tags(message: str) -> str:
        """Remove Rich markup tags like [primary]...[/] from a message."""
        return re.sub(r"\[/?[a-z_ ]*\]", "", message)

    @classmethod
    def _prepare_message(cls, message: str) -> str:
        """Sanitize a message for the current log mode."""
        if message is None:
            return ""
        message = str(message)
        if cls.log_mode == LogMode.MINIMAL:
            return re.sub(r"\s+", " ", cls._strip_rich_tags(message)).strip()
        return message

    @classmethod
    def get_logger(cls, name: str) -> StructuredLogger:
        """Get or create a structured logger."""
        if name not in cls._loggers:
            cls._loggers[name] = StructuredLogger(name)
        return cls._loggers[name]

    @classmethod
    def get_operation_logger(cls, operation: str) -> StructuredLogger:
        """Get logger for specific operation."""
        return cls.get_logger(f"testscaffold.{operation}")


def setup_enhanced_logging(console: Console | None = None, level: int = logging.INFO):
    """Set up enhanced logging system."""
    LoggerManager.setup_global_logging(console, level)
    return LoggerManager.get_logger("testscaffold.main")


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger by name."""
    return LoggerManager.get_logger(name)


def get_operation_logger(operation: str) -> StructuredLogger:
    """Get logger for specific operations."""
    return LoggerManager.get_operation_logger(operation)

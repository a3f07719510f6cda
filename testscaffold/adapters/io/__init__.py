"""
IO adapters for file operations and console output.

This module provides the adapter that writes generated test files and the
Rich-based logging and console helpers used by the CLI.
"""

from .enhanced_logging import (
    LoggerManager,
    LogMode,
    get_logger,
    get_operation_logger,
    setup_enhanced_logging,
)
from .rich_cli import (
    SCAFFOLD_THEME,
    build_candidate_table,
    create_console,
    print_generation_summary,
)
from .writer_overwrite import WriterError, WriterOverwriteAdapter

__all__ = [
    "WriterOverwriteAdapter",
    "WriterError",
    "LoggerManager",
    "LogMode",
    "get_logger",
    "get_operation_logger",
    "setup_enhanced_logging",
    "SCAFFOLD_THEME",
    "build_candidate_table",
    "create_console",
    "print_generation_summary",
]

# utils/logger.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Logging utility for tableau solving with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the tableau solver."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TableauLogger:
    """Centralized logger for the tableau solver with structured output."""

    def __init__(self, name: str = "tableau_solver", level: LogLevel = LogLevel.INFO):
        """Initialize the solver logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TableauFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug_enabled(self) -> bool:
        """Check whether debug records would be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for tableau search events
    def search_start(self, formula: str, size: int, variables: str):
        """Log solver initialization."""
        self.debug("=== Starting Tableau Search ===")
        self.debug(f"Formula: {formula}")
        self.debug(f"Size: {size} nodes, variables: {variables}")

    def branch_selected(self, theory: str, queue_size: int):
        """Log a branch taken off the tableau."""
        self.debug(f"  🌿 Branch {theory} (remaining in queue: {queue_size})")

    def expansion_applied(self, kind: str, formula: str, outputs: str):
        """Log an alpha or beta rule application."""
        self.debug(f"    🔧 {kind} expansion of {formula} → {outputs}")

    def branch_closed(self, theory: str):
        """Log a branch discarded because it contains a contradiction."""
        self.debug(f"    🔴 Branch closed: {theory}")

    def duplicate_branch(self, theory: str):
        """Log a branch skipped because an equal one is already queued."""
        self.debug(f"    ♻️  Duplicate branch skipped: {theory}")

    def open_branch_found(self, theory: str):
        """Log a fully expanded, contradiction-free branch."""
        self.debug(f"  🟢 Open branch found: {theory}")

    def search_result(self, formula: str, state: str):
        """Log final search outcome."""
        self.debug(f">>> SEARCH RESULT for {formula}: {state} <<<")

    def search_statistics(self, formula: str, **stats):
        """Log search statistics."""
        stats_str = ", ".join(f"{k}={v}" for k, v in stats.items())
        self.info(f"📊 {formula}: {stats_str}")

    def formula_result(self, formula: str, **results):
        """Log the answers computed for one formula."""
        results_str = ", ".join(f"{k}={v}" for k, v in results.items())
        self.info(f"{formula}: {results_str}")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.info(f"✅ {message}" if message else "✅ Validation successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Validation failed")


class TableauFormatter(logging.Formatter):
    """Custom formatter for solver logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance for the parser and command line layers
_global_logger: Optional[TableauLogger] = None


def get_logger(name: str = "tableau_solver") -> TableauLogger:
    """Get or create the global solver logger instance.

    Args:
        name: Logger name (default: "tableau_solver")

    Returns:
        TableauLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TableauLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(debug: bool = False, quiet: bool = False) -> TableauLogger:
    """Configure logging based on command line flags.

    Results are reported at INFO level, so INFO stays enabled unless the
    caller asks for quiet or debug output.

    Args:
        debug: Enable debug output (search trace)
        quiet: Only report warnings and errors (ignored when debug is set)

    Returns:
        The configured global logger
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif quiet:
        set_log_level(LogLevel.WARNING)
    else:
        set_log_level(LogLevel.INFO)
    return get_logger()

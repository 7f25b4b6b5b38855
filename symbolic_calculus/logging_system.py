"""
Logging System for Symbolic Calculus

This module provides a centralized logging system with different verbosity levels
so that drivers and checkers can report on expression trees without cluttering
the terminal.
"""

import logging
import sys
from typing import Optional, Dict, Any
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for symbolic calculus"""
    SILENT = 0      # No output
    MINIMAL = 1     # Only final results and warnings
    MODERATE = 2    # Intermediate results and key milestones
    DETAILED = 3    # Every intermediate tree
    VERBOSE = 4     # All information including debug details


class SymbolicCalculusLogger:
    """
    Centralized logger for symbolic calculus with context-aware formatting
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.log_file_path = log_file_path

        # Create logger
        self.logger = logging.getLogger('symbolic_calculus')
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_calculus_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
                self.log_file_path = log_file_path
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def milestone(self, message: str):
        """Important milestones - always shown except in silent mode"""
        if self.log_level != LogLevel.SILENT:
            self.logger.info(f"MILESTONE: {message}")

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def result_summary(self, results: Dict[str, Any]):
        """Log final results summary"""
        if self.log_level == LogLevel.SILENT:
            return

        self.logger.info("=" * 60)
        self.logger.info("SYMBOLIC CALCULUS RESULTS:")
        self.logger.info("=" * 60)

        for key, value in results.items():
            if isinstance(value, float):
                self.logger.info(f"{key:.<30} {value:.6f}")
            else:
                self.logger.info(f"{key:.<30} {value}")


# Global logger instance
_global_logger: Optional[SymbolicCalculusLogger] = None


def get_logger() -> SymbolicCalculusLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicCalculusLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level, keeping any file output"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicCalculusLogger(log_level=level)
    else:
        # handlers depend on the level, so rebuild rather than flip the field
        _global_logger = SymbolicCalculusLogger(
            log_level=level,
            log_to_file=_global_logger.log_to_file,
            log_file_path=_global_logger.log_file_path
        )


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> SymbolicCalculusLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = SymbolicCalculusLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_milestone(message: str):
    """Log milestone message"""
    get_logger().milestone(message)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)

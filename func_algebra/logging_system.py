"""
Logging System for Function Algebra

This module provides a centralized logging system with different verbosity levels.
The evaluation core never logs; only auxiliary layers such as the expression
validator report through it.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for function algebra"""
    SILENT = 0      # No output at all
    MINIMAL = 1     # Only explicitly requested info
    MODERATE = 2    # Warnings about suspicious parameters
    DETAILED = 3    # Per-expression validation results
    VERBOSE = 4     # All information including debug details


class FuncAlgebraLogger:
    """
    Centralized logger for function algebra with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        # Create logger
        self.logger = logging.getLogger('func_algebra')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()  # Remove any existing handlers

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
                log_file_path = f"func_algebra_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
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

    def warning(self, message: str):
        """Warnings - shown from moderate level onwards"""
        if self._should_log(LogLevel.MODERATE):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[FuncAlgebraLogger] = None


def get_logger() -> FuncAlgebraLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = FuncAlgebraLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = FuncAlgebraLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> FuncAlgebraLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = FuncAlgebraLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)

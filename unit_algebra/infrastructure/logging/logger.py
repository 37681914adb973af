"""
Unit Algebra Logging System

Thin logging layer over the standard ``logging`` module with message
categories, usage statistics and an optional log file.
"""

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, Any

LOGGER_NAME = "unit_algebra"


class AlgebraLogger:
    """
    Category-aware logger for the unit algebra

    Wraps the package logger so that every component shares the same
    handlers, while keeping simple counters for diagnostics.
    """

    def __init__(self, log_file: Optional[str] = None, overwrite: bool = False,
                 level: str = "INFO"):
        """
        Initialize logger

        Args:
            log_file: Optional path to a log file
            overwrite: Whether to overwrite an existing log file
            level: Log level name (DEBUG, INFO, WARNING, ERROR)
        """
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        self.log_file_path = Path(log_file) if log_file else None
        self._file_handler: Optional[logging.Handler] = None

        # Thread safety
        self._lock = threading.Lock()

        # Statistics
        self.stats = {
            'messages_logged': 0,
            'errors': 0,
            'warnings': 0
        }

        if self.log_file_path is not None:
            self._initialize_log_file(overwrite)

    def _initialize_log_file(self, overwrite: bool):
        """Attach a file handler and write the session header"""

        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(self.log_file_path, mode='w' if overwrite else 'a',
                                      encoding='utf-8')
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        self._logger.addHandler(handler)
        self._file_handler = handler

        self.log(f"Session started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    def log(self, message: str, level: str = "INFO", category: str = None):
        """
        Log message with optional category

        Args:
            message: Message to log
            level: Log level (INFO, WARNING, ERROR, DEBUG)
            category: Optional category for message
        """
        category_str = f"[{category}] " if category else ""
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        with self._lock:
            self.stats['messages_logged'] += 1
            if numeric_level >= logging.ERROR:
                self.stats['errors'] += 1
            elif numeric_level == logging.WARNING:
                self.stats['warnings'] += 1

        self._logger.log(numeric_level, f"{category_str}{message}")

    def info(self, message: str, category: str = None):
        """Log info message"""
        self.log(message, "INFO", category)

    def warning(self, message: str, category: str = None):
        """Log warning message"""
        self.log(message, "WARNING", category)

    def error(self, message: str, category: str = None):
        """Log error message"""
        self.log(message, "ERROR", category)

    def debug(self, message: str, category: str = None):
        """Log debug message"""
        if self._logger.isEnabledFor(logging.DEBUG):
            self.log(message, "DEBUG", category)

    def set_level(self, level: str):
        self._logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    def get_statistics(self) -> Dict[str, Any]:
        """Get logging statistics"""
        stats = self.stats.copy()
        stats.update({
            'level': logging.getLevelName(self._logger.level),
            'log_file': str(self.log_file_path) if self.log_file_path else None,
            'log_file_size': (self.log_file_path.stat().st_size
                              if self.log_file_path and self.log_file_path.exists() else 0)
        })
        return stats

    def finalize(self):
        """Detach and close the file handler"""
        if self._file_handler is None:
            return

        self.log(f"Session completed: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        self._logger.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None


# Global logger instance
_global_logger: Optional[AlgebraLogger] = None


def setup_logging(log_file: Optional[str] = None,
                  overwrite: bool = False,
                  verbose: bool = False,
                  level: str = "INFO") -> AlgebraLogger:
    """
    Setup global logging

    Args:
        log_file: Optional path to log file
        overwrite: Whether to overwrite existing log
        verbose: Enable verbose (DEBUG) logging
        level: Log level used when not verbose

    Returns:
        AlgebraLogger instance
    """
    global _global_logger

    if _global_logger is not None:
        _global_logger.finalize()

    _global_logger = AlgebraLogger(log_file, overwrite, "DEBUG" if verbose else level)
    return _global_logger


def get_logger() -> AlgebraLogger:
    """Get global logger instance"""
    global _global_logger

    if _global_logger is None:
        _global_logger = AlgebraLogger()

    return _global_logger

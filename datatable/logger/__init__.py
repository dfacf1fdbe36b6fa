"""
Logger module for datatable

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from datatable.logger import Logger, ConsoleLogger

    # Use the console logger
    logger = ConsoleLogger(level="DEBUG")
    logger.info("Rendering started")

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

from datatable.config import Config

from .interface import Logger
from .console_logger import ConsoleLogger

# Shared logger instance for components that are not given one explicitly
session_logger: Logger = ConsoleLogger(level=Config.get_log_level())

__all__ = [
    "Logger",
    "ConsoleLogger",
    "session_logger",
]

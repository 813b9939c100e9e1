"""
Logger module for inline-chaos

Provides a small structured logging interface so modules log a message plus
keyword context instead of pre-formatted strings.

Usage:
    from inline_chaos.logger import session_logger

    session_logger.info("Server started", port=8020)
"""

import logging

from .interface import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger

# Shared logger instance for the web app and the test fixture
session_logger: ConsoleLogger = ConsoleLogger(level=logging.INFO)

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
    "session_logger",
]

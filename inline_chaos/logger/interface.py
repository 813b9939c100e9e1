"""Logger interface for inline-chaos."""
from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Structured logger: a message plus keyword context."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message"""

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message"""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message"""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message"""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message"""

"""Default logger backed by the standard logging module."""
import logging
from typing import Any, Dict

from .interface import Logger


def format_context(kwargs: Dict[str, Any]) -> str:
    """Render keyword context as ``key=value`` pairs."""
    if not kwargs:
        return ""
    return " " + " ".join(f"{key}={value}" for key, value in kwargs.items())


class DefaultLogger(Logger):
    """Logger that forwards to a named ``logging.Logger``.

    Handlers are left to the host application (uvicorn, pytest, ...).
    """

    def __init__(self, name: str = "inline_chaos"):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, kwargs: Dict[str, Any]) -> None:
        self._logger.log(level, f"{message}{format_context(kwargs)}")

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, kwargs)

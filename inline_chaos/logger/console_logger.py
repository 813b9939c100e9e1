"""Console logger writing timestamped lines to stderr."""
import logging
import sys
from typing import Optional, TextIO

from .default_logger import DefaultLogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConsoleLogger(DefaultLogger):
    """DefaultLogger that owns a stream handler at a fixed level."""

    def __init__(
        self,
        name: str = "inline_chaos",
        level: int = logging.INFO,
        stream: Optional[TextIO] = None,
    ):
        super().__init__(name)
        self._logger.setLevel(level)
        # Reuse the handler when several instances share a name
        if not any(getattr(h, "_inline_chaos", False) for h in self._logger.handlers):
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler._inline_chaos = True  # type: ignore[attr-defined]
            self._logger.addHandler(handler)
        self._logger.propagate = False

    def set_level(self, level: int) -> None:
        self._logger.setLevel(level)

    @property
    def level(self) -> int:
        return self._logger.level

"""Exceptions raised while managing an out-of-process test server."""
from pathlib import Path
from typing import Optional

from inline_chaos.exceptions.base import ConfigurationError, InlineChaosError


class ProjectRootNotFoundError(ConfigurationError):
    """Raised when no ancestor directory holds the project marker file."""

    def __init__(self, marker: str, search_from: Path):
        """
        Args:
            marker: Filename that identifies the project root
            search_from: Directory the upward search started from
        """
        self.marker = marker
        self.search_from = search_from
        super().__init__(
            f"Unable to locate project directory containing '{marker}' "
            f"starting from {search_from}."
        )


class ServerStartupError(InlineChaosError):
    """Raised when the test server cannot be brought up."""


class ServerStartupTimeoutError(ServerStartupError):
    """Raised when the server never answered its health check."""

    def __init__(self, base_url: str, attempts: int, exit_code: Optional[int] = None):
        """
        Args:
            base_url: Address that was polled
            attempts: Number of health-check attempts made
            exit_code: Exit code if the server process had already stopped
        """
        self.base_url = base_url
        self.attempts = attempts
        self.exit_code = exit_code
        exit_text = "" if exit_code is None else f" Server process exited with code {exit_code}."
        super().__init__(
            f"Server at {base_url} did not start listening within "
            f"{attempts} attempts.{exit_text}"
        )


class FixtureDisposedError(ServerStartupError):
    """Raised when start() is called on a fixture that was already disposed."""

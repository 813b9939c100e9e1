"""Test-support helpers for running the web server out of process."""

from .server_fixture import (
    FixtureState,
    WebServerFixture,
    find_free_port,
    locate_project_directory,
)

__all__ = [
    "FixtureState",
    "WebServerFixture",
    "find_free_port",
    "locate_project_directory",
]

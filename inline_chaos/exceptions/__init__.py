"""Custom exceptions for the inline-chaos application and its test fixture."""

from inline_chaos.exceptions.base import InlineChaosError, ConfigurationError
from inline_chaos.exceptions.server import (
    ProjectRootNotFoundError,
    ServerStartupError,
    ServerStartupTimeoutError,
    FixtureDisposedError,
)

__all__ = [
    "InlineChaosError",
    "ConfigurationError",
    "ProjectRootNotFoundError",
    "ServerStartupError",
    "ServerStartupTimeoutError",
    "FixtureDisposedError",
]

"""Base exception classes for the inline-chaos application."""


class InlineChaosError(Exception):
    """Root of all inline-chaos errors."""


class ConfigurationError(InlineChaosError):
    """Raised when configuration is missing or invalid."""

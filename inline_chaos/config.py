"""Configuration for the inline-chaos web application.

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================
#
# INLINE_CHAOS_ENV: Run-mode profile (default: production)
#   Values: "development", "production"
#   development turns on template auto-reload and DEBUG logging
#
# INLINE_CHAOS_HOST: Address the web server binds to (default: 127.0.0.1)
# INLINE_CHAOS_WEB_PORT: Port the web server listens on (default: 8020)
#
# INLINE_CHAOS_LOG_LEVEL: Logging verbosity, overrides the profile default
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from inline_chaos.exceptions import ConfigurationError

ENV_PREFIX = "INLINE_CHAOS"

ENV_VAR = f"{ENV_PREFIX}_ENV"
HOST_VAR = f"{ENV_PREFIX}_HOST"
PORT_VAR = f"{ENV_PREFIX}_WEB_PORT"
LOG_LEVEL_VAR = f"{ENV_PREFIX}_LOG_LEVEL"

DEVELOPMENT = "development"
PRODUCTION = "production"
ENVIRONMENTS = (DEVELOPMENT, PRODUCTION)

DEFAULT_ENVIRONMENT = PRODUCTION
DEFAULT_HOST = "127.0.0.1"
DEFAULT_WEB_PORT = 8020

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Resolved application settings."""

    environment: str = DEFAULT_ENVIRONMENT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_WEB_PORT
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.environment == DEVELOPMENT

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build a Config from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Resolved Config

        Raises:
            ConfigurationError: If a value is present but invalid
        """
        env = os.environ if environ is None else environ

        environment = env.get(ENV_VAR, DEFAULT_ENVIRONMENT).strip().lower()
        if environment not in ENVIRONMENTS:
            raise ConfigurationError(
                f"{ENV_VAR}='{environment}' is not valid. "
                f"Expected one of: {', '.join(ENVIRONMENTS)}."
            )

        port = parse_port(env.get(PORT_VAR, str(DEFAULT_WEB_PORT)), PORT_VAR)

        default_level = "DEBUG" if environment == DEVELOPMENT else "INFO"
        log_level = env.get(LOG_LEVEL_VAR, default_level).strip().upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"{LOG_LEVEL_VAR}='{log_level}' is not valid. "
                f"Expected one of: {', '.join(LOG_LEVELS)}."
            )

        return cls(
            environment=environment,
            host=env.get(HOST_VAR, DEFAULT_HOST),
            port=port,
            log_level=log_level,
        )


def parse_port(value: str, source: str = PORT_VAR) -> int:
    """Parse and range-check a TCP port number."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{source}='{value}' is not a valid integer")
    if not (1 <= port <= 65535):
        raise ConfigurationError(f"{source}={port} out of valid range (1-65535)")
    return port

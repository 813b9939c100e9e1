"""Pytest configuration and fixtures

Shared fixtures for unit, web and end-to-end tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from inline_chaos.config import Config, DEVELOPMENT
from inline_chaos.styles import StyleGenerator


@pytest.fixture
def seeded_generator() -> StyleGenerator:
    """Style generator with a fixed seed so failures are reproducible."""
    return StyleGenerator(random.Random(1234))


@pytest.fixture
def dev_config() -> Config:
    return Config(environment=DEVELOPMENT, log_level="DEBUG")

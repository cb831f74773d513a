"""Pytest configuration and shared fixtures."""
import sys
from pathlib import Path

# Make the src layout importable without an editable install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

import pytest

from envconfig.core.config.env import EnvVar


@pytest.fixture
def required_port() -> EnvVar:
    """Provide an accessor for a required PORT variable."""
    return EnvVar(key="PORT", required=True)


@pytest.fixture
def optional_timeout() -> EnvVar:
    """Provide an accessor for an optional TIMEOUT variable defaulting to 30."""
    return EnvVar(key="TIMEOUT", required=False, default_value="30")


@pytest.fixture
def strict_name() -> EnvVar:
    """Provide an accessor for a required, non-empty NAME variable."""
    return EnvVar(key="NAME", required=True, not_empty=True)

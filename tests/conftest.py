"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from transport.slack.usage import UsageCatalog  # noqa: E402


@pytest.fixture
def catalog():
    """Default usage template catalog."""
    return UsageCatalog()

"""Pytest configuration for integration tests.

Tests under this directory drive the whole CLI and are marked as
integration tests automatically; run them alone with ``-m integration``.
"""

from pathlib import Path

import pytest

INTEGRATION_DIR = Path(__file__).parent


def pytest_collection_modifyitems(items):
    """Mark every test collected from this directory."""
    for item in items:
        if INTEGRATION_DIR in item.path.parents:
            item.add_marker(pytest.mark.integration)

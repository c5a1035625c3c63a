"""Shared fixtures for UI tests."""

import pytest

from blogview.models.config import Config


@pytest.fixture
def app_config(content_dir):
    """Configuration pointing at the sample content directory."""
    return Config(content={"content_dir": str(content_dir)})

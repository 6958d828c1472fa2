"""Fixtures for infrastructure.logging tests."""

from unittest.mock import Mock

import pytest

from infrastructure.configuration import ExtractionFeatureSettings, Settings


@pytest.fixture
def mock_settings():
    """Development-mode Settings stand-in with default extraction options."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.PREFIX = "dev-"
    settings.is_production = False
    settings.extraction = ExtractionFeatureSettings()
    return settings

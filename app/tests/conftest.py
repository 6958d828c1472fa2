import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `extraction.translate_call`) works during pytest collection,
# whichever directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from extraction.options import get_options
from infrastructure.services.providers import get_settings


@pytest.fixture(autouse=True)
def reset_global_options():
    """Start every test with a fresh process-wide options resolver."""
    get_settings.cache_clear()
    get_options.cache_clear()
    yield
    get_options.cache_clear()
    get_settings.cache_clear()

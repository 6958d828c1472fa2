"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the extraction
tooling using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (obtain the cached instance via get_settings)
    ExtractionFeatureSettings: Key-inference defaults (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    key_format = settings.extraction.inferred_key_format
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features import ExtractionFeatureSettings

__all__ = ["Settings", "ExtractionFeatureSettings"]

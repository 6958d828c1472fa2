"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.extraction import ExtractionFeatureSettings

__all__ = [
    "ExtractionFeatureSettings",
]

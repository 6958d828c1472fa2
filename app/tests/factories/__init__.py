"""Test data factories for deterministic test data generation."""

from tests.factories.extraction import (
    DEFAULT_OPTION_VALUES,
    make_call,
    make_options,
    make_pluralization_map,
)

__all__ = [
    "DEFAULT_OPTION_VALUES",
    "make_call",
    "make_options",
    "make_pluralization_map",
]

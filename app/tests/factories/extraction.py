"""Test data factories for extraction testing.

Provides deterministic builders for:
- ExtractionOptions seeded independently of the environment
- TranslateCall instances from plain Python argument values
- Pluralization map literals
"""

from typing import Any, Optional

from extraction import ExtractionOptions, MapLiteral, TranslateCall, classify_all

DEFAULT_OPTION_VALUES = {
    "inferred_key_format": "underscored_crc32",
    "max_key_length": 50,
    "pluralization_keys": ["zero", "one", "two", "few", "many", "other"],
    "interpolation_syntax": r"%\{([^}]+)\}",
}


def make_options(**overrides: Any) -> ExtractionOptions:
    """Create an ExtractionOptions resolver.

    Args:
        **overrides: Default values replacing the standard ones.

    Returns:
        ExtractionOptions instance not tied to environment variables.
    """
    return ExtractionOptions(defaults={**DEFAULT_OPTION_VALUES, **overrides})


def make_call(
    *values: Any,
    method: str = "t",
    line: Optional[int] = None,
    settings: Optional[ExtractionOptions] = None,
) -> TranslateCall:
    """Create a TranslateCall from plain Python values.

    Strings become string literals, dicts become map literals, and
    already classified arguments pass through unchanged.

    Args:
        *values: Positional call arguments.
        method: Called method name.
        line: Source line number.
        settings: Options resolver (default: fresh ``make_options()``).

    Returns:
        TranslateCall instance.
    """
    return TranslateCall(
        method,
        classify_all(*values),
        line=line,
        settings=settings or make_options(),
    )


def make_pluralization_map(
    one: Any = "1 item",
    other: Any = "%{count} items",
    **variants: Any,
) -> MapLiteral:
    """Create a pluralization map literal.

    Args:
        one: Default for the "one" variant.
        other: Default for the "other" variant.
        **variants: Additional variants (e.g. zero="no items").

    Returns:
        MapLiteral instance.
    """
    return MapLiteral({"one": one, "other": other, **variants})

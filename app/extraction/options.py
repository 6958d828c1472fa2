"""Extraction options resolver.

Holds the few options that affect key inference and validation, and lets
callers sandbox temporary changes for a single extraction.

Usage:
    from extraction.options import get_options

    options = get_options()
    options.set("max_key_length", 80)

    with options.override("inferredKeyFormat", "literal"):
        pairs = TranslateCall("t", args, settings=options).translations()
"""

import re
from contextlib import contextmanager
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Dict, Generator, List, Mapping, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from extraction.errors import InvalidOptionValueError, UnknownOptionError
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()

T = TypeVar("T")


class KeyFormat(str, Enum):
    """Strategies for turning default text into a key."""

    LITERAL = "literal"
    UNDERSCORED = "underscored"
    UNDERSCORED_CRC32 = "underscored_crc32"


# CLDR plural categories, in declaration order
PLURALIZATION_VARIANTS: Tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Variants every pluralization map must define
ESSENTIAL_PLURALIZATION_KEYS: Tuple[str, ...] = ("one", "other")


class OptionValues(BaseModel):
    """Validated, immutable set of effective option values.

    Field names are the canonical snake_case option names; the camelCase
    aliases match the spelling used in project configuration files.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    inferred_key_format: KeyFormat = Field(alias="inferredKeyFormat")
    max_key_length: int = Field(alias="maxKeyLength", ge=16, le=1000)
    pluralization_keys: Tuple[str, ...] = Field(alias="pluralizationKeys")
    interpolation_syntax: str = Field(alias="interpolationSyntax")

    @field_validator("pluralization_keys", mode="before")
    @classmethod
    def _order_pluralization_keys(cls, v: Any) -> Any:
        """Give unordered collections the CLDR declaration order."""
        if isinstance(v, (set, frozenset)):
            known = [variant for variant in PLURALIZATION_VARIANTS if variant in v]
            return known + sorted(variant for variant in v if variant not in known)
        return v

    @field_validator("pluralization_keys")
    @classmethod
    def _check_pluralization_keys(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not variant for variant in v):
            raise ValueError("variant names must not be empty")
        missing = [key for key in ESSENTIAL_PLURALIZATION_KEYS if key not in v]
        if missing:
            raise ValueError(f"missing essential variants: {', '.join(missing)}")
        return tuple(dict.fromkeys(v))

    @field_validator("interpolation_syntax")
    @classmethod
    def _check_interpolation_syntax(cls, v: str) -> str:
        try:
            pattern = re.compile(v)
        except re.error as e:
            raise ValueError(f"not a valid regular expression: {e}") from e
        if pattern.groups != 1:
            raise ValueError("pattern must have exactly one capture group")
        return v

    @property
    def interpolation_pattern(self) -> "re.Pattern[str]":
        return re.compile(self.interpolation_syntax)


_ALIASES: Dict[str, str] = {
    field_info.alias: name
    for name, field_info in OptionValues.model_fields.items()
    if field_info.alias
}


def _defaults_from_settings() -> Dict[str, Any]:
    return get_settings().extraction.model_dump()


class ExtractionOptions:
    """Resolver for extraction options.

    Lookup order is: innermost active override, then permanently set value,
    then built-in default (from ``ExtractionFeatureSettings``).

    Not safe for concurrent mutation; give each concurrent scan its own
    instance.

    Attributes:
        defaults: Validated built-in defaults.
    """

    def __init__(self, defaults: Optional[Mapping[str, Any]] = None):
        """Initialize the resolver.

        Args:
            defaults: Built-in default values keyed by option name. When
                omitted, defaults come from the application settings.

        Raises:
            UnknownOptionError: If a default names an unknown option.
            InvalidOptionValueError: If a default fails validation.
        """
        raw = dict(_defaults_from_settings() if defaults is None else defaults)
        base = {self.resolve_name(name): value for name, value in raw.items()}
        try:
            self.defaults = OptionValues.model_validate(base)
        except ValidationError as e:
            raise InvalidOptionValueError("defaults", _reason(e)) from e
        self._values: Dict[str, Any] = {}
        self._overrides: List[Tuple[str, Any]] = []

    @staticmethod
    def is_option(name: str) -> bool:
        """Return True if ``name`` is a recognized option (either spelling)."""
        return name in OptionValues.model_fields or name in _ALIASES

    @classmethod
    def resolve_name(cls, name: str) -> str:
        """Map an option name in either spelling to its canonical name.

        Raises:
            UnknownOptionError: If the name is not recognized.
        """
        if name in OptionValues.model_fields:
            return name
        if name in _ALIASES:
            return _ALIASES[name]
        raise UnknownOptionError(name)

    def get(self, option: str) -> Any:
        """Return the effective value of ``option``.

        Raises:
            UnknownOptionError: If the option is not recognized.
        """
        name = self.resolve_name(option)
        for override_name, value in reversed(self._overrides):
            if override_name == name:
                return value
        if name in self._values:
            return self._values[name]
        return getattr(self.defaults, name)

    def set(self, option: str, value: Any) -> None:
        """Permanently set ``option`` for this resolver.

        Raises:
            UnknownOptionError: If the option is not recognized.
            InvalidOptionValueError: If the value fails validation.
        """
        name = self.resolve_name(option)
        self._values[name] = self._validate(name, value)
        logger.debug("extraction_option_set", option=name)

    def update(self, values: Mapping[str, Any]) -> None:
        """Permanently set several options at once.

        All entries are validated together before any is stored; on failure
        the resolver is left unchanged.

        Raises:
            UnknownOptionError: If an option is not recognized.
            InvalidOptionValueError: If any value fails validation.
        """
        updates = {self.resolve_name(option): value for option, value in values.items()}
        self._values.update(self._validate_all(updates))
        logger.debug("extraction_options_updated", options=list(updates))

    @contextmanager
    def override(self, option: str, value: Any) -> Generator["ExtractionOptions", None, None]:
        """Temporarily bind ``option`` to ``value`` for the enclosed block.

        The previous value is restored on every exit path, including when the
        block raises. Overrides nest; the innermost one wins.

        Raises:
            UnknownOptionError: If the option is not recognized.
            InvalidOptionValueError: If the value fails validation.
        """
        name = self.resolve_name(option)
        depth = len(self._overrides)
        self._overrides.append((name, self._validate(name, value)))
        try:
            yield self
        finally:
            # reset() may already have emptied the stack
            del self._overrides[depth:]

    def with_override(self, option: str, value: Any, block: Callable[[], T]) -> T:
        """Run ``block`` with ``option`` overridden and return its result."""
        with self.override(option, value):
            return block()

    def snapshot(self) -> OptionValues:
        """Return the currently effective values as one immutable object."""
        return self.defaults.model_copy(
            update={name: self.get(name) for name in OptionValues.model_fields}
        )

    def reset(self) -> None:
        """Drop permanent writes and any active overrides."""
        self._values.clear()
        self._overrides.clear()

    def _validate(self, name: str, value: Any) -> Any:
        return self._validate_all({name: value})[name]

    def _validate_all(self, updates: Dict[str, Any]) -> Dict[str, Any]:
        current = {field_name: self.get(field_name) for field_name in OptionValues.model_fields}
        current.update(updates)
        try:
            validated = OptionValues.model_validate(current)
        except ValidationError as e:
            raise InvalidOptionValueError(_failed_option(e, updates), _reason(e)) from e
        return {name: getattr(validated, name) for name in updates}


def _failed_option(error: ValidationError, updates: Dict[str, Any]) -> str:
    if len(updates) == 1:
        return next(iter(updates))
    for err in error.errors():
        if err["loc"]:
            name = str(err["loc"][0])
            name = _ALIASES.get(name, name)
            if name in updates:
                return name
    return ", ".join(updates)


def _reason(error: ValidationError) -> str:
    return "; ".join(err["msg"] for err in error.errors())


@lru_cache
def get_options() -> ExtractionOptions:
    """Get the process-wide options resolver.

    Returns:
        ExtractionOptions: Cached resolver seeded from the application settings.
    """
    return ExtractionOptions()

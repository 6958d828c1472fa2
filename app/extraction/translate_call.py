"""Translation-call model.

Validates the raw arguments of one discovered translation call and projects
them into ``(key, default_text)`` pairs.

Supported signatures:

    key, default_string [, options]
    key, pluralization_map, options
    default_string [, options]
    pluralization_map, options
    key, {defaultValue: default_string, ...}     (legacy)
"""

import re
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from extraction.arguments import (
    Argument,
    ArgumentKind,
    MapLiteral,
    StringLiteral,
    iter_kinds,
)
from extraction.errors import (
    ExtractionError,
    InvalidPluralizationDefaultError,
    InvalidPluralizationKeyError,
    InvalidSignatureError,
    MissingCountValueError,
    MissingInterpolationValueError,
    MissingPluralizationKeyError,
)
from extraction.inflection import pluralize
from extraction.keys import infer_key
from extraction.options import (
    ESSENTIAL_PLURALIZATION_KEYS,
    ExtractionOptions,
    OptionValues,
    get_options,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

COUNT_OPTION = "count"
LEGACY_DEFAULT_OPTION = "defaultValue"
MAX_ARGUMENTS = 3

# Variant whose text seeds the inferred key of a pluralized call
PRIMARY_VARIANT = "other"

# A single word that may be expanded into a pluralization map
_SINGLE_WORD = re.compile(r"^(?!\d)[\w-]+$")

Default = Union[str, Dict[str, str]]
TranslationPair = Tuple[str, str]


class TranslateCall:
    """A validated translation call.

    Validation runs eagerly in the constructor and raises a typed
    ``ExtractionError`` subclass on any violation. ``translations()`` is a
    pure projection of the validated fields and may be called repeatedly.

    Attributes:
        method: Name of the called method (e.g. ``"t"``).
        line: Source line supplied by the scanner, if any.
        key: Literal key, or None when the key is inferred.
        default: Default text, or a variant -> text map when pluralized.
        options: Options bag with literals unwrapped (``defaultValue``
            included as given).
        settings: Options resolver consulted for validation and key inference.

    Example:
        call = TranslateCall("t", classify_all("person", {"count": 1}))
        call.translations()
        # [("count_people_489946e7.one", "1 person"),
        #  ("count_people_489946e7.other", "%{count} people")]
    """

    def __init__(
        self,
        method: str,
        args: Iterable[Argument],
        line: Optional[int] = None,
        settings: Optional[ExtractionOptions] = None,
    ):
        """Resolve and validate a raw call.

        Args:
            method: Name of the called method.
            args: Classified positional arguments, in source order.
            line: Source line, used in error messages.
            settings: Options resolver; defaults to the process-wide one.

        Raises:
            InvalidSignatureError: Bad arity or non-literal key/default/options.
            InvalidPluralizationKeyError: Unknown variant names.
            MissingPluralizationKeyError: Missing essential variants.
            InvalidPluralizationDefaultError: Non-literal variant value.
            MissingInterpolationValueError: Placeholder with no value.
            MissingCountValueError: Pluralized call without ``count``.
        """
        self.method = method
        self.line = line
        self.settings = settings or get_options()

        arguments = list(args)
        try:
            key, default_arg, options_arg = self._resolve_signature(list(arguments))
            self.key: Optional[str] = key
            self.options: Dict[str, Any] = options_arg.to_dict() if options_arg else {}
            default = self._validate_default(default_arg, self.settings.snapshot())
        except ExtractionError as e:
            logger.warning(
                "translate_call_invalid",
                method=method,
                line=line,
                arg_kinds=iter_kinds(arguments),
                error=e.detail,
            )
            raise

        self.default: Default = self._normalize_default(default)
        logger.debug(
            "translate_call_validated",
            method=method,
            line=line,
            key=self.key,
            pluralized=self.is_pluralized,
        )

    @property
    def is_pluralized(self) -> bool:
        return isinstance(self.default, dict)

    @property
    def inferred_key(self) -> bool:
        return self.key is None

    def translations(self) -> List[TranslationPair]:
        """Project the call into ``(key, default_text)`` pairs.

        Pluralized calls yield one pair per variant, the key suffixed with
        ``.<variant>``, in the configured variant order.

        Returns:
            List of (key, default_text) tuples.

        Raises:
            InvalidSignatureError: If the current key format infers an empty
                key from the default text.
        """
        values = self.settings.snapshot()
        key = self.key if self.key is not None else self._infer_key(values)
        if not key:
            # e.g. punctuation-only text under the underscored format
            raise InvalidSignatureError(
                f"cannot infer a {values.inferred_key_format.value} key "
                f"from {self._primary_text()!r}",
                line=self.line,
            )

        if isinstance(self.default, dict):
            return [
                (f"{key}.{variant}", self.default[variant])
                for variant in self._ordered_variants(values)
            ]
        return [(key, self.default)]

    def _resolve_signature(
        self, args: List[Argument]
    ) -> Tuple[Optional[str], Argument, Optional[MapLiteral]]:
        """Split raw arguments into key, default and options bag."""
        if len(args) > MAX_ARGUMENTS:
            raise InvalidSignatureError(
                f"expected at most {MAX_ARGUMENTS} arguments, got {len(args)}",
                line=self.line,
            )
        if not args:
            raise InvalidSignatureError("expected a key or a default", line=self.line)

        options: Optional[MapLiteral] = None
        last = args[-1]
        if last.kind is ArgumentKind.MAP and not self._is_pluralization_map(last):
            options = args.pop()
        elif len(args) == MAX_ARGUMENTS:
            raise InvalidSignatureError(
                "options must be an object literal", line=self.line
            )

        if not args:
            raise InvalidSignatureError("expected a key or a default", line=self.line)

        legacy_default = options.get(LEGACY_DEFAULT_OPTION) if options else None

        match args:
            case [StringLiteral() as key_arg] if isinstance(legacy_default, StringLiteral):
                key, default_arg = key_arg.value, legacy_default
            case [StringLiteral() as key_arg, default_arg]:
                key = key_arg.value
            case [_, _]:
                raise InvalidSignatureError(
                    "key must be a string literal", line=self.line
                )
            case [default_arg]:
                key = None

        if key is not None and not key.strip():
            raise InvalidSignatureError("key must not be blank", line=self.line)

        if default_arg.kind is ArgumentKind.STRING:
            if key is None and not default_arg.value.strip():
                raise InvalidSignatureError(
                    "cannot infer a key from a blank default", line=self.line
                )
        elif not (
            default_arg.kind is ArgumentKind.MAP
            and self._is_pluralization_map(default_arg)
        ):
            raise InvalidSignatureError(
                "default must be a string or pluralization literal", line=self.line
            )

        return key, default_arg, options

    def _is_pluralization_map(self, arg: MapLiteral) -> bool:
        allowed = self.settings.get("pluralization_keys")
        return any(name in allowed for name in arg.keys())

    def _validate_default(self, default_arg: Argument, values: OptionValues) -> Default:
        """Validate the default and return it as plain Python values."""
        if isinstance(default_arg, StringLiteral):
            self._validate_interpolation(default_arg.value, values)
            return default_arg.value

        variants = default_arg.entries
        foreign = [name for name in variants if name not in values.pluralization_keys]
        if foreign:
            raise InvalidPluralizationKeyError(foreign, line=self.line)

        missing = [name for name in ESSENTIAL_PLURALIZATION_KEYS if name not in variants]
        if missing:
            raise MissingPluralizationKeyError(missing, line=self.line)

        default: Dict[str, str] = {}
        for variant, value in variants.items():
            if not isinstance(value, StringLiteral):
                raise InvalidPluralizationDefaultError(
                    f"default for {variant!r} must be a string literal", line=self.line
                )
            default[variant] = value.value

        if self.key is None and not default[PRIMARY_VARIANT].strip():
            raise InvalidSignatureError(
                "cannot infer a key from a blank default", line=self.line
            )

        for text in default.values():
            self._validate_interpolation(text, values)

        if COUNT_OPTION not in self.options:
            raise MissingCountValueError(
                "pluralized call requires a count option", line=self.line
            )
        return default

    def _validate_interpolation(self, text: str, values: OptionValues) -> None:
        # A key that is present, even with an empty string, counts as supplied
        for match in values.interpolation_pattern.finditer(text):
            placeholder = match.group(1).strip()
            if placeholder not in self.options:
                raise MissingInterpolationValueError(placeholder, line=self.line)

    def _normalize_default(self, default: Default) -> Default:
        """Expand a single-word default into a pluralization map.

        Only applies when a ``count`` is given; multi-word defaults stay a
        single string.
        """
        if (
            isinstance(default, str)
            and COUNT_OPTION in self.options
            and _SINGLE_WORD.match(default)
        ):
            return {
                "one": f"1 {default}",
                "other": f"%{{{COUNT_OPTION}}} {pluralize(default)}",
            }
        return default

    def _primary_text(self) -> str:
        return self.default[PRIMARY_VARIANT] if isinstance(self.default, dict) else self.default

    def _infer_key(self, values: OptionValues) -> str:
        return infer_key(
            self._primary_text(), values.inferred_key_format, values.max_key_length
        )

    def _ordered_variants(self, values: OptionValues) -> List[str]:
        declared = [name for name in values.pluralization_keys if name in self.default]
        return declared + [name for name in self.default if name not in declared]

    def __repr__(self) -> str:
        return (
            f"TranslateCall(method={self.method!r}, line={self.line!r}, "
            f"key={self.key!r}, default={self.default!r})"
        )

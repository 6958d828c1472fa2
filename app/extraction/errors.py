"""Custom exceptions for translation-call extraction.

Every failure raised while validating a translation call or touching the
extraction options derives from ``ExtractionError``, so scanning drivers can
decide in one place whether to abort a scan or collect errors per file.
"""

from typing import Iterable, Optional


class ExtractionError(Exception):
    """Base exception for all extraction errors.

    Attributes:
        line: Source line of the offending call, when the scanner supplied one.
        detail: Message without the line prefix.

    Example:
        try:
            TranslateCall("t", args, line=12)
        except ExtractionError as e:
            logger.error("extraction_failed", line=e.line, error=e.detail)
    """

    def __init__(self, detail: str, line: Optional[int] = None):
        self.line = line
        self.detail = detail
        message = f"line {line}: {detail}" if line is not None else detail
        super().__init__(message)


class InvalidSignatureError(ExtractionError):
    """Raised when a call's arguments do not form a valid signature.

    Covers wrong arity, a non-literal in the key/default/options position,
    and calls with neither a key nor a default.

    Example:
        >>> TranslateCall("t", [])
        Traceback (most recent call last):
        ...
        InvalidSignatureError: expected a key or a default
    """

    pass


class InvalidPluralizationKeyError(ExtractionError):
    """Raised when a pluralization map contains unknown variant names.

    Attributes:
        keys: The offending variant names, in call order.
    """

    def __init__(self, keys: Iterable[str], line: Optional[int] = None):
        self.keys = list(keys)
        super().__init__(
            f"invalid pluralization keys: {', '.join(self.keys)}", line=line
        )


class MissingPluralizationKeyError(ExtractionError):
    """Raised when a pluralization map lacks one of the essential variants.

    Attributes:
        keys: The missing variant names.
    """

    def __init__(self, keys: Iterable[str], line: Optional[int] = None):
        self.keys = list(keys)
        super().__init__(
            f"missing pluralization keys: {', '.join(self.keys)}", line=line
        )


class InvalidPluralizationDefaultError(ExtractionError):
    """Raised when a pluralization variant's value is not a string literal."""

    pass


class MissingCountValueError(ExtractionError):
    """Raised when a pluralized call has no ``count`` in its options."""

    pass


class MissingInterpolationValueError(ExtractionError):
    """Raised when default text references a placeholder with no value.

    Attributes:
        placeholder: Name of the unresolved placeholder.

    Example:
        >>> TranslateCall("t", classify_all("asdf %{bob}"))
        Traceback (most recent call last):
        ...
        MissingInterpolationValueError: missing interpolation value: bob
    """

    def __init__(self, placeholder: str, line: Optional[int] = None):
        self.placeholder = placeholder
        super().__init__(f"missing interpolation value: {placeholder}", line=line)


class UnknownOptionError(ExtractionError):
    """Raised when reading or writing an option that does not exist.

    Attributes:
        option: The unrecognized option name.
    """

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"unknown extraction option: {option!r}")


class InvalidOptionValueError(ExtractionError):
    """Raised when an option value fails validation.

    Attributes:
        option: Canonical option name.
    """

    def __init__(self, option: str, reason: str):
        self.option = option
        super().__init__(f"invalid value for option {option!r}: {reason}")

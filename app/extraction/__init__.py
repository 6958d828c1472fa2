"""Translation-call extraction core.

Turns the raw arguments of translation calls found in source code into
validated ``(key, default_text)`` pairs for a translation catalog.

Main components:
- arguments: StringLiteral, MapLiteral, UnsupportedExpression, classify
- options: ExtractionOptions resolver with scoped overrides
- keys: key inference strategies (literal, underscored, underscored_crc32)
- translate_call: TranslateCall validator and projection
- config_loader: package.json / .i18nrc loading
- errors: ExtractionError hierarchy
"""

from extraction.arguments import (
    UNSUPPORTED,
    Argument,
    ArgumentKind,
    MapLiteral,
    StringLiteral,
    UnsupportedExpression,
    classify,
    classify_all,
)
from extraction.config_loader import apply_project_config, load_project_config
from extraction.errors import (
    ExtractionError,
    InvalidOptionValueError,
    InvalidPluralizationDefaultError,
    InvalidPluralizationKeyError,
    InvalidSignatureError,
    MissingCountValueError,
    MissingInterpolationValueError,
    MissingPluralizationKeyError,
    UnknownOptionError,
)
from extraction.keys import infer_key
from extraction.options import ExtractionOptions, KeyFormat, get_options
from extraction.translate_call import TranslateCall

__all__ = [
    "UNSUPPORTED",
    "Argument",
    "ArgumentKind",
    "MapLiteral",
    "StringLiteral",
    "UnsupportedExpression",
    "classify",
    "classify_all",
    "apply_project_config",
    "load_project_config",
    "ExtractionError",
    "InvalidOptionValueError",
    "InvalidPluralizationDefaultError",
    "InvalidPluralizationKeyError",
    "InvalidSignatureError",
    "MissingCountValueError",
    "MissingInterpolationValueError",
    "MissingPluralizationKeyError",
    "UnknownOptionError",
    "infer_key",
    "ExtractionOptions",
    "KeyFormat",
    "get_options",
    "TranslateCall",
]

"""Raw argument models for translation calls.

The source scanner classifies every argument of a discovered call once, into
one of a closed set of kinds. The validator dispatches on ``kind`` and never
probes Python types of the original source values.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Union


class ArgumentKind(Enum):
    """Supported argument kinds."""

    STRING = "string"
    MAP = "map"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class StringLiteral:
    """A string literal argument, e.g. ``"Hello %{name}"``."""

    value: str

    @property
    def kind(self) -> ArgumentKind:
        return ArgumentKind.STRING


@dataclass(frozen=True)
class UnsupportedExpression:
    """Any non-literal syntax: a variable, a function call, a concatenation.

    Attributes:
        source: Source text of the expression, kept for error messages.
    """

    source: str = ""

    @property
    def kind(self) -> ArgumentKind:
        return ArgumentKind.UNSUPPORTED


@dataclass(frozen=True)
class MapLiteral:
    """An object literal argument.

    Entry values are nested arguments, or plain literal scalars (numbers,
    booleans, ``None``) such as the ``1`` in ``{count: 1}``. Plain ``str`` and
    ``dict`` values are classified on construction.

    Attributes:
        entries: Mapping of entry name to value, in source order.
    """

    entries: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        classified = {name: _classify_entry(value) for name, value in self.entries.items()}
        object.__setattr__(self, "entries", classified)

    @property
    def kind(self) -> ArgumentKind:
        return ArgumentKind.MAP

    def keys(self) -> List[str]:
        return list(self.entries)

    def get(self, name: str, default: Any = None) -> Any:
        return self.entries.get(name, default)

    def to_dict(self) -> Dict[str, Any]:
        """Unwrap literals into plain Python values.

        String literals become ``str`` and nested maps become ``dict``;
        unsupported expressions and scalars are kept as they are.
        """
        result: Dict[str, Any] = {}
        for name, value in self.entries.items():
            if isinstance(value, StringLiteral):
                result[name] = value.value
            elif isinstance(value, MapLiteral):
                result[name] = value.to_dict()
            else:
                result[name] = value
        return result


Argument = Union[StringLiteral, MapLiteral, UnsupportedExpression]

# Shared marker for arguments the scanner could not evaluate statically
UNSUPPORTED = UnsupportedExpression()


def _classify_entry(value: Any) -> Any:
    if isinstance(value, (StringLiteral, MapLiteral, UnsupportedExpression)):
        return value
    if isinstance(value, str):
        return StringLiteral(value)
    if isinstance(value, Mapping):
        return MapLiteral(dict(value))
    return value


def classify(value: Any) -> Argument:
    """Build an argument from a plain Python value.

    Args:
        value: ``str``, a mapping, or an already classified argument.

    Returns:
        The matching argument. Anything else is an unsupported expression.

    Example:
        classify("Hello")          # StringLiteral("Hello")
        classify({"count": 1})     # MapLiteral({"count": 1})
        classify(3)                # UnsupportedExpression("3")
    """
    if isinstance(value, (StringLiteral, MapLiteral, UnsupportedExpression)):
        return value
    if isinstance(value, str):
        return StringLiteral(value)
    if isinstance(value, Mapping):
        return MapLiteral(dict(value))
    return UnsupportedExpression(repr(value))


def classify_all(*values: Any) -> List[Argument]:
    """Classify a whole positional argument list."""
    return [classify(value) for value in values]


def iter_kinds(args: Iterable[Argument]) -> List[str]:
    """Return the kind names of ``args``, for log and error messages."""
    return [arg.kind.value for arg in args]

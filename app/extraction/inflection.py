"""English noun pluralization for count-inferred defaults.

Used when a single-word default such as ``"person"`` is given together with a
``count``; the call then expands to ``"1 person"`` / ``"%{count} people"``.
"""

import re

IRREGULAR_PLURALS = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "tooth": "teeth",
    "foot": "feet",
    "mouse": "mice",
    "goose": "geese",
    "ox": "oxen",
    "leaf": "leaves",
    "life": "lives",
    "knife": "knives",
    "wife": "wives",
    "half": "halves",
    "wolf": "wolves",
    "shelf": "shelves",
    "thief": "thieves",
    "self": "selves",
    "elf": "elves",
    "loaf": "loaves",
    "calf": "calves",
    "cactus": "cacti",
    "focus": "foci",
    "radius": "radii",
    "criterion": "criteria",
    "phenomenon": "phenomena",
    "datum": "data",
    "medium": "media",
    "analysis": "analyses",
    "crisis": "crises",
    "thesis": "theses",
    "index": "indices",
    "matrix": "matrices",
    "vertex": "vertices",
    "quiz": "quizzes",
    "potato": "potatoes",
    "tomato": "tomatoes",
    "hero": "heroes",
    "echo": "echoes",
}

UNCOUNTABLE = frozenset(
    {
        "sheep",
        "fish",
        "deer",
        "series",
        "species",
        "money",
        "rice",
        "information",
        "equipment",
        "news",
        "software",
        "feedback",
        "data",
    }
)

_CONSONANT_Y = re.compile(r"[^aeiou]y$")
_SIBILANT = re.compile(r"(s|x|z|ch|sh)$")


def _match_case(source: str, plural: str) -> str:
    if source.isupper() and len(source) > 1:
        return plural.upper()
    if source[:1].isupper():
        return plural[:1].upper() + plural[1:]
    return plural


def pluralize(word: str) -> str:
    """Return the plural form of an English noun.

    Only the last hyphen-separated segment is inflected, so ``"sign-in"``
    becomes ``"sign-ins"``. Capitalization of the segment is preserved.

    Args:
        word: Singular noun.

    Returns:
        Plural noun.

    Example:
        >>> pluralize("person")
        'people'
        >>> pluralize("Category")
        'Categories'
    """
    head, sep, tail = word.rpartition("-")
    if not tail:
        return word

    lower = tail.lower()
    if lower in UNCOUNTABLE:
        plural = lower
    elif lower in IRREGULAR_PLURALS:
        plural = IRREGULAR_PLURALS[lower]
    elif _CONSONANT_Y.search(lower):
        plural = lower[:-1] + "ies"
    elif _SIBILANT.search(lower):
        plural = lower + "es"
    else:
        plural = lower + "s"

    return f"{head}{sep}{_match_case(tail, plural)}"

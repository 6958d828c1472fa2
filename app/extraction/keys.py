"""Key inference strategies.

Turns default text into a stable lookup key. Each ``KeyFormat`` maps to a
pure function ``(text, max_length) -> key``; the results must not change
between runs, since catalogs are keyed by them.
"""

import re
import zlib
from typing import Callable, Dict

from extraction.options import KeyFormat

_UNSAFE_CHARACTERS = re.compile(r"[^a-z0-9_]+")

# "_" plus eight hex digits
HASH_SEGMENT_LENGTH = 9


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs into single spaces and trim the ends."""
    return " ".join(text.split())


def checksum(text: str) -> str:
    """Return the 8-hex-digit CRC-32 used to disambiguate slugged keys.

    The checksum covers the text prefixed with its length, so texts that
    slug identically still get distinct keys.
    """
    crc = zlib.crc32(f"{len(text)}:{text}".encode("utf-8")) & 0xFFFFFFFF
    return f"{crc:08x}"


def slugify(text: str) -> str:
    """Lower-case ``text`` and replace unsafe character runs with ``_``."""
    return _UNSAFE_CHARACTERS.sub("_", text.lower()).strip("_")


def _truncate(slug: str, max_length: int) -> str:
    return slug[:max_length].rstrip("_") if max_length > 0 else ""


def keyify_literal(text: str, max_length: int) -> str:
    return text[:max_length]


def keyify_underscored(text: str, max_length: int) -> str:
    """Slug ``text``; punctuation-only text yields an empty key."""
    return _truncate(slugify(text), max_length)


def keyify_underscored_crc32(text: str, max_length: int) -> str:
    # Only the slug is cut; the hash segment always survives intact
    slug = _truncate(slugify(text), max_length - HASH_SEGMENT_LENGTH)
    digest = checksum(text)
    return f"{slug}_{digest}" if slug else digest


KEY_FORMATS: Dict[KeyFormat, Callable[[str, int], str]] = {
    KeyFormat.LITERAL: keyify_literal,
    KeyFormat.UNDERSCORED: keyify_underscored,
    KeyFormat.UNDERSCORED_CRC32: keyify_underscored_crc32,
}


def infer_key(text: str, key_format: KeyFormat, max_length: int) -> str:
    """Infer a key from default text.

    Args:
        text: Default text; whitespace is normalized before keying.
        key_format: Strategy to apply.
        max_length: Maximum length of the resulting key.

    Returns:
        The inferred key, never longer than ``max_length``.

    Example:
        infer_key("zOmg key!!", KeyFormat.UNDERSCORED_CRC32, 50)
        # "zomg_key_90a85b0b"
    """
    return KEY_FORMATS[KeyFormat(key_format)](normalize_whitespace(text), max_length)

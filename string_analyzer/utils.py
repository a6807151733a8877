import hashlib
import re
from collections import Counter
from typing import Dict

from string_analyzer.exceptions import TypeMismatchError
from string_analyzer.schemas import StringProperties

# ECMAScript whitespace and line terminators (what \s and trim() treat as blank)
WHITESPACE_CHARS = (
    r"\t\n\x0b\x0c\r \u00a0\u1680\u2000-\u200a"
    r"\u2028\u2029\u202f\u205f\u3000\ufeff"
)
WHITESPACE_RUN = re.compile(f"[{WHITESPACE_CHARS}]+")
EDGE_WHITESPACE = re.compile(rf"^[{WHITESPACE_CHARS}]+|[{WHITESPACE_CHARS}]+\Z")


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string (hex digest of its UTF-8 bytes)"""
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()


def _utf16_units(text: str) -> bytes:
    return text.encode("utf-16-le", "surrogatepass")


def count_code_units(text: str) -> int:
    """Length in UTF-16 code units: astral characters count twice"""
    return len(_utf16_units(text)) // 2


def is_palindrome(text: str) -> bool:
    """Check if string reads the same reversed, ignoring case only.

    The reversal is done per UTF-16 code unit, so surrogate pairs are split.
    """
    units = _utf16_units(text.lower())
    reversed_units = b"".join(units[i:i + 2] for i in range(len(units) - 2, -1, -2))
    return units == reversed_units


def count_words(text: str) -> int:
    """Count maximal runs of non-whitespace characters"""
    trimmed = EDGE_WHITESPACE.sub("", text)
    if not trimmed:
        return 0
    return len(WHITESPACE_RUN.split(trimmed))


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of every character, whitespace and punctuation included"""
    return dict(Counter(text))


def analyze_string(value) -> StringProperties:
    """
    Analyze a string and return all computed properties.

    Length and palindrome work on UTF-16 code units; the frequency map counts
    whole code points. No Unicode normalization, no grapheme clustering.
    Raises TypeMismatchError when value is not a string.
    """
    if not isinstance(value, str):
        raise TypeMismatchError()

    frequency = get_character_frequency(value)

    return StringProperties(
        length=count_code_units(value),
        is_palindrome=is_palindrome(value),
        unique_characters=len(frequency),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=frequency,
    )

import re
import logging

from string_analyzer.exceptions import (
    ConflictingFiltersError,
    TypeMismatchError,
    UnparseableQueryError,
)
from string_analyzer.filters import check_length_bounds
from string_analyzer.schemas import FilterCriteria

logger = logging.getLogger(__name__)

SINGLE_WORD_PATTERN = re.compile(r"\bsingle word\b|\b1 word\b|\bword_count=1\b", re.ASCII)
LONGER_THAN_PATTERN = re.compile(r"longer than ([0-9]+)")
SHORTER_THAN_PATTERN = re.compile(r"shorter than ([0-9]+)")
EXACT_LENGTH_PATTERN = re.compile(r"\b(?:length|long) ([0-9]+)\b", re.ASCII)
CONTAINS_PATTERN = re.compile(r"(?:contain|containing|contains)\s+(?:the\s+letter\s+)?([a-z0-9])")


def parse_natural_language_query(query: str) -> FilterCriteria:
    """
    Parse natural language query into filter criteria.

    Every pattern is checked, in a fixed order, and the matches are merged.
    When two patterns set the same field the later one wins.

    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}

    Raises UnparseableQueryError if nothing is recognized and
    ConflictingFiltersError if the result has min_length > max_length.
    """
    if not isinstance(query, str):
        raise TypeMismatchError("query must be a string")

    text = query.lower()
    filters = {}

    if "palindrom" in text:
        filters["is_palindrome"] = True

    if SINGLE_WORD_PATTERN.search(text):
        filters["word_count"] = 1

    # "longer than X" excludes X itself
    match = LONGER_THAN_PATTERN.search(text)
    if match:
        filters["min_length"] = int(match.group(1)) + 1

    match = SHORTER_THAN_PATTERN.search(text)
    if match:
        filters["max_length"] = int(match.group(1)) - 1

    match = EXACT_LENGTH_PATTERN.search(text)
    if match:
        filters["min_length"] = int(match.group(1))
        filters["max_length"] = int(match.group(1))

    match = CONTAINS_PATTERN.search(text)
    if match:
        filters["contains_character"] = match.group(1)

    # Heuristic: "first vowel" means 'a'
    if "first vowel" in text:
        filters["contains_character"] = "a"

    if not filters:
        raise UnparseableQueryError()

    criteria = FilterCriteria(**filters)
    try:
        check_length_bounds(criteria)
    except ConflictingFiltersError:
        logger.info(f"Conflicting filters parsed from query '{query}': {filters}")
        raise
    return criteria


interpret = parse_natural_language_query

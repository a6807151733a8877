import re
from typing import Iterable, List, Mapping, Optional

from string_analyzer.exceptions import ConflictingFiltersError, InvalidCriteriaError
from string_analyzer.schemas import FilterCriteria, StringProperties, StringRecord

INTEGER_FIELDS = ("min_length", "max_length", "word_count")
INTEGER_TOKEN = re.compile(r"^[+-]?[0-9]+$")


def check_length_bounds(criteria: FilterCriteria) -> None:
    """Reject criteria whose length window is empty (min_length > max_length)."""
    if (
        criteria.min_length is not None
        and criteria.max_length is not None
        and criteria.min_length > criteria.max_length
    ):
        raise ConflictingFiltersError()


def _parse_bool(field: str, raw: str) -> bool:
    token = raw.strip().lower()
    if token not in ("true", "false"):
        raise InvalidCriteriaError(field, f"{field} must be true or false")
    return token == "true"


def _parse_int(field: str, raw: str) -> int:
    token = raw.strip()
    if not INTEGER_TOKEN.match(token):
        raise InvalidCriteriaError(field, f"{field} must be integer")
    return int(token)


def _parse_char(field: str, raw: str) -> str:
    if len(raw) != 1:
        raise InvalidCriteriaError(field, f"{field} must be a single character string")
    return raw


def parse_criteria(params: Mapping[str, Optional[str]]) -> FilterCriteria:
    """
    Build FilterCriteria from raw query-string tokens.

    Each field is type-checked on its own; the first malformed one raises
    InvalidCriteriaError naming it. Missing fields stay unconstrained.
    """
    parsed = {}

    raw = params.get("is_palindrome")
    if raw is not None:
        parsed["is_palindrome"] = _parse_bool("is_palindrome", raw)

    for field in INTEGER_FIELDS:
        raw = params.get(field)
        if raw is not None:
            parsed[field] = _parse_int(field, raw)

    raw = params.get("contains_character")
    if raw is not None:
        parsed["contains_character"] = _parse_char("contains_character", raw)

    criteria = FilterCriteria(**parsed)
    check_length_bounds(criteria)
    return criteria


def matches(properties: StringProperties, value: str, criteria: FilterCriteria) -> bool:
    """True if a record satisfies every constraint set on criteria."""
    if criteria.is_palindrome is not None and properties.is_palindrome != criteria.is_palindrome:
        return False

    if criteria.min_length is not None and properties.length < criteria.min_length:
        return False

    if criteria.max_length is not None and properties.length > criteria.max_length:
        return False

    if criteria.word_count is not None and properties.word_count != criteria.word_count:
        return False

    # Checked against the raw value, not the frequency map
    if criteria.contains_character is not None and criteria.contains_character not in value:
        return False

    return True


def apply_filters(records: Iterable[StringRecord], criteria: FilterCriteria) -> List[StringRecord]:
    """Records matching criteria, in collection order"""
    return [
        record for record in records
        if matches(record.properties, record.value, criteria)
    ]

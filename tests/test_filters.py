"""Tests for structured criteria parsing and the record predicate."""

import pytest

from string_analyzer.exceptions import ConflictingFiltersError, InvalidCriteriaError
from string_analyzer.filters import apply_filters, matches, parse_criteria
from string_analyzer.schemas import FilterCriteria, StringRecord
from string_analyzer.utils import analyze_string


def make_record(value: str) -> StringRecord:
    props = analyze_string(value)
    return StringRecord(
        id=props.sha256_hash,
        value=value,
        properties=props,
        created_at="2025-01-01T00:00:00+00:00",
    )


@pytest.fixture
def records():
    return [make_record(v) for v in ["racecar", "hello world", "zebra", "noon", "a quick brown fox"]]


class TestParseCriteria:
    def test_empty(self):
        criteria = parse_criteria({})
        assert criteria.is_empty()

    def test_all_fields(self):
        criteria = parse_criteria({
            "is_palindrome": "TRUE",
            "min_length": "3",
            "max_length": " 10 ",
            "word_count": "1",
            "contains_character": "a",
        })
        assert criteria.applied() == {
            "is_palindrome": True,
            "min_length": 3,
            "max_length": 10,
            "word_count": 1,
            "contains_character": "a",
        }

    def test_false_token(self):
        assert parse_criteria({"is_palindrome": "false"}).is_palindrome is False

    @pytest.mark.parametrize("field,raw", [
        ("is_palindrome", "yes"),
        ("min_length", "abc"),
        ("max_length", "1.5"),
        ("word_count", ""),
        ("min_length", "1_000"),
        ("contains_character", "ab"),
        ("contains_character", ""),
    ])
    def test_invalid_field_is_named(self, field, raw):
        with pytest.raises(InvalidCriteriaError) as exc_info:
            parse_criteria({field: raw})
        assert exc_info.value.field == field
        assert field in exc_info.value.message

    def test_min_greater_than_max(self):
        with pytest.raises(ConflictingFiltersError):
            parse_criteria({"min_length": "10", "max_length": "2"})


class TestMatches:
    def test_empty_criteria_matches_everything(self, records):
        assert apply_filters(records, FilterCriteria()) == records

    def test_contains_character(self, records):
        result = apply_filters(records, FilterCriteria(contains_character="z"))
        assert [r.value for r in result] == ["zebra"]

    def test_contains_is_case_sensitive(self):
        record = make_record("Zebra")
        assert matches(record.properties, record.value, FilterCriteria(contains_character="z")) is False

    def test_palindrome(self, records):
        result = apply_filters(records, FilterCriteria(is_palindrome=True))
        assert [r.value for r in result] == ["racecar", "noon"]

        result = apply_filters(records, FilterCriteria(is_palindrome=False))
        assert [r.value for r in result] == ["hello world", "zebra", "a quick brown fox"]

    def test_length_bounds_inclusive(self, records):
        result = apply_filters(records, FilterCriteria(min_length=5, max_length=7))
        assert [r.value for r in result] == ["racecar", "zebra"]

    def test_word_count(self, records):
        result = apply_filters(records, FilterCriteria(word_count=2))
        assert [r.value for r in result] == ["hello world"]

    def test_conjunction(self, records):
        criteria = FilterCriteria(is_palindrome=True, word_count=1, contains_character="c")
        result = apply_filters(records, criteria)
        assert [r.value for r in result] == ["racecar"]

    def test_contains_uses_raw_value(self):
        record = make_record("abc")
        # A frequency map that disagrees with the value must not matter
        record.properties.character_frequency_map = {}
        assert matches(record.properties, record.value, FilterCriteria(contains_character="b")) is True


class TestErrorMessages:
    def test_default_messages_when_none_given(self):
        assert InvalidCriteriaError("min_length").message == "min_length has an invalid value"
        assert InvalidCriteriaError("word_count", None).message == "word_count has an invalid value"
        assert ConflictingFiltersError(None).message == "Query parsed but resulted in conflicting filters"

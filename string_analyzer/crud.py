from datetime import datetime, timezone
from typing import List, Optional, Tuple
import logging

from string_analyzer.exceptions import (
    DuplicateStringError,
    StringNotFoundError,
    UnparseableQueryError,
)
from string_analyzer.filters import apply_filters
from string_analyzer.nlp import parse_natural_language_query
from string_analyzer.schemas import FilterCriteria, StringRecord
from string_analyzer.store import RecordStore
from string_analyzer.utils import analyze_string, compute_sha256

logger = logging.getLogger(__name__)


def _find_index(records: List[StringRecord], string_id: str) -> Optional[int]:
    for index, record in enumerate(records):
        if record.id == string_id:
            return index
    return None


def create_string_analysis(store: RecordStore, value) -> StringRecord:
    """Analyze value and store it; the hash of value is the record id"""
    properties = analyze_string(value)
    string_id = properties.sha256_hash

    records = store.load()
    if _find_index(records, string_id) is not None:
        raise DuplicateStringError()

    record = StringRecord(
        id=string_id,
        value=value,
        properties=properties,
        created_at=datetime.now(timezone.utc).isoformat(),
    )
    records.append(record)
    store.save(records)

    logger.info(f"Stored string {string_id}")
    return record


def get_string_by_value(store: RecordStore, value: str) -> StringRecord:
    """Get string analysis by raw value"""
    records = store.load()
    index = _find_index(records, compute_sha256(value))
    if index is None:
        raise StringNotFoundError()
    return records[index]


def delete_string(store: RecordStore, value: str) -> StringRecord:
    """Delete string analysis by raw value, returning the removed record"""
    records = store.load()
    string_id = compute_sha256(value)
    index = _find_index(records, string_id)
    if index is None:
        raise StringNotFoundError()

    removed = records.pop(index)
    store.save(records)

    logger.info(f"Deleted string {string_id}")
    return removed


def get_all_strings(store: RecordStore, criteria: FilterCriteria) -> List[StringRecord]:
    """Get all strings matching criteria (all of them when criteria is empty)"""
    return apply_filters(store.load(), criteria)


def filter_by_natural_language(store: RecordStore, query: str) -> Tuple[List[StringRecord], FilterCriteria]:
    """Interpret query and return the matching strings with the derived criteria"""
    if not query:
        raise UnparseableQueryError("query parameter is required")

    criteria = parse_natural_language_query(query)
    return get_all_strings(store, criteria), criteria

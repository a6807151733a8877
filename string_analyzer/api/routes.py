from fastapi import APIRouter, Depends, Query, status
from typing import Optional
import logging

from string_analyzer import crud
from string_analyzer.filters import parse_criteria
from string_analyzer.schemas import (
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringRecord,
)
from string_analyzer.store import RecordStore, get_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
async def create_string(
    string_data: StringCreate,
    store: RecordStore = Depends(get_store)
):
    """
    Analyze and store a string.
    Returns 409 if the string already exists, 422 if value is not a string.
    """
    return crud.create_string_analysis(store, string_data.value)


@router.get("/strings", response_model=StringListResponse)
async def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="Filter by palindrome (true/false)"),
    min_length: Optional[str] = Query(None, description="Minimum string length"),
    max_length: Optional[str] = Query(None, description="Maximum string length"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Strings containing this character"),
    store: RecordStore = Depends(get_store)
):
    """
    Get all strings with optional filtering.
    """
    criteria = parse_criteria({
        "is_palindrome": is_palindrome,
        "min_length": min_length,
        "max_length": max_length,
        "word_count": word_count,
        "contains_character": contains_character,
    })
    strings = crud.get_all_strings(store, criteria)

    return StringListResponse(
        data=strings,
        count=len(strings),
        filters_applied=criteria.applied()
    )


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
async def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: RecordStore = Depends(get_store)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    strings, criteria = crud.filter_by_natural_language(store, query)

    return NaturalLanguageResponse(
        data=strings,
        count=len(strings),
        interpreted_query=InterpretedQuery(
            original=query,
            parsed_filters=criteria.applied()
        )
    )


@router.get("/strings/{string_value}", response_model=StringRecord)
async def get_string(string_value: str, store: RecordStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return crud.get_string_by_value(store, string_value)


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_string(string_value: str, store: RecordStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(store, string_value)
    return None

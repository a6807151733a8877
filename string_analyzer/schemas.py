from pydantic import BaseModel, Field
from typing import Any, Dict, Optional, List


class StringCreate(BaseModel):
    # Typed as Any so a non-string value reaches the analyzer and is reported
    # as a type mismatch instead of a generic validation failure.
    value: Any = Field(..., description="String to analyze")


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]

    class Config:
        extra = "allow"


class StringRecord(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: str

    class Config:
        extra = "allow"


class FilterCriteria(BaseModel):
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Only the constraints that are actually set."""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.applied()


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery

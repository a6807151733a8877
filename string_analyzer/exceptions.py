"""Error taxonomy shared by the analyzer, the query engines and the API layer.

Every error carries the HTTP status it is reported with, so the API layer can
map all of them through a single exception handler.
"""
from typing import Optional


class StringAnalyzerError(Exception):
    """Base class for recoverable request-level failures."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TypeMismatchError(StringAnalyzerError):
    status_code = 422
    default_message = 'Invalid data type for "value" (must be string)'


class DuplicateStringError(StringAnalyzerError):
    status_code = 409
    default_message = "String already exists in the system"


class StringNotFoundError(StringAnalyzerError):
    status_code = 404
    default_message = "String does not exist in the system"


class InvalidCriteriaError(StringAnalyzerError):
    """A structured filter field could not be parsed."""

    status_code = 400

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"{field} has an invalid value")


class UnparseableQueryError(StringAnalyzerError):
    status_code = 400
    default_message = "Unable to parse natural language query"


class ConflictingFiltersError(StringAnalyzerError):
    status_code = 422
    default_message = "Query parsed but resulted in conflicting filters"

"""Error classification utilities for search input-contract errors."""

from enum import Enum

from pydantic import BaseModel


class ErrorCategory(Enum):
    """Categories of errors that can surface from a search call."""

    INVALID_CANDIDATES = "invalid_candidates"
    INVALID_SEARCH_OPTIONS = "invalid_search_options"
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCode:
    """Error codes for specific error conditions."""

    # Search contract errors
    ERR_INVALID_CANDIDATES = "ERR_INVALID_CANDIDATES"
    ERR_INVALID_SEARCH_OPTIONS = "ERR_INVALID_SEARCH_OPTIONS"

    # Generic errors
    ERR_UNKNOWN = "ERR_UNKNOWN"


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    message: str
    suggestion: str
    severity: ErrorSeverity


def classify_search_error(exception: Exception) -> ErrorCategory:
    """Classify an exception raised by a search call.

    Args:
        exception: The exception raised by fuzzy_search or a search service

    Returns:
        The matching ErrorCategory
    """
    error_str = str(exception).lower()

    if isinstance(exception, TypeError) and "candidates" in error_str:
        return ErrorCategory.INVALID_CANDIDATES

    if isinstance(exception, ValueError) and ("limit" in error_str or "text_of" in error_str):
        return ErrorCategory.INVALID_SEARCH_OPTIONS

    return ErrorCategory.UNKNOWN


def classify_error_with_response(exception: Exception) -> ErrorResponse:
    """Classify an error and return a structured response with recovery suggestions.

    Args:
        exception: The exception raised during a search

    Returns:
        ErrorResponse with code, message, suggestion, and severity
    """
    category = classify_search_error(exception)

    if category == ErrorCategory.INVALID_CANDIDATES:
        return ErrorResponse(
            code=ErrorCode.ERR_INVALID_CANDIDATES,
            message="The product list could not be searched.",
            suggestion="Reload the product catalog and try again.",
            severity=ErrorSeverity.HIGH,
        )

    if category == ErrorCategory.INVALID_SEARCH_OPTIONS:
        return ErrorResponse(
            code=ErrorCode.ERR_INVALID_SEARCH_OPTIONS,
            message="The search was configured incorrectly.",
            suggestion="Check the search limit and field settings.",
            severity=ErrorSeverity.MEDIUM,
        )

    return ErrorResponse(
        code=ErrorCode.ERR_UNKNOWN,
        message="An unexpected error occurred.",
        suggestion="Please try again later. If the problem persists, contact support.",
        severity=ErrorSeverity.MEDIUM,
    )

"""
Custom exception classes for the application.

Every error carries a code, a message, an HTTP status and details.
"""

from typing import Optional, Any
from datetime import datetime


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "UNKNOWN_FILE_TYPE")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.utcnow().isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


# ===================
# COLUMN MAPPING ERRORS
# ===================

class ColumnMappingError(AppError):
    """Column mapping request could not be processed (500)."""

    def __init__(
        self,
        message: str,
        code: str = "COLUMN_MAPPING_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=500,
            details=details
        )


class TooManyHeadersError(ColumnMappingError):
    """Mapping request exceeds the header cap."""

    def __init__(self, count: int, limit: int):
        super().__init__(
            code="TOO_MANY_HEADERS",
            message=f"Too many headers: {count} (limit {limit})",
            details={"count": count, "limit": limit}
        )


class UnknownFileTypeError(ValidationError):
    """File type has no field catalog."""

    def __init__(self, file_type: str, valid: list[str]):
        super().__init__(
            code="UNKNOWN_FILE_TYPE",
            message=f"Unknown file type: {file_type}",
            details={"provided": file_type, "valid": valid}
        )


# ===================
# SPREADSHEET PARSER ERRORS
# ===================

class SpreadsheetParseError(ValidationError):
    """Uploaded spreadsheet could not be parsed."""

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code="SPREADSHEET_PARSE_ERROR",
            message=message,
            details=details
        )

"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ValidationError,

    # Column mapping
    ColumnMappingError,
    TooManyHeadersError,
    UnknownFileTypeError,

    # Spreadsheet parser
    SpreadsheetParseError,
)

__all__ = [
    # Base
    "AppError",
    "ValidationError",

    # Column mapping
    "ColumnMappingError",
    "TooManyHeadersError",
    "UnknownFileTypeError",

    # Spreadsheet parser
    "SpreadsheetParseError",
]

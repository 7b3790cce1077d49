"""
Spreadsheet parsers module.
"""

from parsers.spreadsheet_parser import (
    parse_spreadsheet,
    ParsedSpreadsheet,
)

__all__ = [
    "parse_spreadsheet",
    "ParsedSpreadsheet",
]

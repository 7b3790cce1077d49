"""
Spreadsheet parser for Data Center uploads.

Reads the first sheet of an Excel workbook or a CSV file into a header list
and rows keyed by header, ready for column mapping.
"""

from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Any, Optional
import structlog

import pandas as pd

from exceptions import SpreadsheetParseError

logger = structlog.get_logger(__name__)

EXCEL_EXTENSIONS = {".xlsx", ".xlsm"}
CSV_EXTENSIONS = {".csv", ".txt"}
SUPPORTED_EXTENSIONS = EXCEL_EXTENSIONS | CSV_EXTENSIONS


@dataclass
class ParsedSpreadsheet:
    """Headers and non-empty data rows of an uploaded file."""
    headers: list[str] = field(default_factory=list)
    rows: list[dict[str, Any]] = field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return len(self.rows)

    def sample_rows(self, limit: int) -> list[dict[str, Any]]:
        """First rows used as mapping samples."""
        return self.rows[:limit]


def parse_spreadsheet(
    content: bytes,
    filename: str,
    max_bytes: Optional[int] = None,
) -> ParsedSpreadsheet:
    """
    Parse an uploaded spreadsheet.

    The first row holds the headers. Headers are trimmed and blank ones are
    dropped along with their column; rows with no values are skipped.

    Args:
        content: Raw file bytes
        filename: Original filename (extension picks the reader)
        max_bytes: Optional size limit

    Returns:
        ParsedSpreadsheet

    Raises:
        SpreadsheetParseError: If the file is too large, unsupported,
            unreadable, or has no data rows
    """
    extension = Path(filename or "").suffix.lower()

    logger.info("parsing_spreadsheet", filename=filename, size=len(content))

    if extension not in SUPPORTED_EXTENSIONS:
        raise SpreadsheetParseError(
            message=f"Unsupported file type: {extension or 'none'}",
            details={"filename": filename, "supported": sorted(SUPPORTED_EXTENSIONS)}
        )

    if max_bytes is not None and len(content) > max_bytes:
        raise SpreadsheetParseError(
            message="File is too large",
            details={"size": len(content), "limit": max_bytes}
        )

    if not content:
        raise SpreadsheetParseError(message="File is empty", details={"filename": filename})

    df = _read_frame(content, extension)

    if len(df.index) < 2:
        raise SpreadsheetParseError(
            message="File must have headers and at least one data row",
            details={"filename": filename, "rows": len(df.index)}
        )

    result = _frame_to_rows(df)

    if not result.headers:
        raise SpreadsheetParseError(
            message="No column headers found in first row",
            details={"filename": filename}
        )

    logger.info(
        "spreadsheet_parsed",
        filename=filename,
        header_count=len(result.headers),
        row_count=result.total_rows,
    )

    return result


# ===================
# HELPER FUNCTIONS
# ===================

def _read_frame(content: bytes, extension: str) -> pd.DataFrame:
    """Read raw cells with no header inference."""
    try:
        if extension in EXCEL_EXTENSIONS:
            return pd.read_excel(
                BytesIO(content),
                sheet_name=0,
                header=None,
                engine="openpyxl",
            )
        return _read_csv(content)
    except Exception as e:
        logger.error("spreadsheet_read_failed", error=str(e), error_type=type(e).__name__)
        raise SpreadsheetParseError(
            message="Failed to read spreadsheet",
            details={"original_error": str(e)}
        )


def _read_csv(content: bytes) -> pd.DataFrame:
    """
    Read CSV cells as text.

    Rows may be ragged: cells past the header row's width (e.g. a trailing
    comma) are dropped and short rows are padded.
    """
    options = dict(
        header=None,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        encoding="utf-8-sig",
    )
    width = len(pd.read_csv(BytesIO(content), nrows=1, **options).columns)

    return pd.read_csv(
        BytesIO(content),
        engine="python",
        on_bad_lines=lambda cells: cells[:width],
        **options,
    )


def _frame_to_rows(df: pd.DataFrame) -> ParsedSpreadsheet:
    """Split a headerless frame into headers and rows keyed by header."""
    df = df.astype(object).where(pd.notna(df), None)

    columns = []
    for position, raw in enumerate(df.iloc[0].tolist()):
        header = _clean_header(raw)
        if header:
            columns.append((position, header))

    result = ParsedSpreadsheet(headers=[header for _, header in columns])

    for values in df.iloc[1:].itertuples(index=False, name=None):
        row = {header: _clean_value(values[position]) for position, header in columns}
        if any(v is not None and v != "" for v in row.values()):
            result.rows.append(row)

    return result


def _clean_header(value: Any) -> str:
    """Header cell as trimmed text ("" when blank)."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _clean_value(value: Any) -> Any:
    """Unbox pandas scalars so rows serialize as plain JSON values."""
    if value is None:
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if hasattr(value, "item"):
        return value.item()
    return value

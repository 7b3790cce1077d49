"""
Import preview for confirmed column mappings.

Re-keys the first rows of an upload by canonical field and flags rows that
leave a required field empty, so the user can fix the file before importing.
"""

from typing import Any, Optional
import structlog

from config import settings, find_field

logger = structlog.get_logger(__name__)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _label(key: str) -> str:
    field = find_field(key)
    return field.label if field else key


def row_issues(row: dict[str, Any], mappings: list[tuple[str, str]]) -> list[str]:
    """
    Issues for a single row.

    Args:
        row: Raw row keyed by file column
        mappings: (file_column, field_key) pairs with a field assigned

    Returns:
        "Missing <label>" for each required field left empty
    """
    issues = []
    for file_column, field_key in mappings:
        field = find_field(field_key)
        if field and field.required and _is_blank(row.get(file_column)):
            issues.append(f"Missing {field.label}")
    return issues


def build_preview(
    rows: list[dict[str, Any]],
    mappings: list[tuple[str, Optional[str]]],
    limit: Optional[int] = None,
) -> dict:
    """
    Build the preview shown before an import runs.

    Args:
        rows: All parsed rows keyed by file column
        mappings: (file_column, field_key) pairs; unmapped columns are ignored
        limit: Rows to include in the preview (defaults to settings)

    Returns:
        Summary counts plus the first rows re-keyed by field key
    """
    limit = limit or settings.preview_row_limit
    mapped = [(col, key) for col, key in mappings if key]

    issues_by_row = [row_issues(row, mapped) for row in rows]
    rows_with_issues = sum(1 for issues in issues_by_row if issues)

    preview_rows = [
        {
            "rowIndex": idx,
            "values": {key: row.get(col) for col, key in mapped},
            "issues": issues_by_row[idx],
        }
        for idx, row in enumerate(rows[:limit])
    ]

    logger.info(
        "import_preview_built",
        total_rows=len(rows),
        mapped_columns=len(mapped),
        rows_with_issues=rows_with_issues,
    )

    return {
        "totalRows": len(rows),
        "mappedColumns": [
            {"fileColumn": col, "fieldKey": key, "label": _label(key)}
            for col, key in mapped
        ],
        "rowsWithIssues": rows_with_issues,
        "rows": preview_rows,
    }

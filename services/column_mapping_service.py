"""
Column mapping service.

Proposes a canonical field for every column of an uploaded spreadsheet by
comparing header names against the field catalog aliases. Matching is
greedy: headers are processed in input order and each one claims its best
unclaimed field, so the first header to reach a field keeps it.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional
import re
import structlog

from config import (
    settings,
    FieldDefinition,
    FILE_TYPE_GROUPS,
    FILE_TYPES,
    REQUIRED_GROUPS,
    fields_for_groups,
)
from exceptions import TooManyHeadersError, UnknownFileTypeError
from utils.text_utils import calculate_similarity

logger = structlog.get_logger(__name__)

# Best score below this leaves the header unmapped
CONFIDENCE_THRESHOLD = 0.5

_DATE_PATTERN = re.compile(r"^\d{1,4}[-/]\d{1,2}[-/]\d{1,4}$")
# Leading numeric prefix, the way JavaScript's parseFloat reads it
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)")


@dataclass
class ColumnMatch:
    """Proposed mapping for one source column."""
    file_column: str
    field_key: Optional[str] = None
    confidence: float = 0.0
    inferred_type: str = "string"

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "fileColumn": self.file_column,
            "fieldKey": self.field_key,
            "confidence": self.confidence,
        }


# ===================
# MATCHING
# ===================

def infer_data_type(values: Iterable[Any]) -> str:
    """
    Guess a column's data type from its sample values.

    Only the first non-empty value is inspected.

    Returns:
        "date", "number" or "string"
    """
    non_empty = [v for v in values if v is not None and v != ""]
    if not non_empty:
        return "string"

    sample = non_empty[0]

    if isinstance(sample, date):
        return "date"
    if isinstance(sample, str) and _DATE_PATTERN.match(sample):
        return "date"

    if isinstance(sample, (int, float)) and not isinstance(sample, bool):
        return "number"
    if isinstance(sample, str) and _NUMBER_PREFIX.match(sample.replace("$", "").replace(",", "")):
        return "number"

    return "string"


def find_best_match(
    header: str,
    sample_values: list[Any],
    candidates: list[FieldDefinition],
    used_keys: set[str],
) -> ColumnMatch:
    """
    Find the best unclaimed field for one header.

    Every alias and the field key itself are scored; a later candidate only
    replaces the current best when it scores strictly higher.

    Args:
        header: Source column name
        sample_values: Non-null values of this column from the sample rows
        candidates: Fields eligible for this file type, in scoring order
        used_keys: Field keys already claimed by earlier headers

    Returns:
        ColumnMatch, unmapped when the best score is below the threshold
    """
    inferred_type = infer_data_type(sample_values)
    best_key: Optional[str] = None
    best_score = 0.0

    for field in candidates:
        if field.key in used_keys:
            continue

        for alias in field.aliases:
            score = calculate_similarity(header, alias)
            if score > best_score:
                best_key, best_score = field.key, score

        key_score = calculate_similarity(header, field.key)
        if key_score > best_score:
            best_key, best_score = field.key, key_score

    if best_score < CONFIDENCE_THRESHOLD:
        return ColumnMatch(file_column=header, inferred_type=inferred_type)

    return ColumnMatch(
        file_column=header,
        field_key=best_key,
        confidence=best_score,
        inferred_type=inferred_type,
    )


def map_columns(
    headers: list[str],
    sample_rows: list[Any],
    candidates: list[FieldDefinition],
) -> list[ColumnMatch]:
    """
    Map every header to a canonical field, claiming fields in header order.

    Returns:
        One ColumnMatch per header, in input order
    """
    used_keys: set[str] = set()
    matches = []

    for header in headers:
        sample_values = [
            row.get(header) for row in sample_rows
            if isinstance(row, dict) and row.get(header) is not None
        ]
        match = find_best_match(header, sample_values, candidates, used_keys)

        if match.field_key:
            used_keys.add(match.field_key)

        matches.append(match)

    return matches


# ===================
# SERVICE
# ===================

class ColumnMappingService:
    """
    Column mapping and field catalog operations for Data Center uploads.
    """

    def __init__(self, max_headers: Optional[int] = None):
        self.max_headers = max_headers or settings.max_mapping_headers

    def get_fields(self, file_type: str) -> list[FieldDefinition]:
        """
        Candidate fields for a file type.

        Raises:
            UnknownFileTypeError: If the file type has no field groups
        """
        groups = FILE_TYPE_GROUPS.get(file_type)
        if groups is None:
            raise UnknownFileTypeError(file_type, list(FILE_TYPES))
        return fields_for_groups(groups)

    def get_required_fields(self, file_type: str) -> list[FieldDefinition]:
        """Fields that must be mapped before a file of this type can be imported."""
        if file_type not in REQUIRED_GROUPS:
            raise UnknownFileTypeError(file_type, list(FILE_TYPES))
        return [f for f in fields_for_groups(REQUIRED_GROUPS[file_type]) if f.required]

    def suggest_mappings(
        self,
        headers: list[str],
        sample_rows: list[Any],
        file_type: str,
    ) -> list[ColumnMatch]:
        """
        Propose a field for every header.

        Args:
            headers: Spreadsheet column names, in file order
            sample_rows: A few data rows keyed by header (non-dict rows are skipped)
            file_type: invoice_aging, payments or accounts

        Returns:
            One ColumnMatch per header

        Raises:
            UnknownFileTypeError: If file_type is not supported
            TooManyHeadersError: If headers exceed the configured cap
        """
        if len(headers) > self.max_headers:
            raise TooManyHeadersError(len(headers), self.max_headers)

        candidates = self.get_fields(file_type)

        logger.info(
            "column_mapping_requested",
            header_count=len(headers),
            sample_count=len(sample_rows),
            file_type=file_type,
        )

        matches = map_columns(headers, sample_rows, candidates)

        for match in matches:
            logger.debug(
                "column_matched",
                file_column=match.file_column,
                field_key=match.field_key,
                confidence=round(match.confidence, 3),
                inferred_type=match.inferred_type,
            )

        logger.info(
            "column_mapping_completed",
            file_type=file_type,
            mapped=sum(1 for m in matches if m.field_key),
            unmapped=sum(1 for m in matches if not m.field_key),
        )

        return matches

    def validate_mappings(
        self,
        file_type: str,
        mappings: list[tuple[str, Optional[str]]],
    ) -> dict:
        """
        Check confirmed mappings before import.

        Args:
            file_type: Upload file type
            mappings: (file_column, field_key) pairs, field_key None if skipped

        Returns:
            Dict with valid flag, missing required fields, duplicated and
            unknown field keys
        """
        required = self.get_required_fields(file_type)
        allowed = {f.key for f in self.get_fields(file_type)}

        seen: dict[str, list[str]] = {}
        for file_column, field_key in mappings:
            if field_key:
                seen.setdefault(field_key, []).append(file_column)

        missing = [
            {"key": f.key, "label": f.label}
            for f in required
            if f.key not in seen
        ]
        duplicates = [
            {"key": key, "fileColumns": columns}
            for key, columns in seen.items()
            if len(columns) > 1
        ]
        unknown = [key for key in seen if key not in allowed]

        valid = not missing and not duplicates and not unknown
        if not valid:
            logger.info(
                "mapping_validation_failed",
                file_type=file_type,
                missing=[m["key"] for m in missing],
                duplicates=[d["key"] for d in duplicates],
                unknown=unknown,
            )

        return {
            "valid": valid,
            "missingFields": missing,
            "duplicateFields": duplicates,
            "unknownFields": unknown,
        }


# Singleton instance
_column_mapping_service: Optional[ColumnMappingService] = None


def get_column_mapping_service() -> ColumnMappingService:
    """Get or create ColumnMappingService instance."""
    global _column_mapping_service
    if _column_mapping_service is None:
        _column_mapping_service = ColumnMappingService()
    return _column_mapping_service

"""
Column mapping models.

Request and response shapes for the Data Center mapping endpoints.
"""

from typing import Any, Optional
from pydantic import Field

from config import FileType
from models.base import BaseSchema


# ===================
# AI MAPPING
# ===================

class ColumnMappingRequest(BaseSchema):
    """Headers and sample rows of a spreadsheet to map."""
    headers: list[str] = Field(description="Column names in file order")
    sample_rows: list[Any] = Field(description="A few data rows keyed by header; non-object entries are ignored")
    file_type: FileType


class ColumnMappingResult(BaseSchema):
    """Proposed field for one column."""
    file_column: str
    field_key: Optional[str] = None
    confidence: float = Field(ge=0.0, le=1.0, description="Similarity score 0-1")


class ColumnMappingResponse(BaseSchema):
    mappings: list[ColumnMappingResult]


class UploadMappingResponse(BaseSchema):
    """Mapping proposed for an uploaded spreadsheet."""
    headers: list[str]
    total_rows: int
    sample_rows: list[dict[str, Any]]
    mappings: list[ColumnMappingResult]


# ===================
# FIELD CATALOG
# ===================

class FieldDefinitionResponse(BaseSchema):
    key: str
    label: str
    grouping: str
    aliases: list[str]
    required: bool = False


class FieldCatalogResponse(BaseSchema):
    file_type: FileType
    fields: list[FieldDefinitionResponse]


# ===================
# CONFIRMED MAPPINGS
# ===================

class MappingAssignment(BaseSchema):
    """A user-confirmed column assignment (field_key None = skip column)."""
    file_column: str
    field_key: Optional[str] = None


class ValidateMappingsRequest(BaseSchema):
    file_type: FileType
    mappings: list[MappingAssignment]


class MissingField(BaseSchema):
    key: str
    label: str


class DuplicateField(BaseSchema):
    key: str
    file_columns: list[str]


class ValidateMappingsResponse(BaseSchema):
    valid: bool
    missing_fields: list[MissingField] = Field(default_factory=list)
    duplicate_fields: list[DuplicateField] = Field(default_factory=list)
    unknown_fields: list[str] = Field(default_factory=list)


# ===================
# IMPORT PREVIEW
# ===================

class ImportPreviewRequest(BaseSchema):
    file_type: FileType
    rows: list[dict[str, Any]]
    mappings: list[MappingAssignment]


class MappedColumn(BaseSchema):
    file_column: str
    field_key: str
    label: str


class PreviewRow(BaseSchema):
    row_index: int
    values: dict[str, Any]
    issues: list[str] = Field(default_factory=list)


class ImportPreviewResponse(BaseSchema):
    total_rows: int
    mapped_columns: list[MappedColumn]
    rows_with_issues: int
    rows: list[PreviewRow]

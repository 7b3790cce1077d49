"""
Pydantic models for validation and serialization.
"""

from models.base import BaseSchema
from models.column_mapping import (
    ColumnMappingRequest,
    ColumnMappingResult,
    ColumnMappingResponse,
    UploadMappingResponse,
    FieldDefinitionResponse,
    FieldCatalogResponse,
    MappingAssignment,
    ValidateMappingsRequest,
    ValidateMappingsResponse,
    ImportPreviewRequest,
    ImportPreviewResponse,
)

__all__ = [
    # Base
    "BaseSchema",

    # Column mapping
    "ColumnMappingRequest",
    "ColumnMappingResult",
    "ColumnMappingResponse",
    "UploadMappingResponse",
    "FieldDefinitionResponse",
    "FieldCatalogResponse",
    "MappingAssignment",
    "ValidateMappingsRequest",
    "ValidateMappingsResponse",
    "ImportPreviewRequest",
    "ImportPreviewResponse",
]

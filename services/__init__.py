"""
Business logic services.

Each service handles one domain area.
"""

from services.column_mapping_service import (
    ColumnMappingService,
    ColumnMatch,
    get_column_mapping_service,
    map_columns,
)
from services.import_preview_service import build_preview

__all__ = [
    "ColumnMappingService",
    "ColumnMatch",
    "get_column_mapping_service",
    "map_columns",
    "build_preview",
]

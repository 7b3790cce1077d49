"""
Configuration module.

Exports:
    settings: Application settings instance
    get_settings: Function to get settings (for dependency injection)
    FIELD_DEFINITIONS: Canonical import field catalog
    FILE_TYPES: Supported upload file types
"""

from config.settings import settings, get_settings, Settings
from config.field_catalog import (
    FieldDefinition,
    FileType,
    FIELD_DEFINITIONS,
    FILE_TYPE_GROUPS,
    FILE_TYPES,
    REQUIRED_GROUPS,
    fields_for_groups,
    find_field,
)

__all__ = [
    # Settings
    "settings",
    "get_settings",
    "Settings",

    # Field catalog
    "FieldDefinition",
    "FileType",
    "FIELD_DEFINITIONS",
    "FILE_TYPE_GROUPS",
    "FILE_TYPES",
    "REQUIRED_GROUPS",
    "fields_for_groups",
    "find_field",
]

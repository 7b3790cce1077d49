"""
Base schemas for all models.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base for all schemas.

    Features:
        - camelCase field names on the wire (sampleRows, fileType, ...)
        - snake_case attribute names in Python
        - Validate on attribute assignment

    Strings are not trimmed: headers are echoed back exactly as sent.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True
    )

"""
Strict request-body validation.

Records declare their JSON fields (``fields``), bodies are checked against
them (``schema_validator``) and then decoded (``decoder``).
"""

from app.validation.decoder import loggable_json, parse_content, strict_load, unmarshal
from app.validation.errors import ErrorResponse, RequestBodyRejected
from app.validation.fields import (
    FieldDescriptor,
    HasFieldSchema,
    StrictRecord,
    expected_fields,
    field_descriptors,
    struct_json_fields,
)
from app.validation.schema_validator import ValidationOutcome, validate_json

__all__ = [
    "ErrorResponse",
    "FieldDescriptor",
    "HasFieldSchema",
    "RequestBodyRejected",
    "StrictRecord",
    "ValidationOutcome",
    "expected_fields",
    "field_descriptors",
    "loggable_json",
    "parse_content",
    "strict_load",
    "struct_json_fields",
    "unmarshal",
    "validate_json",
]

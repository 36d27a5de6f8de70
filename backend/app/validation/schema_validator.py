"""
Schema validation: the top-level keys of a request body must match the
target record's declared JSON fields exactly.

Use this before decoding when the JSON must contain exactly the fields of a
given record: first parse the bytes into a plain ``dict``, then call
``validate_json`` with the record type and that dict, and only decode into
the record once it reports ``VALID``.

Missing fields are checked first.  When a body is both missing a field and
carrying an extra one, only the missing field is reported.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from app.core.constants import ErrorKind, ValidationStatus
from app.validation.errors import ErrorResponse, new_error_response
from app.validation.fields import expected_fields, record_type


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of ``validate_json``; ``fields`` is empty when valid."""

    status: ValidationStatus
    struct_name: str
    fields: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == ValidationStatus.VALID

    @property
    def message(self) -> str:
        joined = ", ".join(self.fields)
        if self.status == ValidationStatus.MISSING_FIELDS:
            return f"JSON missing required fields for {self.struct_name}: {joined}"
        if self.status == ValidationStatus.UNEXPECTED_FIELDS:
            return f"JSON contains unexpected fields for {self.struct_name}: {joined}"
        return f"JSON for {self.struct_name} is valid"

    def to_error_response(self) -> ErrorResponse | None:
        """400 response describing the failure, or None when valid."""
        if self.status == ValidationStatus.MISSING_FIELDS:
            return new_error_response(self.message, 400, ErrorKind.MISSING_REQUIRED_FIELDS)
        if self.status == ValidationStatus.UNEXPECTED_FIELDS:
            return new_error_response(self.message, 400, ErrorKind.UNEXPECTED_FIELDS)
        return None


def missing_required_fields(struct_name: str, fields: Iterable[str]) -> ValidationOutcome:
    return ValidationOutcome(ValidationStatus.MISSING_FIELDS, struct_name, tuple(sorted(fields)))


def contains_unexpected_fields(struct_name: str, fields: Iterable[str]) -> ValidationOutcome:
    return ValidationOutcome(ValidationStatus.UNEXPECTED_FIELDS, struct_name, tuple(sorted(fields)))


def validate_json(
    struct_name: str,
    record: Any,
    content: Mapping[str, Any],
    optional_fields: Iterable[str] | None = None,
) -> ValidationOutcome:
    """
    Check that ``content`` has exactly the JSON fields ``record`` declares.

    Args:
        struct_name: Name used in messages; empty means the record's class name.
        record: Record class or instance implementing ``HasFieldSchema``.
        content: The request body parsed as an untyped dict.  Not modified.
        optional_fields: Keys allowed to be absent for this call.  Tag
            modifiers such as ``omitempty`` never make a field optional.

    Returns:
        ValidationOutcome: VALID, or the first failure class found.
    """
    if not struct_name:
        struct_name = record_type(record).__name__
    optional = set(optional_fields) if optional_fields is not None else set()

    expect = expected_fields(record)

    # Every declared field must be present unless the caller allows it absent.
    missing = [field for field in expect if field not in content and field not in optional]
    if missing:
        return missing_required_fields(struct_name, missing)

    unexpected = [field for field in content if field not in expect]
    if unexpected:
        return contains_unexpected_fields(struct_name, unexpected)

    return ValidationOutcome(ValidationStatus.VALID, struct_name)

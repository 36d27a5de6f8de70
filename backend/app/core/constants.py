"""Shared constants and enums used across the application."""

from enum import StrEnum


# Separator between a serialization tag's key name and its modifiers,
# e.g. "population,omitempty".
TAG_MODIFIER_SEPARATOR = ","


class ValidationStatus(StrEnum):
    """Outcome of checking a request body's top-level keys."""

    VALID = "VALID"
    MISSING_FIELDS = "MISSING_FIELDS"
    UNEXPECTED_FIELDS = "UNEXPECTED_FIELDS"


class ErrorKind(StrEnum):
    """Classes of request-body rejection."""

    MISSING_REQUIRED_FIELDS = "MISSING_REQUIRED_FIELDS"
    UNEXPECTED_FIELDS = "UNEXPECTED_FIELDS"
    DECODE_ERROR = "DECODE_ERROR"


class RecordKind(StrEnum):
    """Record collections held by the authorization engine."""

    POLICY = "policy"
    ROLE = "role"
    RESOURCE = "resource"
    USER = "user"
    GROUP = "group"
    CLIENT = "client"

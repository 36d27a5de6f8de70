"""
Decoding request bodies into records.

A body goes through two independent passes over the same bytes:

1. ``parse_content``: untyped ``dict`` so ``validate_json`` can see every
   top-level key, including unknown ones.
2. ``unmarshal``: typed decode into the record class.

``strict_load`` runs both with validation in between.  Every function here
returns an ``ErrorResponse`` on failure instead of raising.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import ValidationError

from app.core.config import settings
from app.core.constants import ErrorKind
from app.core.logging import get_logger
from app.validation.errors import ErrorResponse, new_error_response
from app.validation.fields import StrictRecord, record_type
from app.validation.schema_validator import validate_json

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=StrictRecord)

_WHITESPACE = re.compile(r"\s+")


def loggable_json(body: bytes, max_chars: int | None = None) -> str:
    """
    Render a raw body for a single log line.

    Invalid UTF-8 is replaced, whitespace runs collapse to one space and the
    result is cut at ``max_chars`` (default ``settings.LOG_PAYLOAD_MAX_CHARS``).
    """
    if max_chars is None:
        max_chars = settings.LOG_PAYLOAD_MAX_CHARS
    text = _WHITESPACE.sub(" ", body.decode("utf-8", errors="replace")).strip()
    if len(text) > max_chars:
        return f"{text[:max_chars]}...({len(text) - max_chars} more)"
    return text


def _decode_failure(body: bytes, type_name: str, cause: BaseException | None) -> ErrorResponse:
    msg = f"could not parse {type_name} from JSON; make sure input has correct types"
    response = new_error_response(msg, 400, ErrorKind.DECODE_ERROR, cause)
    logger.info(
        "tried to create record but input was invalid",
        record_type=type_name,
        offending_json=loggable_json(body),
    )
    return response


def parse_content(body: bytes, type_name: str) -> dict[str, Any] | ErrorResponse:
    """Parse a body into an untyped dict; anything but a JSON object fails."""
    try:
        content = json.loads(body)
    except (ValueError, RecursionError) as exc:
        return _decode_failure(body, type_name, exc)
    if not isinstance(content, dict):
        return _decode_failure(
            body, type_name, TypeError(f"expected a JSON object, got {type(content).__name__}")
        )
    return content


def unmarshal(body: bytes, target: type[RecordT]) -> RecordT | ErrorResponse:
    """
    Decode ``body`` straight into ``target``.

    On failure the 400 response names the record type but not the pydantic
    details, which stay in ``cause`` and the log.
    """
    cls = record_type(target)
    try:
        return cls.model_validate_json(body)
    except ValidationError as exc:
        return _decode_failure(body, cls.__name__, exc)


def strict_load(
    body: bytes,
    target: type[RecordT],
    *,
    optional_fields: Iterable[str] | None = None,
    struct_name: str = "",
) -> RecordT | ErrorResponse:
    """Parse, check the key set, then decode.  The first failure is returned."""
    cls = record_type(target)
    content = parse_content(body, cls.__name__)
    if isinstance(content, ErrorResponse):
        return content

    outcome = validate_json(struct_name, cls, content, optional_fields)
    if not outcome.ok:
        return outcome.to_error_response()

    return unmarshal(body, cls)

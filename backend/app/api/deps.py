"""Shared dependencies for API routes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

from fastapi import Request

from app.repositories.records import RecordStore
from app.validation.decoder import strict_load
from app.validation.errors import ErrorResponse, RequestBodyRejected
from app.validation.fields import StrictRecord

RecordT = TypeVar("RecordT", bound=StrictRecord)


def get_store(request: Request) -> RecordStore:
    """Return the application's record store."""
    return request.app.state.store


def want_pretty_json(request: Request) -> bool:
    """GET requests may ask for indented output with ?pretty or ?prettyJSON."""
    if request.method != "GET":
        return False
    params = request.query_params
    return params.get("pretty") == "true" or params.get("prettyJSON") == "true"


def strict_body(
    target: type[RecordT],
    *,
    optional_fields: Iterable[str] | None = None,
    struct_name: str = "",
) -> Callable[[Request], Awaitable[RecordT]]:
    """
    Build a dependency that decodes the request body into ``target``.

    The body must carry exactly the record's JSON fields, minus
    ``optional_fields`` (the record's ``__optional_fields__`` when omitted).
    Anything else raises ``RequestBodyRejected`` with a 400 response.
    """
    allowed = frozenset(target.__optional_fields__ if optional_fields is None else optional_fields)

    async def decode_body(request: Request) -> RecordT:
        body = await request.body()
        result = strict_load(body, target, optional_fields=allowed, struct_name=struct_name)
        if isinstance(result, ErrorResponse):
            raise RequestBodyRejected(result)
        return result

    return decode_body

"""Group endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from app.api.deps import get_store, strict_body
from app.api.schemas.authz import Group
from app.api.v1.common import create_record, list_records, read_record
from app.core.constants import RecordKind
from app.repositories.records import RecordStore

router = APIRouter(prefix="/group", tags=["Groups"])


@router.get("/")
async def list_groups(request: Request, store: RecordStore = Depends(get_store)) -> Response:
    return list_records(request, store, RecordKind.GROUP)


@router.post("/")
async def create_group(
    request: Request,
    group: Group = Depends(strict_body(Group, struct_name="group")),
    store: RecordStore = Depends(get_store),
) -> Response:
    """Create a group from a body carrying exactly the Group fields."""
    return create_record(request, store, RecordKind.GROUP, group)


@router.get("/{name}")
async def read_group(name: str, request: Request, store: RecordStore = Depends(get_store)) -> Response:
    return read_record(request, store, RecordKind.GROUP, name)

"""User endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from app.api.deps import get_store, strict_body
from app.api.schemas.authz import User
from app.api.v1.common import create_record, list_records, read_record
from app.core.constants import RecordKind
from app.repositories.records import RecordStore

router = APIRouter(prefix="/user", tags=["Users"])


@router.get("/")
async def list_users(request: Request, store: RecordStore = Depends(get_store)) -> Response:
    """List stored user names."""
    return list_records(request, store, RecordKind.USER)


@router.post("/")
async def create_user(
    request: Request,
    user: User = Depends(strict_body(User, struct_name="user")),
    store: RecordStore = Depends(get_store),
) -> Response:
    """Register a user."""
    return create_record(request, store, RecordKind.USER, user)


@router.get("/{name}")
async def read_user(name: str, request: Request, store: RecordStore = Depends(get_store)) -> Response:
    return read_record(request, store, RecordKind.USER, name)

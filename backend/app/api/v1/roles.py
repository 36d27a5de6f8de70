"""Role endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from app.api.deps import get_store, strict_body
from app.api.schemas.authz import Role
from app.api.v1.common import create_record, list_records, read_record
from app.core.constants import RecordKind
from app.repositories.records import RecordStore

router = APIRouter(prefix="/role", tags=["Roles"])


@router.get("/")
async def list_roles(request: Request, store: RecordStore = Depends(get_store)) -> Response:
    """List the keys of every stored role."""
    return list_records(request, store, RecordKind.ROLE)


@router.post("/")
async def create_role(
    request: Request,
    role: Role = Depends(strict_body(Role, struct_name="role")),
    store: RecordStore = Depends(get_store),
) -> Response:
    """Create a role from a body carrying exactly the Role fields."""
    return create_record(request, store, RecordKind.ROLE, role)


@router.get("/{role_id}")
async def read_role(role_id: str, request: Request, store: RecordStore = Depends(get_store)) -> Response:
    return read_record(request, store, RecordKind.ROLE, role_id)

"""Resource hierarchy endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from app.api.deps import get_store, strict_body
from app.api.schemas.authz import Resource
from app.api.v1.common import create_record, list_records, read_record
from app.core.constants import RecordKind
from app.repositories.records import RecordStore

router = APIRouter(prefix="/resource", tags=["Resources"])


@router.get("/")
async def list_resources(request: Request, store: RecordStore = Depends(get_store)) -> Response:
    """List the keys of every stored resource."""
    return list_records(request, store, RecordKind.RESOURCE)


@router.post("/")
async def create_resource(
    request: Request,
    resource: Resource = Depends(strict_body(Resource, struct_name="resource")),
    store: RecordStore = Depends(get_store),
) -> Response:
    """Create a resource from a body carrying exactly the Resource fields."""
    return create_record(request, store, RecordKind.RESOURCE, resource)


@router.get("/{path:path}")
async def read_resource(path: str, request: Request, store: RecordStore = Depends(get_store)) -> Response:
    """Fetch a resource by its full path, e.g. /programs/open."""
    return read_record(request, store, RecordKind.RESOURCE, "/" + path.lstrip("/"))

"""OAuth client endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from app.api.deps import get_store, strict_body
from app.api.schemas.authz import Client
from app.api.v1.common import create_record, list_records, read_record
from app.core.constants import RecordKind
from app.repositories.records import RecordStore

router = APIRouter(prefix="/client", tags=["Clients"])


@router.get("/")
async def list_clients(request: Request, store: RecordStore = Depends(get_store)) -> Response:
    """List the keys of every stored client."""
    return list_records(request, store, RecordKind.CLIENT)


@router.post("/")
async def create_client(
    request: Request,
    client: Client = Depends(strict_body(Client, struct_name="client")),
    store: RecordStore = Depends(get_store),
) -> Response:
    """Create a client from a body carrying exactly the Client fields."""
    return create_record(request, store, RecordKind.CLIENT, client)


@router.get("/{client_id}")
async def read_client(client_id: str, request: Request, store: RecordStore = Depends(get_store)) -> Response:
    return read_record(request, store, RecordKind.CLIENT, client_id)

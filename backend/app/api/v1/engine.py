"""
Engine endpoints: whole-state views of the authorization engine.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from app.api.deps import get_store
from app.api.errors import render_json
from app.repositories import records as record_repository
from app.repositories.records import RecordStore

router = APIRouter(prefix="/engine", tags=["Engine"])


@router.get("/")
async def serialize_engine(request: Request, store: RecordStore = Depends(get_store)) -> Response:
    """Dump every stored record.  Add ?pretty=true for indented output."""
    return render_json(request, record_repository.serialize_store(store))

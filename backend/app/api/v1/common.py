"""Create/read helpers shared by the record routers."""

from __future__ import annotations

from fastapi import HTTPException, Request, status
from starlette.responses import Response

from app.api.errors import render_json
from app.core.constants import RecordKind
from app.core.logging import get_logger
from app.repositories import records as record_repository
from app.repositories.records import RecordConflictError, RecordNotFoundError, RecordStore
from app.validation.fields import StrictRecord

logger = get_logger(__name__)


def create_record(
    request: Request,
    store: RecordStore,
    kind: RecordKind,
    record: StrictRecord,
) -> Response:
    """Store a decoded record; 409 when the key is taken."""
    try:
        key = record_repository.add_record(store, kind, record)
    except RecordConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc

    logger.info("Record created", kind=kind, key=key)
    return render_json(
        request,
        {"created": record.model_dump(by_alias=True)},
        status.HTTP_201_CREATED,
    )


def read_record(request: Request, store: RecordStore, kind: RecordKind, key: str) -> Response:
    try:
        record = record_repository.get_record(store, kind, key)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return render_json(request, record.model_dump(by_alias=True))


def list_records(request: Request, store: RecordStore, kind: RecordKind) -> Response:
    keys = record_repository.list_keys(store, kind)
    return render_json(request, {record_repository.COLLECTION_NAMES[kind]: keys})

"""Policy endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from app.api.deps import get_store, strict_body
from app.api.schemas.authz import Policy
from app.api.v1.common import create_record, list_records, read_record
from app.core.constants import RecordKind
from app.repositories.records import RecordStore

router = APIRouter(prefix="/policy", tags=["Policies"])


@router.get("/")
async def list_policies(request: Request, store: RecordStore = Depends(get_store)) -> Response:
    """List the keys of every stored policy."""
    return list_records(request, store, RecordKind.POLICY)


@router.post("/")
async def create_policy(
    request: Request,
    policy: Policy = Depends(strict_body(Policy, struct_name="policy")),
    store: RecordStore = Depends(get_store),
) -> Response:
    """Create a policy from a body carrying exactly the Policy fields."""
    return create_record(request, store, RecordKind.POLICY, policy)


@router.get("/{policy_id}")
async def read_policy(policy_id: str, request: Request, store: RecordStore = Depends(get_store)) -> Response:
    return read_record(request, store, RecordKind.POLICY, policy_id)

"""
Record repository: in-memory storage for authorization records.

Repository rules:
- Pure data-access logic only
- Every function receives the RecordStore explicitly
- Records arrive already validated and decoded
"""

from __future__ import annotations

import threading
from typing import Any

from app.api.schemas.authz import Client, Group, Policy, Resource, Role, User
from app.core.constants import RecordKind
from app.validation.fields import StrictRecord

COLLECTION_NAMES: dict[RecordKind, str] = {
    RecordKind.POLICY: "policies",
    RecordKind.ROLE: "roles",
    RecordKind.RESOURCE: "resources",
    RecordKind.USER: "users",
    RecordKind.GROUP: "groups",
    RecordKind.CLIENT: "clients",
}


class RecordStoreError(Exception):
    """Base exception for record store errors."""

    def __init__(self, message: str, *, kind: RecordKind, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(message)


class RecordConflictError(RecordStoreError):
    """A record with the same key already exists."""
    pass


class RecordNotFoundError(RecordStoreError):
    """No record exists under the requested key."""
    pass


class RecordStore:
    """Records keyed by kind then identifier.  Safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[RecordKind, dict[str, StrictRecord]] = {
            kind: {} for kind in RecordKind
        }

    def insert(self, kind: RecordKind, key: str, record: StrictRecord) -> None:
        """Store a record; raises RecordConflictError when the key is taken."""
        with self._lock:
            bucket = self._records[kind]
            if key in bucket:
                raise RecordConflictError(
                    f"{kind} with key {key!r} already exists", kind=kind, key=key
                )
            bucket[key] = record

    def find(self, kind: RecordKind, key: str) -> StrictRecord | None:
        with self._lock:
            return self._records[kind].get(key)

    def keys(self, kind: RecordKind) -> list[str]:
        with self._lock:
            return sorted(self._records[kind])

    def snapshot(self) -> dict[RecordKind, list[StrictRecord]]:
        """Copy of every bucket, taken under the lock."""
        with self._lock:
            return {kind: list(bucket.values()) for kind, bucket in self._records.items()}


def record_key(kind: RecordKind, record: StrictRecord) -> str:
    """Identifier a record is stored under."""
    if isinstance(record, (Policy, Role)):
        return record.id
    if isinstance(record, Resource):
        return resource_path(record)
    if isinstance(record, (User, Group)):
        return record.name
    if isinstance(record, Client):
        return record.client_id
    raise TypeError(f"no {kind} key for {type(record).__name__}")


def resource_path(resource: Resource) -> str:
    """Explicit path, or one built from the name under the root."""
    if resource.path:
        return resource.path
    return "/" + resource.name


def add_record(store: RecordStore, kind: RecordKind, record: StrictRecord) -> str:
    """Insert a new record and return its key."""
    key = record_key(kind, record)
    store.insert(kind, key, record)
    return key


def get_record(store: RecordStore, kind: RecordKind, key: str) -> StrictRecord:
    """Fetch a record by key."""
    record = store.find(kind, key)
    if record is None:
        raise RecordNotFoundError(f"{kind} with key {key!r} does not exist", kind=kind, key=key)
    return record


def list_keys(store: RecordStore, kind: RecordKind) -> list[str]:
    return store.keys(kind)


def serialize_store(store: RecordStore) -> dict[str, Any]:
    """Whole store as plain JSON-ready data, keyed by plural kind names."""
    snapshot = store.snapshot()
    return {
        COLLECTION_NAMES[kind]: [record.model_dump(by_alias=True) for record in records]
        for kind, records in snapshot.items()
    }

"""
Request-body rejection types.

Validation and decoding report failures as values: an ``ErrorResponse``
comes back to the caller instead of being raised.  Only the HTTP layer turns
one into an exception (``RequestBodyRejected``) so FastAPI can render it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.core.constants import ErrorKind


@dataclass
class ErrorResponse:
    """
    A failed request body, ready to send back to the client.

    Args:
        message: Human-readable explanation returned to the client.
        status: HTTP status code (400 for every body rejection).
        kind: Which class of rejection this is.
        cause: Underlying exception, kept for logging and chaining only.
            Never serialized.
    """

    message: str
    status: int
    kind: ErrorKind
    cause: BaseException | None = None

    def to_dict(self) -> dict[str, Any]:
        """Client-facing body."""
        return {"error": {"message": self.message, "code": self.status}}


def new_error_response(
    message: str,
    status: int,
    kind: ErrorKind,
    cause: BaseException | None = None,
) -> ErrorResponse:
    return ErrorResponse(message=message, status=status, kind=kind, cause=cause)


class RequestBodyRejected(Exception):
    """Raised by the HTTP layer to hand an ``ErrorResponse`` to FastAPI."""

    def __init__(self, response: ErrorResponse) -> None:
        self.response = response
        super().__init__(response.message)

"""Exception handlers translating rejections into JSON responses."""

from __future__ import annotations

import json
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.responses import Response

from app.api.deps import want_pretty_json
from app.core.logging import get_logger
from app.validation.errors import RequestBodyRejected

logger = get_logger(__name__)


class PrettyJSONResponse(JSONResponse):
    """JSONResponse indented for human readers."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, allow_nan=False, indent=4).encode("utf-8")


def render_json(
    request: Request,
    content: Any,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> Response:
    """JSON response, indented when the request asked for pretty output."""
    response_class = PrettyJSONResponse if want_pretty_json(request) else JSONResponse
    return response_class(content=content, status_code=status_code, headers=headers)


async def handle_body_rejected(request: Request, exc: RequestBodyRejected) -> Response:
    response = exc.response
    logger.info(
        "request body rejected",
        method=request.method,
        path=request.url.path,
        kind=response.kind,
        message=response.message,
    )
    return render_json(request, response.to_dict(), response.status)


async def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
    return render_json(
        request,
        {"error": {"message": message, "code": exc.status_code}},
        exc.status_code,
        headers=exc.headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestBodyRejected, handle_body_rejected)
    app.add_exception_handler(HTTPException, handle_http_exception)

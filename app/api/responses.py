"""JSON reply helpers for API routes."""

from typing import Any, Mapping, Optional

from fastapi import Response, status
from fastapi.responses import JSONResponse

from api.errors import INTERNAL_ERROR, ErrorRegistry, HTTPError

X_LANGUAGE_HEADER = "X-Language"
CONTENT_TYPE_JSON = "application/json"


def reply_ok(
    status_code: int,
    body: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """Reply with a JSON body, or an empty JSON response when body is None."""
    if body is None:
        return Response(
            status_code=status_code,
            media_type=CONTENT_TYPE_JSON,
            headers=dict(headers or {}),
        )
    return JSONResponse(
        status_code=status_code, content=body, headers=dict(headers or {})
    )


def reply_error(
    err: Exception,
    language: str,
    registry: ErrorRegistry,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Reply with a localized error body.

    HTTPError values are sent as they are. Any other exception becomes an
    InternalError (500) whose details hold the exception text.
    """
    if not isinstance(err, HTTPError):
        err = registry.new_http_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR, language
        ).with_error_details(str(err))

    return JSONResponse(
        status_code=err.http_code,
        content=err.body.model_dump(mode="json"),
        headers=dict(headers or {}),
    )

"""Exception handlers mapping service errors to RFC 7807 problem responses."""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from inception.core.errors import InceptionError, InvalidArgumentError

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"

_HTTP_TITLES: dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    409: "Conflict",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


def problem_response(
    *,
    status: int,
    title: str,
    detail: str = "",
    instance: str = "",
    type_: str = "about:blank",
    headers: dict[str, str] | None = None,
    **extra: Any,
) -> JSONResponse:
    """Build a RFC 7807 JSON error response."""
    body: dict[str, Any] = {
        "type": type_,
        "title": title,
        "status": status,
        "detail": detail,
        "instance": instance,
    }
    body.update({k: v for k, v in extra.items() if v is not None})
    return JSONResponse(
        status_code=status, content=body, media_type=PROBLEM_MEDIA_TYPE, headers=headers,
    )


async def inception_error_handler(request: Request, exc: InceptionError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s: %s", type(exc).__name__, exc.detail)
    return problem_response(
        status=exc.status_code,
        title=exc.title,
        detail=exc.detail,
        instance=request.url.path,
        type_=f"urn:inception:error:{type(exc).__name__}",
        parameter=exc.parameter if isinstance(exc, InvalidArgumentError) else None,
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return problem_response(
        status=exc.status_code,
        title=_HTTP_TITLES.get(exc.status_code, "Error"),
        detail=str(exc.detail),
        instance=request.url.path,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request,
                                       exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return problem_response(
        status=400,
        title="Invalid Argument",
        detail="The request failed validation",
        instance=request.url.path,
        errors=errors,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions. Returns 500 with a problem body."""
    logger.exception("Unhandled error on %s", request.url.path)
    return problem_response(
        status=500,
        title="Internal Server Error",
        detail="An unexpected error occurred.",
        instance=request.url.path,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InceptionError, inception_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

"""Exception handlers producing the unified error JSON."""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.entrypoints.api.schemas.error import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def error_payload(code: str, message: str) -> Dict[str, Any]:
    """Build the JSON body for an error response."""
    response = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return jsonable_encoder(response)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render an HTTP error raised by routing or an endpoint."""
    code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(code=code, message=str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected failure and answer with a generic 500."""
    # The server error middleware re-raises after this response, and the
    # server logs the traceback, so only the summary line is written here.
    logger.error(
        "Unhandled exception on %s %s: %r", request.method, request.url.path, exc
    )
    return JSONResponse(
        status_code=500,
        content=error_payload(code="INTERNAL_ERROR", message="Internal server error."),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the unified error handlers on the application."""

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

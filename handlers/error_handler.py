"""
handlers/error_handler.py
--------------------------
Maps exceptions to the two response envelopes of the API:

    400 -> {"errors": [{"field": ..., "message": ...}, ...]}
    500 -> {"error": "Internal server error"}

Database error text is logged but never sent to the client.
"""

from typing import Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from utils.errors import PersistenceError, ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)

GENERIC_ERROR = "Internal server error"


def _body_errors(exc: RequestValidationError) -> list[dict]:
    """Describe a missing or undecodable body as a single field error."""
    kinds = {err.get("type") for err in exc.errors()}
    if "json_invalid" in kinds:
        message = "Request body is not valid JSON"
    else:
        message = "Request body must be a JSON object"
    return [{"field": "body", "message": message}]


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Turns any exception no handler claimed into the generic 500 envelope.

    Installed innermost, so the response still passes through the
    security-header and CORS middleware on its way out.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": GENERIC_ERROR},
            )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the exception handlers to `app`."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(f"Malformed body on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": _body_errors(exc)},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc} "
            f"(cause: {exc.__cause__!r})"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": GENERIC_ERROR},
        )


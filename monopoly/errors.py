from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
import logging

logger = logging.getLogger(__name__)

GENERIC_ERROR = {"error": "An internal server error occurred"}


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Log the full error server-side; the client only ever sees the generic body
    logger.error(
        "Error handling %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(status_code=500, content=GENERIC_ERROR)


class ErrorMiddleware(BaseHTTPMiddleware):
    """Turns any failure escaping a route into the generic 500.

    The failure stops here, so the server does not log it a second time.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await internal_error_handler(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    # Malformed ids and bodies get the same generic 500 as database failures
    app.add_exception_handler(RequestValidationError, internal_error_handler)
    app.add_middleware(ErrorMiddleware)

"""
Global exception handlers for FastAPI
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_api.core.exceptions import ApiException, ErrorBody, validation_messages

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, errors=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorBody(error=message, errors=errors or []).model_dump(),
    )


def register_exception_handlers(app: FastAPI):
    """Register all exception handlers to the FastAPI app"""

    @app.exception_handler(ApiException)
    async def api_exception_handler(request: Request, exc: ApiException):
        """Handle every ApiException subclass using its status code"""
        return error_response(exc.status_code, exc.message, exc.errors)

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed or missing input is a 400, reported before any mutation"""
        errors = validation_messages(exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Keep routing errors (404, 405) in the common envelope"""
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Store or I/O failures: log the details, answer a generic 500"""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server Error")

"""
Global exception handlers and custom exception classes.

Every error response has the body ``{"message": "..."}``:
- ResourceNotFoundException -> 404
- request validation errors -> 400
- InternalErrorException -> 500
"""
from typing import Optional
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

# Set up logging
logger = logging.getLogger(__name__)

# Resource path segment -> noun used in "Invalid <noun> data" messages
RESOURCE_NAMES = {
    "departments": "department",
    "doctors": "doctor",
    "patients": "patient",
    "appointments": "appointment",
    "medical-records": "medical record",
}


class AppException(Exception):
    """
    Base exception class for application-specific exceptions.
    """
    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class ResourceNotFoundException(AppException):
    """Exception raised when an id does not resolve to a stored record."""
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class InternalErrorException(AppException):
    """Exception raised when storage fails unexpectedly."""
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def resource_name(path: str) -> Optional[str]:
    """Name the resource a request path is aimed at, or None for other paths."""
    for segment in path.split("/"):
        if segment in RESOURCE_NAMES:
            return RESOURCE_NAMES[segment]
    return None


def _validation_message(request: Request) -> str:
    noun = resource_name(request.url.path)
    if noun is None:
        return "Validation error"
    return f"Invalid {noun} data"


async def app_exception_handler(request: Request, exc: AppException):
    """
    Handler for application-specific exceptions.

    Args:
        request: The request that caused the exception
        exc: The exception instance

    Returns:
        JSONResponse: Standardized error response
    """
    if exc.status_code >= 500:
        logger.error(f"Application error: {exc.detail}")
    else:
        logger.warning(f"Application error: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail}
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler for request validation exceptions.

    Bad bodies, path ids and query parameters all answer 400.

    Args:
        request: The request that caused the exception
        exc: The validation exception instance

    Returns:
        JSONResponse: Standardized error response with validation details
    """
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": _validation_message(request),
            "errors": jsonable_encoder(exc.errors())
        }
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handler for framework HTTP errors (unknown route, method not allowed).
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


# Register exception handlers with FastAPI app
def register_exception_handlers(app):
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

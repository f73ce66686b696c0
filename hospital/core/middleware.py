"""
Custom middleware for the FastAPI application.
"""
import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import uuid

from ..exceptions import resource_name

# Set up logging
logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for logging hospital API traffic.

    Each request is tagged with the resource it targets (``doctor``,
    ``medical record``...) so the log shows which records were read or
    written. Responses carry ``X-Request-ID`` and ``X-Process-Time`` headers.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        resource = resource_name(request.url.path) or "-"
        request.state.request_id = request_id
        request.state.resource = resource

        logger.info(f"Request {request_id} [{resource}] started: {request.method} {request.url.path}")
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"Request {request_id} [{resource}] failed: {request.method} {request.url.path} "
                f"- Error: {str(e)} - Duration: {time.time() - start_time:.4f}s"
            )
            raise

        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        response.headers["X-Request-ID"] = request_id

        # client and server errors log at warning
        log = logger.warning if response.status_code >= 400 else logger.info
        log(
            f"Request {request_id} [{resource}] completed: {request.method} {request.url.path} "
            f"- Status: {response.status_code} - Duration: {process_time:.4f}s"
        )

        return response


def setup_middlewares(app):
    """
    Set up all custom middlewares for the application.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(RequestLoggingMiddleware)

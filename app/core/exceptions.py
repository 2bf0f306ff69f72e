"""
Custom exceptions and exception handlers for the user service.
"""
from typing import Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException


class APIError(Exception):
    """Base class for API exceptions."""
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class NotFoundError(APIError):
    """Exception raised when a resource is not found."""
    def __init__(self, message: str = "Not Found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, message=message)


class BindError(Exception):
    """The listening socket could not be acquired. Fatal at startup."""
    def __init__(self, host: str, port: int, reason: str):
        super().__init__(f"cannot bind {host}:{port}: {reason}")
        self.host = host
        self.port = port
        self.reason = reason


def _error_response(
    status_code: int,
    message: str,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers
    )


# Exception handlers

async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handler for custom API exceptions."""
    if exc.status_code >= 500:
        logger.error(f"API Error: {exc.message}")
    else:
        logger.debug(f"API Error {exc.status_code}: {exc.message}")
    return _error_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Handler for framework HTTP errors.

    Only GET on the fixed routes exists, so a known path with another
    method is answered the same way as an unknown path.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.debug(f"No route for {request.method} {request.url.path}")
        return _error_response(status.HTTP_404_NOT_FOUND, "Not Found")

    logger.warning(f"HTTP Error {exc.status_code}: {exc.detail}")
    return _error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unhandled exceptions."""
    logger.opt(exception=exc).error(f"Unhandled Exception: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

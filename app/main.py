"""
Application factory for the user service.
"""
import time
from typing import Optional

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.api import api_router
from app.core.config import Settings, settings
from app.core.exceptions import (
    APIError,
    api_error_handler,
    http_error_handler,
    generic_error_handler
)
from app.core.logging import logger


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Only the routes in ``api_router`` are served: the docs UI and the
    OpenAPI document are switched off so every other path is a 404.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version=app_settings.VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False
    )
    app.state.settings = app_settings

    # Custom exception handlers
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Performance middleware to log request processing time
    @app.middleware("http")
    async def log_request_time(request: Request, call_next):
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as exc:
            response = await generic_error_handler(request, exc)
        process_time = time.time() - start_time

        logger.debug(f"Request {request.method} {request.url.path} processed in {process_time:.4f}s")
        response.headers["X-Process-Time"] = str(process_time)

        return response

    app.include_router(api_router)

    return app


app = create_app()

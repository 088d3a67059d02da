"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .api import api_router
from .web import web_router
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware
from lib.auth import API_KEY_HEADER, challenge_header
from lib.common.logging_config import get_logger
from lib.errors import AuthError


async def auth_error_handler(request: Request, exc: AuthError):
    """UI failures get a Basic challenge; API failures get a JSON body."""
    if exc.challenge:
        return PlainTextResponse(
            str(exc),
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": challenge_header()},
        )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": str(exc)},
    )


def create_app(
    store_instance,
    service_instance,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Mapping store instance
        service_instance: Service instance
        config: Configuration instance
        logger: Optional logger (defaults to the service logger)

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="Short links with a Basic-Auth UI and an API-key JSON API",
        version="1.0.0",
        # Every unmatched path is a short code; human docs live at /api-docs
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config
    app.state.logger = logger or get_logger()

    app.add_exception_handler(AuthError, auth_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=[API_KEY_HEADER, "Content-Type"],
    )

    # Last added runs first: forwarded headers are parsed before logging reads them
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ForwardedHeadersMiddleware)

    # API first so /api-short is matched before the short-code catch-all
    app.include_router(api_router, tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app

#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Usage:
    python app.py

Environment variables:
    BASIC_AUTH_USER / BASIC_AUTH_PASS - Credentials for the /short UI
    API_SECRET - Value required in the X-API-Key header for /api-short
    STORE_BACKEND - postgres (default), supabase or memory
    DATABASE_URL - PostgreSQL connection URL
    DATABASE_CREATE_TABLES - Set to '1' to create the schema on startup
    SUPABASE_URL / SUPABASE_KEY - Supabase project (STORE_BACKEND=supabase)
    BASE_URL - Fallback origin for short links
    PORT - Port to listen on
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError as ConfigError

from config import Config, load_config
from lib.database import create_store
from lib.service import URLShortenerService
from lib.shortcode import ShortCodeGenerator
from lib.common.logging_config import setup_logging
from web_app import create_app


def build_service(config: Config, logger) -> URLShortenerService:
    """Wire the configured store and code generator into a service."""
    store = create_store(config, logger=logger)
    generator = ShortCodeGenerator(default_length=config.short_code_length)
    return URLShortenerService(
        store=store,
        short_code_generator=generator,
        logger=logger,
        max_attempts=config.max_collision_attempts,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger
    logger.info(f"Starting URL shortener service with {app.state.store.name} store...")

    yield

    logger.info("Shutting down URL shortener service...")
    await app.state.service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    try:
        config = load_config()
    except ConfigError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        sys.exit(2)

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.safe_dump()}")

    service = build_service(config, logger)
    app = create_app(
        store_instance=service.store,
        service_instance=service,
        config=config,
        logger=logger,
    )
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    # Setup signal handlers for graceful shutdown
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Main entry point for the go links service.

Concurrency: a single uvicorn process serves all requests on one asyncio event
loop. The link mapping lives in that process, so only one worker is supported;
writes are serialized by the store's lock.

Usage:
    python app.py

Environment variables:
    DATA_FILE - Path of the JSON links file
    HOST - Host to bind to
    PORT - Port to listen on
    LINK_PREFIX - Prefix shown before shortcuts on the homepage
    LOG_LEVEL - Logging level
    LOG_FILE - Optional log file path
    LOG_JSON - Set to true for JSON log lines
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from golinks.service import LinkService
from golinks.storage.json_file import JSONFileLinkStore
from golinks.storage.exceptions import LinkStoreError
from golinks.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting go links service...")

    store = JSONFileLinkStore(file_path=config.data_file, logger=logger)

    # A bad or unreadable data file is not fatal: serve with an empty mapping
    try:
        await store.load()
    except LinkStoreError as e:
        logger.warning(f"Could not load links file {config.data_file}: {e}")

    app.state.service = LinkService(store=store, logger=logger)

    logger.info("Service started successfully")

    yield

    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Go Links Service")
    logger.info(f"Configuration: {config.model_dump()}")

    # Service is created in lifespan once the store has loaded
    app = create_app(
        service_instance=None,
        config=config,
    )

    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=1,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

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

"""Main FastAPI application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from kochbuch import __version__
from kochbuch.config import config
from kochbuch.logging_config import configure_logging

logger = logging.getLogger("kochbuch")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan manager."""
    logger.info("Kochbuch import service %s starting", __version__)
    yield
    logger.info("Kochbuch import service shutting down")


configure_logging(debug=config.DEBUG)


app = FastAPI(
    title="Kochbuch",
    description="Imports recipes from web pages into a normalized format",
    version=__version__,
    lifespan=lifespan,
)


access_logger = logging.getLogger("kochbuch.access")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests similar to the access log."""

    response = await call_next(request)
    client_host = "-"
    if request.client is not None:
        client_host = request.client.host or "-"

    access_logger.info(
        '%s - "%s %s" %s',
        client_host,
        request.method,
        request.url.path,
        response.status_code,
    )
    return response


# Health check endpoint
@app.get("/healthz")
async def healthz() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


# Import routes
from kochbuch.routes import imports  # noqa: E402

app.include_router(imports.router)

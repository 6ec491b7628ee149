# src/courier/main.py
"""Main entry point for the Courier application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from courier.api.v1 import (
    auth_router,
    messages_router,
    participants_router,
    system_router,
)
from courier.core.settings import settings
from courier.db.session import create_tables
from courier.services.errors import CourierError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Courier API",
    description="Authenticated messaging between registered participants",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(auth_router, prefix="/api/v1")
app.include_router(messages_router, prefix="/api/v1")
app.include_router(participants_router, prefix="/api/v1")
app.include_router(system_router, prefix="/api/v1")


@app.exception_handler(CourierError)
async def handle_courier_error(request: Request, exc: CourierError) -> JSONResponse:
    """Render domain failures as ``{"detail", "code"}`` JSON bodies."""
    logger.debug("%s %s failed: %s", request.method, request.url.path, exc.code)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
    )


@app.on_event("startup")
async def on_startup() -> None:
    create_tables()
    logger.info("%s %s started", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": "Courier API",
        "version": settings.app_version,
        "description": "Authenticated messaging between registered participants",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("courier.main:app", host="0.0.0.0", port=8000, reload=settings.debug)

"""
Task Manager API - Main Application

Wires configuration, MongoDB, routers and error handlers into the FastAPI app.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskapi.config import settings
from taskapi.database import database
from taskapi.auth import auth_router
from taskapi.tasks import tasks_router
from taskapi.errors import register_exception_handlers
from taskapi.security import validate_security_config

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    validate_security_config()
    await database.connect()

    yield

    await database.disconnect()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    description="API documentation for the Task Management system",
    docs_url="/api-docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns the service status and version information.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/", tags=["Root"])
async def root() -> dict:
    """Root endpoint with service information."""
    return {
        "message": "Hello, Task Manager!",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/api-docs" if settings.DOCS_ENABLED else "disabled",
    }


app.include_router(auth_router)
app.include_router(tasks_router)

# Registered last so they see failures from every route above
register_exception_handlers(app)

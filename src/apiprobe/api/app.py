"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apiprobe.api.routers import health, probes, scans
from apiprobe.core.config import get_settings
from apiprobe.core.logging import setup_logging
from apiprobe.version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler."""
    setup_logging()
    yield


app = FastAPI(
    title="apiprobe API",
    description="Heuristic security checks for a single HTTP API endpoint",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware - configured via APIPROBE_CORS_ORIGINS
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(probes.router, prefix="/api/v1", tags=["Probes"])
app.include_router(scans.router, prefix="/api/v1", tags=["Scans"])

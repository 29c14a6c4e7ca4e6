"""FastAPI application for the contentguard moderation service.

Provides REST API endpoints wrapping the contentguard package for:
- Full content checks (decision, category, severity, matched terms)
- Quick allow/review checks for inline validation
- Term catalog status
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

# Ensure the contentguard package is importable by adding the project root to sys.path.
_project_root = str(Path(__file__).resolve().parents[3])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contentguard import __version__
from contentguard.config import get_settings
from contentguard.observability import setup_logging
from web.backend.app.routers import moderation

_settings = get_settings()
setup_logging(_settings.log_level, _settings.log_format)

logger = logging.getLogger("contentguard.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the term catalog before the first request is served."""
    catalog = moderation.get_moderator().catalog
    logger.info("contentguard API started (catalog degraded: %s)", catalog.degraded)
    yield


app = FastAPI(
    title="contentguard API",
    description=(
        "REST API for rule-based moderation of user-generated content. "
        "Scores text for abuse, spam and off-topic content and returns "
        "an APPROVE, FLAG or BLOCK decision."
    ),
    version=__version__,
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(moderation.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "contentguard API",
        "version": __version__,
        "description": "Rule-based content moderation REST API",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
FastAPI Web Server - REST API for DocKernel.

This module exposes the pagination and preflight engine and its
collaborators as JSON endpoints:
- Pagination and single-page replacement
- Preflight checks before export
- Preview page slots per layout format
- Starter templates and compiled asset previews
- Layout presets
- Print-ready HTML export and share links

Usage:
    # Start server
    uvicorn api.main:app --host 0.0.0.0 --port 8000

    # Or run directly
    python -m api.main

API Documentation:
    - OpenAPI docs: http://localhost:8000/docs
    - ReDoc: http://localhost:8000/redoc

Key Endpoints:
    POST /api/paginate - Split content into pages
    POST /api/preflight - Check content before export
    POST /api/preview - Preview page slots for a format
    POST /api/export/html - Print-ready HTML

Configuration:
    Environment variables (or .env):
    - RATE_LIMIT: API rate limit (default: "120/minute")
    - CORS_ORIGINS: JSON list of allowed origins
    - PREFLIGHT_PAGE_TARGET: Page size target for preflight (default: 1800)
    - PRESET_FILE: Where layout presets are stored
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from pathlib import Path
import time
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from config.settings import settings
from config.logging_config import get_logger
logger = get_logger(__name__)

from api.layout_router import router as layout_router
from api.preset_router import router as preset_router
from api.export_router import router as export_router

VERSION = "1.0.0"


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="DocKernel API",
    description="Pagination and preflight engine for print layouts",
    version=VERSION
)

# Rate limiting (configurable via RATE_LIMIT env var), per client IP
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit]
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(layout_router)
app.include_router(preset_router)
app.include_router(export_router)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "version": VERSION,
        "timestamp": time.time()
    }


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    settings.print_config()
    logger.info("Starting DocKernel API Server...")
    logger.info("API Documentation: http://localhost:8000/docs")

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")

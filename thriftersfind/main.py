# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from thriftersfind import __version__
from thriftersfind.config import settings
from thriftersfind.database import SessionLocal
from thriftersfind.schemas.common import HealthResponse
from thriftersfind.services import auth_service, seed_service

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup: make sure reference data exists and drop stale sessions
    db = SessionLocal()
    try:
        seed_service.seed_reference_data(db)
        removed = auth_service.cleanup_expired_sessions(db)
        logger.info(f"Startup complete, removed {removed} expired sessions")
    except Exception as e:
        logger.error(f"Error during startup housekeeping: {e}")
    finally:
        db.close()

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="ThriftersFind OMS",
    description="Order, inventory and warehouse management backend",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


# Import and include API router after it's created
from thriftersfind.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")

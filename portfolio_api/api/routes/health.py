"""Health & Greeting — liveness, readiness and the frontend's hello ping.

Invariants:
    - GET /api/hello and GET /api/health always return 200 if the process is up
    - GET /api/health/ready returns 503 if the database is unreachable

Design Decisions:
    - Readiness separate from liveness: a down database must not restart the
      process, since requests recover on their own once connectivity returns
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from portfolio_api.infrastructure.database import DatabaseSessionManager, get_db_manager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["health"])

SERVICE_NAME = "portfolio-api"
SERVICE_VERSION = "1.0.0"


@router.get("/hello")
async def hello():
    return {"message": "Halo dari backend!"}


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/health/ready")
async def readiness_check(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
):
    """Readiness probe — includes database connectivity."""
    if not await db_manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}

"""Health & Status Probes — service banner, liveness and readiness.

Invariants:
    - GET / and GET /status always return 200 if the process is up
    - GET /status/ready returns 503 if the database is unreachable
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from storefront.config import get_settings
from storefront.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def service_banner():
    """Liveness probe with the service name."""
    return {"ok": True, "service": get_settings().service_name}


@router.get("/status", status_code=status.HTTP_200_OK)
async def api_status():
    return {"message": "API Online"}


@router.get("/status/ready")
async def readiness_check():
    """Readiness probe — includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}

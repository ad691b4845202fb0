"""Service Probes — is the inventory process up, and can it reach its store.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the process serves requests,
      without touching the database
    - GET /api/v1/health/ready pings the pool on app.state.db; 503 when the
      pool is missing (startup not finished) or the ping fails
    - Probe requests are skipped by the request-logging middleware
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from inventory.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness(request: Request):
    return {
        "status": "up",
        "service": request.app.state.settings.app_name,
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness(request: Request):
    """Report whether record reads and writes can be served right now."""
    db: DatabaseSessionManager | None = getattr(request.app.state, "db", None)
    if db is None:
        return _unavailable("pool_not_started")
    if not await db.health_check():
        return _unavailable("database_unreachable")
    return {"status": "ready", "database": db.engine.dialect.name}


def _unavailable(reason: str) -> JSONResponse:
    logger.warning(f"Readiness check failed: {reason}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unavailable", "reason": reason},
    )

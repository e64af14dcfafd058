"""
Health Check Endpoints.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (database reachable)
"""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from notes_api.core.dependencies import DbSession
from notes_api.core.logging import get_logger
from notes_api.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running. No dependency checks.
    """
    return {"status": "healthy"}


@router.get("/health/ready", response_model=None)
async def readiness_check(db: DbSession) -> dict[str, Any] | JSONResponse:
    """
    Readiness check.

    Returns 200 when the database answers, 503 otherwise.
    """
    start = utc_now()
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "checks": {"database": {"status": "unhealthy", "error": str(e)}},
                "timestamp": utc_now().isoformat(),
            },
        )

    latency_ms = int((utc_now() - start).total_seconds() * 1000)
    return {
        "status": "healthy",
        "checks": {"database": {"status": "healthy", "latency_ms": latency_ms}},
        "timestamp": utc_now().isoformat(),
    }

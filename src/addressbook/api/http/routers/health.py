"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends, status
from starlette.responses import JSONResponse

from src.addressbook.api.http.app_data import ApplicationDependencies
from src.addressbook.api.http.deps import get_app_dependencies

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health() -> dict[str, str]:
    """Liveness probe; does not check dependencies."""
    return {"status": "healthy", "service": "api"}


@router.get("/ready", response_model=None)
def readiness(
    deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe; returns 503 when the database is unreachable."""
    db_healthy = deps.database_service.health_check()
    body = {
        "status": "ready" if db_healthy else "not_ready",
        "checks": {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": "sqlite" if deps.config.database.is_sqlite else "postgresql",
            }
        },
    }
    if not db_healthy:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body

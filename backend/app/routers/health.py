"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from app.core.exceptions import StoreError
from app.dependencies.store import get_credential_store
from app.services.credential_store import CredentialStore

router = APIRouter(tags=["Health"])


@router.get(
    "/test",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    summary="Reachability check",
)
async def reachability_check():
    """Plain text acknowledgement that the service is reachable."""
    return "Test router"


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(
    store: CredentialStore = Depends(get_credential_store),
):
    """
    Readiness check that verifies the database connection.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
    }

    try:
        await store.ping()
        checks["mongodb"] = "healthy"
    except StoreError as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }

"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Depends, status

from socialnet.database.connections import ConnectionGateway
from socialnet.dependencies.services import get_gateway

router = APIRouter(tags=["Health"])


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
async def readiness_check(gateway: ConnectionGateway = Depends(get_gateway)):
    """
    Readiness check that verifies the database connection.
    """
    result = await gateway.ping()
    mongodb = "healthy" if result.ok else f"unhealthy: {result.error.value}"

    return {
        "status": "healthy" if result.ok else "degraded",
        "checks": {"api": "healthy", "mongodb": mongodb},
    }

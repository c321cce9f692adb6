"""System router for non-versioned application endpoints.

Root and health endpoints. Both are side-effect free and never touch the
token store.
"""

from fastapi import APIRouter

from src.core.config import settings

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Service name, status and version.
    """
    return {
        "status": "operational",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        dict[str, str]: Health status and configured store backend.
    """
    return {"status": "healthy", "store": settings.token_store_backend}

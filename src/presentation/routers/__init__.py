"""External-facing routers.

- system_router: non-versioned root and health endpoints
- api/v1: versioned token resources (see src.presentation.routers.api.v1)
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]

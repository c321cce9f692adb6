"""API v1 routers.

RESTful resource-based endpoints. All endpoints use resource nouns, not
action verbs.

Resources:
    /api/v1/activation-tokens    - Token issuance
    /api/v1/token-validations    - Token validation (and activation)
    /api/v1/password-resets      - Password reset execution
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.activation_tokens import (
    activation_tokens_router,
)
from src.presentation.routers.api.v1.password_resets import password_resets_router
from src.presentation.routers.api.v1.token_validations import (
    token_validations_router,
)

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(activation_tokens_router)
v1_router.include_router(token_validations_router)
v1_router.include_router(password_resets_router)

__all__ = [
    "v1_router",
]

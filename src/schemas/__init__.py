"""Request/response schemas for API endpoints.

Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import ActivationTokenCreateRequest
"""

from src.schemas.token_schemas import (
    ActivationTokenCreateRequest,
    ActivationTokenCreateResponse,
    PasswordResetCreateRequest,
    PasswordResetCreateResponse,
    TokenValidationCreateRequest,
    TokenValidationCreateResponse,
)

__all__ = [
    "ActivationTokenCreateRequest",
    "ActivationTokenCreateResponse",
    "PasswordResetCreateRequest",
    "PasswordResetCreateResponse",
    "TokenValidationCreateRequest",
    "TokenValidationCreateResponse",
]

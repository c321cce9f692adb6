"""Infrastructure errors package.

Usage:
    from src.infrastructure.errors import StoreError, IdentityProviderError
"""

from src.infrastructure.errors.infrastructure_error import (
    INTERNAL_ERROR_MESSAGE,
    IdentityProviderError,
    InfrastructureError,
    StoreError,
)

__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "InfrastructureError",
    "StoreError",
    "IdentityProviderError",
]

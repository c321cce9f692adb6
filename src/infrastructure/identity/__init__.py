"""Identity provider adapters."""

from src.infrastructure.identity.firebase_identity_provider import (
    FirebaseIdentityProvider,
)

__all__ = ["FirebaseIdentityProvider"]

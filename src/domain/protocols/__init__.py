"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; none of them inherit
from the protocol classes.

Usage:
    from src.domain.protocols import TokenStoreProtocol, IdentityProviderProtocol
"""

from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.identity_provider_protocol import (
    IdentityProviderProtocol,
    IdentityUser,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.token_action_protocol import TokenActionProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.protocols.token_store_protocol import TokenStoreProtocol

__all__ = [
    "EmailProtocol",
    "IdentityProviderProtocol",
    "IdentityUser",
    "LoggerProtocol",
    "TokenActionProtocol",
    "TokenGenerationProtocol",
    "TokenStoreProtocol",
]

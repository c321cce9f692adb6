"""Data Transfer Objects (DTOs) for the application layer.

Usage:
    from src.application.dtos import ValidatedToken, ConsumedToken

Note:
    DTOs are not API schemas; the presentation layer maps them to
    Pydantic response models.
"""

from src.application.dtos.token_dtos import (
    ConsumedToken,
    PasswordResetResult,
    ValidatedToken,
)

__all__ = [
    "ConsumedToken",
    "PasswordResetResult",
    "ValidatedToken",
]

"""Application services shared by the token command handlers."""

from src.application.services.set_password_action import SetPasswordAction
from src.application.services.token_lifecycle_manager import (
    TokenLifecycleManager,
    mask_token,
)

__all__ = ["SetPasswordAction", "TokenLifecycleManager", "mask_token"]

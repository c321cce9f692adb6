"""Token purpose enum.

A token is issued for exactly one privileged action.
"""

from enum import Enum


class TokenPurpose(str, Enum):
    """What a one-time token authorizes.

    Values:
        ACTIVATION: Prove control of the email before activating the account.
        PASSWORD_RESET: Prove control of the email before setting a new password.
    """

    ACTIVATION = "activation"
    PASSWORD_RESET = "password_reset"

    @classmethod
    def values(cls) -> list[str]:
        """Get all purpose values as strings."""
        return [purpose.value for purpose in cls]

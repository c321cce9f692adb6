"""Centralized constants for internal implementation details.

Values here are fixed by the token format or by the storage layout and
are not meant to vary between deployments. Tunable values (validity
window, attempt bound, email domain) live in `src/core/config.py`.

Example:
    >>> from src.core.constants import TOKEN_MIN_VALUE, TOKEN_MAX_VALUE
    >>> TOKEN_MAX_VALUE - TOKEN_MIN_VALUE + 1
    900000
"""

# =============================================================================
# Token Format
# =============================================================================

TOKEN_LENGTH: int = 6
"""Number of digits in a one-time token."""

TOKEN_MIN_VALUE: int = 100_000
"""Smallest token value (lowest 6-digit number, no leading zero)."""

TOKEN_MAX_VALUE: int = 999_999
"""Largest token value."""


# =============================================================================
# Storage Layout
# =============================================================================

DEFAULT_TOKEN_COLLECTION: str = "activationTokens"
"""Firestore collection holding token documents, keyed by token value."""

REDIS_TOKEN_KEY_PREFIX: str = "carona:tokens"
"""Key prefix for token records in Redis."""


# =============================================================================
# Logging
# =============================================================================

MASKED_TOKEN_VISIBLE_DIGITS: int = 2
"""Digits of a token left visible when it must appear in a log line."""

"""Domain enums package.

Usage:
    from src.domain.enums import TokenPurpose
"""

from src.domain.enums.token_purpose import TokenPurpose

__all__ = ["TokenPurpose"]

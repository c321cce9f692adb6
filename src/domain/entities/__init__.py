"""Domain entities.

Usage:
    from src.domain.entities import TokenRecord
"""

from src.domain.entities.token_record import TokenRecord

__all__ = ["TokenRecord"]

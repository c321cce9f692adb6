"""Core enums package.

Usage:
    from src.core.enums import ErrorCode, ErrorKind, Environment
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode
from src.core.enums.error_kind import ErrorKind

__all__ = ["ErrorCode", "ErrorKind", "Environment"]

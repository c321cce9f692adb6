"""Core shared kernel.

Foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error classes and error codes
- Validation helpers for request preconditions

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode, ErrorKind
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "ErrorKind",
    "Failure",
    "Result",
    "Success",
    "ValidationError",
]

"""Stable error kinds reported to API clients.

Every ErrorCode belongs to exactly one kind. Clients branch on the kind;
the code gives the specific reason.

Kinds:
- INVALID_ARGUMENT: missing or malformed input, bad email domain, weak password
- NOT_FOUND: unknown token, or no identity for the email
- PERMISSION_DENIED: token/email mismatch, token already used
- DEADLINE_EXCEEDED: token expired
- RESOURCE_EXHAUSTED: could not find a free token value
- INTERNAL: unexpected store or identity-provider failure
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Coarse error classification shared by all layers."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    DEADLINE_EXCEEDED = "deadline_exceeded"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    INTERNAL = "internal"

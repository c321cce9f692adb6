"""Infrastructure-specific error codes.

These are internal codes for tracking infrastructure failures.
They are mapped to domain ErrorCode (INTERNAL_ERROR) when flowing to
the domain layer.

Categories:
- Token store errors (STORE_*)
- Identity provider errors (IDENTITY_*)
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes.

    These are internal codes for tracking infrastructure failures.
    They are logged, never returned to clients.
    """

    # Token store errors
    STORE_READ_ERROR = "store_read_error"
    STORE_WRITE_ERROR = "store_write_error"
    STORE_DELETE_ERROR = "store_delete_error"
    STORE_DATA_ERROR = "store_data_error"

    # Identity provider errors
    IDENTITY_LOOKUP_ERROR = "identity_lookup_error"
    IDENTITY_UPDATE_ERROR = "identity_update_error"

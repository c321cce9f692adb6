"""One-time token request/response schemas.

Pydantic models for the HTTP layer. Field names on the wire are the
camelCase names the mobile app already sends (markAsUsed, newPassword);
snake_case names are accepted too.

Request fields are typed Any on purpose: presence, type and format are
checked by the command handlers, which report each problem with its own
error code instead of a generic validation failure.

RESTful Endpoints:
    POST /api/v1/activation-tokens   - Create token (issue)
    POST /api/v1/token-validations   - Create validation (validate / activate)
    POST /api/v1/password-resets     - Create reset (consume token)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Issue
# =============================================================================


class ActivationTokenCreateRequest(_CamelModel):
    """Request schema for token issuance.

    POST /api/v1/activation-tokens
    Returns: 201 Created
    """

    email: Any = Field(
        None,
        description="Institutional email address",
        examples=["aluno@cs.udf.edu.br"],
    )
    purpose: Any = Field(
        "activation",
        description='"activation" or "password_reset"',
        examples=["activation"],
    )


class ActivationTokenCreateResponse(_CamelModel):
    """Response schema for token issuance (201 Created).

    Timestamps are epoch milliseconds.
    """

    success: bool = True
    token: str = Field(..., description="6-digit one-time code", examples=["482913"])
    email: str
    purpose: str
    is_used: bool = False
    created_at: int = Field(..., description="Issuance time (epoch ms)")
    expires_at: int = Field(..., description="Expiry time (epoch ms)")


# =============================================================================
# Validate
# =============================================================================


class TokenValidationCreateRequest(_CamelModel):
    """Request schema for token validation.

    POST /api/v1/token-validations
    Returns: 200 OK
    """

    email: Any = Field(None, examples=["aluno@cs.udf.edu.br"])
    token: Any = Field(None, examples=["482913"])
    mark_as_used: Any = Field(
        False,
        description="Spend the token when validation succeeds",
    )


class TokenValidationCreateResponse(_CamelModel):
    """Response schema for a successful validation."""

    success: bool = True
    is_valid: bool = True
    token: str
    email: str
    purpose: str
    expires_at: int = Field(..., description="Expiry time (epoch ms)")


# =============================================================================
# Password reset
# =============================================================================


class PasswordResetCreateRequest(_CamelModel):
    """Request schema for password reset.

    POST /api/v1/password-resets
    Returns: 200 OK
    """

    email: Any = Field(None, examples=["aluno@cs.udf.edu.br"])
    token: Any = Field(None, examples=["482913"])
    new_password: Any = Field(None, examples=["n3w-passw0rd"])


class PasswordResetCreateResponse(_CamelModel):
    """Response schema for a successful password reset."""

    success: bool = True
    message: str = "Password reset successfully"

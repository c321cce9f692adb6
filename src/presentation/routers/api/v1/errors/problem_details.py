"""RFC 9457 Problem Details for HTTP APIs.

Structured error responses as Pydantic models. Next to the standard
members every body carries the error kind, the stable error code and
success=false, the fields the mobile app branches on.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message

    Examples:
        >>> error = ErrorDetail(
        ...     field="email",
        ...     code="invalid_email",
        ...     message="Only @cs.udf.edu.br addresses are allowed",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        kind: Stable error kind (invalid_argument, not_found, ...)
        code: Stable error code (token_expired, weak_password, ...)
        success: Always False
        errors: Optional list of field-specific errors
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:3000/errors/token_expired",
        ...     title="Token Expired",
        ...     status=403,
        ...     detail="Token expired. Request a new code.",
        ...     instance="/api/v1/token-validations",
        ...     kind="deadline_exceeded",
        ...     code="token_expired",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:3000/errors/token_expired"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[403])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/token-validations"],
    )
    kind: str = Field(..., description="Error kind", examples=["deadline_exceeded"])
    code: str = Field(..., description="Error code", examples=["token_expired"])
    success: bool = Field(False, description="Always false for errors")
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )

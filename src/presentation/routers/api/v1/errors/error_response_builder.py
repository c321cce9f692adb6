"""Error response builder for RFC 9457 Problem Details.

Converts a DomainError from a Failure into a JSON response. The HTTP
status is chosen by the error kind; the body keeps the stable code.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCode, ErrorKind
from src.core.errors import DomainError
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorKind.DEADLINE_EXCEEDED: status.HTTP_403_FORBIDDEN,
    ErrorKind.RESOURCE_EXHAUSTED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_TITLE_BY_CODE: dict[ErrorCode, str] = {
    ErrorCode.MISSING_EMAIL: "Missing Email",
    ErrorCode.MISSING_FIELDS: "Missing Fields",
    ErrorCode.INVALID_FIELD_TYPE: "Invalid Field Type",
    ErrorCode.INVALID_EMAIL: "Invalid Email",
    ErrorCode.INVALID_PURPOSE: "Invalid Purpose",
    ErrorCode.WEAK_PASSWORD: "Weak Password",
    ErrorCode.TOKEN_NOT_FOUND: "Token Not Found",
    ErrorCode.TOKEN_MISMATCH: "Token Mismatch",
    ErrorCode.TOKEN_USED: "Token Already Used",
    ErrorCode.TOKEN_EXPIRED: "Token Expired",
    ErrorCode.TOKEN_SPACE_EXHAUSTED: "Token Space Exhausted",
    ErrorCode.USER_NOT_FOUND: "User Not Found",
    ErrorCode.INTERNAL_ERROR: "Internal Server Error",
}

GENERIC_INTERNAL_DETAIL = "Internal error. Try again later."


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> match result:
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(
        ...             error, request, get_trace_id()
        ...         )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert DomainError to RFC 9457 JSON response.

        Internal errors get a generic detail; store and provider messages
        never reach the client.

        Args:
            error: Error carried by a Failure
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        kind = error.kind
        status_code = ErrorResponseBuilder.get_status_code(kind)
        detail = (
            GENERIC_INTERNAL_DETAIL if kind == ErrorKind.INTERNAL else error.message
        )

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=_TITLE_BY_CODE.get(error.code, "Error"),
            status=status_code,
            detail=detail,
            instance=str(request.url.path),
            kind=kind.value,
            code=error.code.value,
            trace_id=trace_id,
        )

        field = getattr(error, "field", None)
        if field:
            problem.errors = [
                ErrorDetail(field=field, code=error.code.value, message=error.message)
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(kind: ErrorKind) -> int:
        """Map an error kind to its HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ErrorKind.DEADLINE_EXCEEDED)
            403
        """
        return _STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)

"""Global exception handlers for FastAPI application.

This module converts exceptions that escape the routes into RFC 9457
Problem Details responses with the same kind/code/success members as
handler failures.

Handlers:
    http_exception_handler: Converts HTTPException (404 route, 405 method)
    validation_exception_handler: Converts RequestValidationError (body is
        not a JSON object) to invalid_argument
    generic_exception_handler: Catches all unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.core.enums import ErrorCode, ErrorKind
from src.presentation.routers.api.v1.errors.error_response_builder import (
    GENERIC_INTERNAL_DETAIL,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# HTTP status code to (title, kind) mapping
_HTTP_STATUS_INFO: dict[int, tuple[str, ErrorKind]] = {
    400: ("Bad Request", ErrorKind.INVALID_ARGUMENT),
    403: ("Access Denied", ErrorKind.PERMISSION_DENIED),
    404: ("Resource Not Found", ErrorKind.NOT_FOUND),
    405: ("Method Not Allowed", ErrorKind.INVALID_ARGUMENT),
    415: ("Unsupported Media Type", ErrorKind.INVALID_ARGUMENT),
    500: ("Internal Server Error", ErrorKind.INTERNAL),
    503: ("Service Unavailable", ErrorKind.RESOURCE_EXHAUSTED),
}


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to RFC 9457 Problem Details response.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by routing or a dependency.

    Returns:
        JSONResponse with RFC 9457 ProblemDetails.
    """
    assert isinstance(exc, HTTPException)

    title, kind = _HTTP_STATUS_INFO.get(
        exc.status_code, ("Error", ErrorKind.INVALID_ARGUMENT)
    )
    slug = title.lower().replace(" ", "-")

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        kind=kind.value,
        code=slug.replace("-", "_"),
        trace_id=getattr(request.state, "trace_id", None),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 invalid_argument response.

    Request models accept any field type, so this only fires when the
    body is missing or is not a JSON object.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse with RFC 9457 ProblemDetails including field errors.
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p != "body"]
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "body",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{ErrorCode.MISSING_FIELDS.value}",
        title="Bad Request",
        status=status.HTTP_400_BAD_REQUEST,
        detail="Request body must be a JSON object with the required fields.",
        instance=str(request.url.path),
        kind=ErrorKind.INVALID_ARGUMENT.value,
        code=ErrorCode.MISSING_FIELDS.value,
        errors=field_errors or None,
        trace_id=getattr(request.state, "trace_id", None),
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and returns a generic 500 body; no stack trace or
    exception text reaches the client.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse with RFC 9457 ProblemDetails (500 Internal Server Error)
    """
    trace_id = getattr(request.state, "trace_id", None)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{ErrorCode.INTERNAL_ERROR.value}",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=GENERIC_INTERNAL_DETAIL,
        instance=str(request.url.path),
        kind=ErrorKind.INTERNAL.value,
        code=ErrorCode.INTERNAL_ERROR.value,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

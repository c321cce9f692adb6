"""Password resets resource router.

Endpoints:
    POST /api/v1/password-resets - Spend a token to set a new password
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import ResetPassword
from src.application.commands.handlers import ResetPasswordHandler
from src.core.container import get_reset_password_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.token_schemas import (
    PasswordResetCreateRequest,
    PasswordResetCreateResponse,
)

password_resets_router = APIRouter(
    prefix="/password-resets",
    tags=["Password Resets"],
)


@password_resets_router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=PasswordResetCreateResponse,
    responses={
        400: {"description": "Missing fields, invalid email or weak password", "model": ProblemDetails},
        403: {"description": "Token mismatched, used or expired", "model": ProblemDetails},
        404: {"description": "Unknown token or user", "model": ProblemDetails},
    },
    summary="Create password reset",
    description="Reset a password with a 6-digit code. The code is spent only if the reset succeeds.",
)
async def create_password_reset(
    request: Request,
    data: PasswordResetCreateRequest,
    handler: ResetPasswordHandler = Depends(get_reset_password_handler),
) -> PasswordResetCreateResponse | JSONResponse:
    """Create password reset (execute reset).

    POST /api/v1/password-resets → 200 OK

    Args:
        request: FastAPI request object.
        data: Email, token and newPassword.
        handler: Reset password handler (injected).

    Returns:
        PasswordResetCreateResponse on success.
        JSONResponse with RFC 9457 error on failure.
    """
    command = ResetPassword(
        email=data.email,
        token=data.token,
        new_password=data.new_password,
    )

    match await handler.handle(command):
        case Success(value=reset):
            return PasswordResetCreateResponse(message=reset.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error, request, get_trace_id()
            )

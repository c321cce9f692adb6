"""Token validations resource router.

Endpoints:
    POST /api/v1/token-validations - Validate a token, optionally spending it
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import ValidateToken
from src.application.commands.handlers import ValidateTokenHandler
from src.core.container import get_validate_token_handler
from src.core.result import Failure, Success
from src.core.timestamps import to_epoch_millis
from src.presentation.routers.api.middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.token_schemas import (
    TokenValidationCreateRequest,
    TokenValidationCreateResponse,
)

token_validations_router = APIRouter(
    prefix="/token-validations",
    tags=["Token Validations"],
)


@token_validations_router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=TokenValidationCreateResponse,
    responses={
        400: {"description": "Missing or invalid input", "model": ProblemDetails},
        403: {"description": "Token mismatched, used or expired", "model": ProblemDetails},
        404: {"description": "Unknown token", "model": ProblemDetails},
    },
    summary="Create token validation",
    description="Check a token against its email. markAsUsed spends it.",
)
async def create_token_validation(
    request: Request,
    data: TokenValidationCreateRequest,
    handler: ValidateTokenHandler = Depends(get_validate_token_handler),
) -> TokenValidationCreateResponse | JSONResponse:
    """Create token validation.

    POST /api/v1/token-validations → 200 OK

    Args:
        request: FastAPI request object.
        data: Email, token and markAsUsed flag.
        handler: Validate token handler (injected).

    Returns:
        TokenValidationCreateResponse on success.
        JSONResponse with RFC 9457 error on failure.
    """
    command = ValidateToken(
        email=data.email,
        token=data.token,
        mark_as_used=data.mark_as_used is True,
    )

    match await handler.handle(command):
        case Success(value=validated):
            return TokenValidationCreateResponse(
                token=validated.token,
                email=validated.email,
                purpose=validated.purpose.value,
                expires_at=to_epoch_millis(validated.expires_at),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error, request, get_trace_id()
            )

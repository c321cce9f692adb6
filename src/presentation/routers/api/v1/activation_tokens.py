"""Activation tokens resource router.

Endpoints:
    POST /api/v1/activation-tokens - Create a one-time token (issue)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import IssueToken
from src.application.commands.handlers import IssueTokenHandler
from src.core.container import get_issue_token_handler
from src.core.result import Failure, Success
from src.core.timestamps import to_epoch_millis
from src.presentation.routers.api.middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.token_schemas import (
    ActivationTokenCreateRequest,
    ActivationTokenCreateResponse,
)

activation_tokens_router = APIRouter(
    prefix="/activation-tokens",
    tags=["Activation Tokens"],
)


@activation_tokens_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ActivationTokenCreateResponse,
    responses={
        400: {"description": "Missing or invalid input", "model": ProblemDetails},
        503: {"description": "No free token value found", "model": ProblemDetails},
    },
    summary="Create activation token",
    description="Issue a 6-digit one-time code for an institutional email.",
)
async def create_activation_token(
    request: Request,
    data: ActivationTokenCreateRequest,
    handler: IssueTokenHandler = Depends(get_issue_token_handler),
) -> ActivationTokenCreateResponse | JSONResponse:
    """Create activation token.

    POST /api/v1/activation-tokens → 201 Created

    Args:
        request: FastAPI request object.
        data: Email and optional purpose.
        handler: Issue token handler (injected).

    Returns:
        ActivationTokenCreateResponse on success.
        JSONResponse with RFC 9457 error on failure.
    """
    result = await handler.handle(IssueToken(email=data.email, purpose=data.purpose))

    match result:
        case Success(value=record):
            return ActivationTokenCreateResponse(
                token=record.token,
                email=record.email,
                purpose=record.purpose.value,
                is_used=record.is_used,
                created_at=to_epoch_millis(record.created_at),
                expires_at=to_epoch_millis(record.expires_at),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error, request, get_trace_id()
            )

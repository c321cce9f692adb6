"""Token lifecycle manager: issue, validate and consume one-time tokens.

Flow (issue):
1. Check email presence, institutional domain and purpose
2. Draw a candidate value and create the record only if the key is free
3. Retry on collision up to the configured attempt bound

Flow (validate / consume), checks in this exact order:
1. Record exists                      -> TOKEN_NOT_FOUND
2. Record email equals supplied email -> TOKEN_MISMATCH
3. Record not used (validate only)    -> TOKEN_USED
4. Not expired                        -> TOKEN_EXPIRED

Consumption tolerates a record already flagged is_used by an earlier
validate-and-mark call, but never lets a second guarded action run:
the token is claimed (consumed_at) with a compare-and-set before the
action, released if the action fails, and finalized if it succeeds.

Architecture:
- Application service; depends only on domain protocols
- Stateless between calls; every mutation is one atomic store operation
- Store failures are returned unchanged (INTERNAL_ERROR)
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from src.application.dtos import ConsumedToken, ValidatedToken
from src.core.constants import MASKED_TOKEN_VISIBLE_DIGITS
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.core.timestamps import utc_now
from src.core.validation import validate_institutional_email, validate_required
from src.domain.entities import TokenRecord
from src.domain.enums import TokenPurpose
from src.domain.errors import token_error
from src.domain.protocols import (
    LoggerProtocol,
    TokenActionProtocol,
    TokenGenerationProtocol,
    TokenStoreProtocol,
)


def mask_token(token: str) -> str:
    """Hide all but the first digits of a token for log output."""
    visible = token[:MASKED_TOKEN_VISIBLE_DIGITS]
    return visible + "*" * max(len(token) - len(visible), 0)


class TokenLifecycleManager:
    """Owns creation, lookup and state transitions of token records.

    The store, generator and logger are injected once at process start
    (see src/core/container). A missing store is a construction error,
    not something checked on each request.

    Example:
        >>> manager = TokenLifecycleManager(
        ...     store=InMemoryTokenStore(),
        ...     generator=OtpTokenService(),
        ...     logger=get_logger(),
        ...     email_domain="@cs.udf.edu.br",
        ... )
        >>> result = await manager.issue("aluno@cs.udf.edu.br", "activation")
    """

    def __init__(
        self,
        *,
        store: TokenStoreProtocol,
        generator: TokenGenerationProtocol,
        logger: LoggerProtocol,
        email_domain: str,
        validity_minutes: int = 30,
        max_attempts: int = 10,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the manager with its collaborators.

        Args:
            store: Token store with atomic create/compare-and-set.
            generator: Source of candidate token values.
            logger: Structured logger.
            email_domain: Required email suffix (e.g. "@cs.udf.edu.br").
            validity_minutes: Token validity window.
            max_attempts: Candidate values tried before giving up.
            clock: Returns the current UTC time.

        Raises:
            ValueError: If a collaborator is missing or a bound is not positive.
        """
        if store is None:
            raise ValueError("TokenLifecycleManager requires a token store")
        if generator is None:
            raise ValueError("TokenLifecycleManager requires a token generator")
        if validity_minutes <= 0 or max_attempts <= 0:
            raise ValueError("validity_minutes and max_attempts must be positive")

        self._store = store
        self._generator = generator
        self._logger = logger
        self._email_domain = email_domain
        self._validity = timedelta(minutes=validity_minutes)
        self._max_attempts = max_attempts
        self._clock = clock

    # ------------------------------------------------------------------
    # Issue
    # ------------------------------------------------------------------

    async def issue(
        self, email: Any, purpose: Any = TokenPurpose.ACTIVATION
    ) -> Result[TokenRecord, DomainError]:
        """Create a new unused token for an email.

        Args:
            email: Owner email.
            purpose: TokenPurpose or its string value.

        Returns:
            Success(TokenRecord) with the stored record.
            Failure(ValidationError) for bad input.
            Failure(TokenError TOKEN_SPACE_EXHAUSTED) if every candidate collided.
            Failure(InfrastructureError) on store errors.
        """
        match validate_required({"email": email}, code=ErrorCode.MISSING_EMAIL):
            case Failure(error=err):
                return Failure(error=err)
        match validate_institutional_email(email, self._email_domain):
            case Failure(error=err):
                return Failure(error=err)
        match self._parse_purpose(purpose):
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=parsed_purpose):
                token_purpose = parsed_purpose

        created_at = self._clock()

        for attempt in range(1, self._max_attempts + 1):
            record = TokenRecord.issue(
                token=self._generator.generate_token(),
                email=email,
                purpose=token_purpose,
                created_at=created_at,
                validity=self._validity,
            )

            match await self._store.create_if_absent(record):
                case Failure(error=err):
                    self._logger.error(
                        "token_issue_store_failed",
                        email=email,
                        attempt=attempt,
                        error_code=err.code.value,
                    )
                    return Failure(error=err)
                case Success(value=True):
                    self._logger.info(
                        "token_issued",
                        email=email,
                        purpose=token_purpose.value,
                        expires_at=record.expires_at.isoformat(),
                        attempts=attempt,
                    )
                    return Success(value=record)
                case _:
                    self._logger.debug(
                        "token_collision",
                        token=mask_token(record.token),
                        attempt=attempt,
                    )

        self._logger.warning(
            "token_space_exhausted",
            email=email,
            attempts=self._max_attempts,
        )
        return Failure(
            error=token_error(
                ErrorCode.TOKEN_SPACE_EXHAUSTED, attempts=str(self._max_attempts)
            )
        )

    # ------------------------------------------------------------------
    # Validate
    # ------------------------------------------------------------------

    async def validate(
        self,
        email: Any,
        token: Any,
        *,
        consume_on_success: bool = False,
    ) -> Result[ValidatedToken, DomainError]:
        """Check a token strictly, optionally spending it.

        Args:
            email: Email supplied by the caller.
            token: Token value supplied by the caller.
            consume_on_success: Mark the token used (and stamp used_at) when
                every check passes.

        Returns:
            Success(ValidatedToken), or Failure with the first failing check.
        """
        match self._check_email_and_token(email, token):
            case Failure(error=err):
                return Failure(error=err)

        match await self._load_checked(email, token, allow_used=False):
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=loaded):
                record = loaded

        if consume_on_success:
            now = self._clock()
            match await self._store.compare_and_set(
                token,
                expected={"is_used": False},
                changes={"is_used": True, "used_at": now},
            ):
                case Failure(error=err):
                    self._logger.error(
                        "token_mark_used_failed",
                        email=email,
                        error_code=err.code.value,
                    )
                    return Failure(error=err)
                case Success(value=False):
                    # Another request spent the token between read and write.
                    return Failure(error=token_error(ErrorCode.TOKEN_USED))

        self._logger.info(
            "token_validated",
            email=email,
            token=mask_token(token),
            marked_as_used=consume_on_success,
        )
        return Success(
            value=ValidatedToken(
                token=record.token,
                email=record.email,
                purpose=record.purpose,
                expires_at=record.expires_at,
                marked_as_used=consume_on_success,
            )
        )

    # ------------------------------------------------------------------
    # Consume
    # ------------------------------------------------------------------

    async def consume(
        self,
        email: Any,
        token: Any,
        action: TokenActionProtocol,
    ) -> Result[ConsumedToken, DomainError]:
        """Spend a token to run a privileged action exactly once.

        A record already flagged is_used by validate(consume_on_success=True)
        is accepted. A record already consumed by a previous successful
        consume() is rejected with TOKEN_USED.

        Args:
            email: Email supplied by the caller.
            token: Token value supplied by the caller.
            action: Capability to run once the token is claimed.

        Returns:
            Success(ConsumedToken) after the action succeeded.
            Failure from the checks, from the store, or from the action. When
            the action fails the record is left as it was.
        """
        match self._check_email_and_token(email, token):
            case Failure(error=err):
                return Failure(error=err)

        match await self._load_checked(email, token, allow_used=True):
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=loaded):
                record = loaded

        if record.is_consumed:
            return Failure(error=token_error(ErrorCode.TOKEN_USED))

        claimed_at = self._clock()
        match await self._store.compare_and_set(
            token,
            expected={"consumed_at": None},
            changes={"consumed_at": claimed_at},
        ):
            case Failure(error=err):
                self._logger.error(
                    "token_claim_failed", email=email, error_code=err.code.value
                )
                return Failure(error=err)
            case Success(value=False):
                return Failure(error=token_error(ErrorCode.TOKEN_USED))

        try:
            action_result = await action.apply(email)
        except Exception:
            await self._release_claim(token, claimed_at, email)
            raise

        match action_result:
            case Failure(error=err):
                await self._release_claim(token, claimed_at, email)
                self._logger.warning(
                    "token_action_failed",
                    email=email,
                    token=mask_token(token),
                    error_code=err.code.value,
                )
                return Failure(error=err)

        match await self._store.compare_and_set(
            token,
            expected={"consumed_at": claimed_at},
            changes={"is_used": True, "used_at": record.used_at or claimed_at},
        ):
            case Failure(error=err):
                # The action already happened and the claim still blocks reuse.
                self._logger.error(
                    "token_finalize_failed", email=email, error_code=err.code.value
                )
            case Success(value=False):
                self._logger.error("token_finalize_conflict", email=email)

        self._logger.info(
            "token_consumed",
            email=email,
            token=mask_token(token),
            purpose=record.purpose.value,
        )
        return Success(
            value=ConsumedToken(
                token=record.token,
                email=record.email,
                purpose=record.purpose,
                consumed_at=claimed_at,
            )
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_email_and_token(
        self, email: Any, token: Any
    ) -> Result[None, ValidationError]:
        match validate_required({"email": email, "token": token}):
            case Failure(error=err):
                return Failure(error=err)
        match validate_institutional_email(email, self._email_domain):
            case Failure(error=err):
                return Failure(error=err)
        return Success(value=None)

    async def _load_checked(
        self, email: str, token: str, *, allow_used: bool
    ) -> Result[TokenRecord, DomainError]:
        match await self._store.get(token):
            case Failure(error=err):
                self._logger.error(
                    "token_lookup_failed", email=email, error_code=err.code.value
                )
                return Failure(error=err)
            case Success(value=None):
                return Failure(error=token_error(ErrorCode.TOKEN_NOT_FOUND))
            case Success(value=found):
                record: TokenRecord = found

        if not record.belongs_to(email):
            self._logger.warning(
                "token_email_mismatch", email=email, token=mask_token(token)
            )
            return Failure(error=token_error(ErrorCode.TOKEN_MISMATCH))

        if not allow_used and record.is_used:
            return Failure(error=token_error(ErrorCode.TOKEN_USED))

        if record.is_expired(self._clock()):
            return Failure(error=token_error(ErrorCode.TOKEN_EXPIRED))

        return Success(value=record)

    async def _release_claim(
        self, token: str, claimed_at: datetime, email: str
    ) -> None:
        match await self._store.compare_and_set(
            token,
            expected={"consumed_at": claimed_at},
            changes={"consumed_at": None},
        ):
            case Failure(error=err):
                self._logger.error(
                    "token_claim_release_failed",
                    email=email,
                    error_code=err.code.value,
                )
            case Success(value=False):
                self._logger.error("token_claim_release_conflict", email=email)

    @staticmethod
    def _parse_purpose(purpose: Any) -> Result[TokenPurpose, ValidationError]:
        if isinstance(purpose, TokenPurpose):
            return Success(value=purpose)
        if isinstance(purpose, str) and purpose in TokenPurpose.values():
            return Success(value=TokenPurpose(purpose))
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_PURPOSE,
                message='Invalid purpose. Use "activation" or "password_reset"',
                field="purpose",
            )
        )

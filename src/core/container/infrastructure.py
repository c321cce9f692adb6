"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Firebase app (Admin SDK, built once)
- Redis client (when TOKEN_STORE_BACKEND=redis)
- Token store (Firestore / Redis / in-memory)
- Identity provider (Firebase Auth)
- Token generator, email notifier
- Token lifecycle manager and sweep job

Every factory is an lru_cache singleton, so the collaborators are wired
once at startup and shared by all requests.
"""

from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    import firebase_admin
    from redis.asyncio import Redis

    from src.application.services import TokenLifecycleManager
    from src.domain.protocols import (
        EmailProtocol,
        IdentityProviderProtocol,
        LoggerProtocol,
        TokenGenerationProtocol,
        TokenStoreProtocol,
    )
    from src.infrastructure.jobs import SweepExpiredTokensJob


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging import ConsoleAdapter

    use_json = not settings.is_development
    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(use_json=use_json, level=level)


@lru_cache()
def get_firebase_app() -> "firebase_admin.App":
    """Initialize the Firebase Admin app once.

    Credentials come from FIREBASE_SERVICE_ACCOUNT (service account JSON)
    or, failing that, Application Default Credentials for
    FIREBASE_PROJECT_ID.

    Returns:
        Initialized firebase_admin.App.

    Raises:
        RuntimeError: If no credentials are configured or they can not be
            parsed. Raised at startup, never per request.
    """
    import json

    import firebase_admin
    from firebase_admin import credentials

    if not settings.has_firebase_credentials:
        raise RuntimeError(
            "Firebase credentials missing. Set FIREBASE_SERVICE_ACCOUNT or "
            "FIREBASE_PROJECT_ID."
        )

    options = (
        {"projectId": settings.firebase_project_id}
        if settings.firebase_project_id
        else None
    )

    if settings.firebase_service_account:
        try:
            cred = credentials.Certificate(
                json.loads(settings.firebase_service_account)
            )
        except ValueError as e:
            raise RuntimeError(
                f"FIREBASE_SERVICE_ACCOUNT is not a valid service account: {e}"
            ) from e
    else:
        cred = credentials.ApplicationDefault()

    app = firebase_admin.initialize_app(cred, options)
    get_logger().info("firebase_initialized", project_id=app.project_id)
    return app


@lru_cache()
def get_redis_client() -> "Redis":
    """Get the Redis client singleton used by the Redis token store.

    Raises:
        RuntimeError: If REDIS_URL is not configured.
    """
    from redis.asyncio import ConnectionPool, Redis

    if not settings.redis_url:
        raise RuntimeError("REDIS_URL is required when TOKEN_STORE_BACKEND=redis")

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=True,
        socket_connect_timeout=settings.store_timeout_seconds,
        socket_timeout=settings.store_timeout_seconds,
        retry_on_timeout=True,
        socket_keepalive=True,
    )
    return Redis(connection_pool=pool)


@lru_cache()
def get_token_store() -> "TokenStoreProtocol":
    """Get the token store singleton selected by TOKEN_STORE_BACKEND.

    Returns correct adapter based on the setting:
        - 'firestore': FirestoreTokenStore (production)
        - 'redis': RedisTokenStore
        - 'memory': InMemoryTokenStore (local development, tests)

    Raises:
        RuntimeError: If the chosen backend is missing its configuration.
    """
    backend = settings.token_store_backend

    if backend == "firestore":
        from firebase_admin import firestore_async

        from src.infrastructure.persistence import FirestoreTokenStore

        return FirestoreTokenStore(
            firestore_async.client(app=get_firebase_app()),
            collection=settings.token_collection,
            timeout=settings.store_timeout_seconds,
        )

    elif backend == "redis":
        from src.infrastructure.persistence import RedisTokenStore

        return RedisTokenStore(
            get_redis_client(),
            retention=timedelta(minutes=settings.token_retention_minutes),
        )

    else:
        from src.infrastructure.persistence import InMemoryTokenStore

        get_logger().warning("token_store_in_memory", environment=settings.environment.value)
        return InMemoryTokenStore()


@lru_cache()
def get_identity_provider() -> "IdentityProviderProtocol":
    """Get the Firebase Auth identity provider singleton."""
    from src.infrastructure.identity import FirebaseIdentityProvider

    return FirebaseIdentityProvider(get_firebase_app())


@lru_cache()
def get_token_generator() -> "TokenGenerationProtocol":
    """Get the 6-digit code generator singleton."""
    from src.infrastructure.security import OtpTokenService

    return OtpTokenService()


@lru_cache()
def get_email_notifier() -> "EmailProtocol | None":
    """Get the token email notifier, or None when notifications are off."""
    if not settings.email_notifications_enabled:
        return None

    from src.infrastructure.email import StubEmailService

    return StubEmailService(get_logger())


@lru_cache()
def get_token_lifecycle_manager() -> "TokenLifecycleManager":
    """Get the token lifecycle manager singleton.

    Wires the configured store, generator and logger with the token
    policy from settings.
    """
    from src.application.services import TokenLifecycleManager

    return TokenLifecycleManager(
        store=get_token_store(),
        generator=get_token_generator(),
        logger=get_logger(),
        email_domain=settings.institutional_email_domain,
        validity_minutes=settings.token_validity_minutes,
        max_attempts=settings.token_max_attempts,
    )


@lru_cache()
def get_sweep_job() -> "SweepExpiredTokensJob":
    """Get the expired token sweep job singleton."""
    from src.infrastructure.jobs import SweepExpiredTokensJob

    return SweepExpiredTokensJob(
        store=get_token_store(),
        logger=get_logger(),
        retention=timedelta(minutes=settings.token_retention_minutes),
        interval=timedelta(minutes=settings.token_sweep_interval_minutes),
    )

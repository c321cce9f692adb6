"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from src.core.container import get_logger, get_token_lifecycle_manager

The container is organized into modules:
- infrastructure: application-scoped singletons (logger, Firebase, stores,
  identity provider, manager, sweep job)
- handlers: request-scoped command handler factories for FastAPI Depends
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_email_notifier,
    get_firebase_app,
    get_identity_provider,
    get_logger,
    get_redis_client,
    get_sweep_job,
    get_token_generator,
    get_token_lifecycle_manager,
    get_token_store,
)

# Handlers
from src.core.container.handlers import (
    get_issue_token_handler,
    get_reset_password_handler,
    get_validate_token_handler,
)

__all__ = [
    # Infrastructure
    "get_email_notifier",
    "get_firebase_app",
    "get_identity_provider",
    "get_logger",
    "get_redis_client",
    "get_sweep_job",
    "get_token_generator",
    "get_token_lifecycle_manager",
    "get_token_store",
    # Handlers
    "get_issue_token_handler",
    "get_reset_password_handler",
    "get_validate_token_handler",
]

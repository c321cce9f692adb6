"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Settings load in the testing environment with the in-memory store
2. Async tests are marked automatically
3. Every test gets a fresh store, a controllable clock and a fresh manager
"""

import inspect
import os
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

# Settings are read at import time; pin the test environment first.
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("TOKEN_STORE_BACKEND", "memory")

import pytest  # noqa: E402

from src.application.services import TokenLifecycleManager  # noqa: E402
from src.core.enums import ErrorCode  # noqa: E402
from src.core.result import Failure, Success  # noqa: E402
from src.domain.protocols import IdentityUser  # noqa: E402
from src.infrastructure.errors import IdentityProviderError  # noqa: E402
from src.infrastructure.persistence import InMemoryTokenStore  # noqa: E402

EMAIL_DOMAIN = "@cs.udf.edu.br"
STUDENT_EMAIL = "aluno@cs.udf.edu.br"
OTHER_EMAIL = "outro@cs.udf.edu.br"
START_TIME = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


# =============================================================================
# Test doubles
# =============================================================================


class FixedClock:
    """Clock that only moves when a test advances it."""

    def __init__(self, now: datetime = START_TIME) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class SequenceGenerator:
    """Token generator that replays a fixed list of values, then repeats the last."""

    def __init__(self, *tokens: str) -> None:
        self._tokens = list(tokens)
        self.calls = 0

    def generate_token(self) -> str:
        token = self._tokens[min(self.calls, len(self._tokens) - 1)]
        self.calls += 1
        return token


class FakeIdentityProvider:
    """In-memory identity provider with switchable failures."""

    def __init__(self, *emails: str) -> None:
        self.users = {email: f"uid-{i}" for i, email in enumerate(emails, start=1)}
        self.passwords: dict[str, str] = {}
        self.fail_lookup = False
        self.fail_update = False

    async def find_user_by_email(self, email):
        if self.fail_lookup:
            return Failure(error=IdentityProviderError())
        uid = self.users.get(email)
        return Success(value=IdentityUser(uid=uid, email=email) if uid else None)

    async def set_password(self, uid, password):
        if self.fail_update:
            return Failure(error=IdentityProviderError())
        self.passwords[uid] = password
        return Success(value=None)


class RecordingAction:
    """TokenActionProtocol double that records calls and returns a fixed result."""

    def __init__(self, result=None) -> None:
        self.result = result if result is not None else Success(value=None)
        self.calls: list[str] = []

    async def apply(self, email):
        self.calls.append(email)
        return self.result


def failure_code(result) -> ErrorCode:
    """Return the error code of a Failure, failing the test otherwise."""
    assert isinstance(result, Failure), f"expected Failure, got {result!r}"
    return result.error.code


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def clock():
    """Controllable clock starting at START_TIME."""
    return FixedClock()


@pytest.fixture
def store():
    """Fresh in-memory token store."""
    return InMemoryTokenStore()


@pytest.fixture
def logger():
    """Mock logger implementing LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def generator():
    """Deterministic generator yielding distinct tokens."""
    return SequenceGenerator("482913", "573028", "691450", "705316")


@pytest.fixture
def manager(store, generator, logger, clock):
    """Token lifecycle manager over the in-memory store."""
    return TokenLifecycleManager(
        store=store,
        generator=generator,
        logger=logger,
        email_domain=EMAIL_DOMAIN,
        validity_minutes=30,
        max_attempts=10,
        clock=clock,
    )


@pytest.fixture
def identity_provider():
    """Identity provider that knows STUDENT_EMAIL."""
    return FakeIdentityProvider(STUDENT_EMAIL)


@pytest.fixture
def api_client(manager, identity_provider, logger):
    """TestClient whose handlers run against the in-memory manager.

    Overrides the container's handler factories so requests go through
    the real handlers and manager, with no Firebase or Redis involved.
    """
    from fastapi.testclient import TestClient

    from src.application.commands.handlers import (
        IssueTokenHandler,
        ResetPasswordHandler,
        ValidateTokenHandler,
    )
    from src.core.container import (
        get_issue_token_handler,
        get_reset_password_handler,
        get_validate_token_handler,
    )
    from src.main import app

    app.dependency_overrides[get_issue_token_handler] = lambda: IssueTokenHandler(
        manager=manager, logger=logger
    )
    app.dependency_overrides[get_validate_token_handler] = (
        lambda: ValidateTokenHandler(manager=manager)
    )
    app.dependency_overrides[get_reset_password_handler] = (
        lambda: ResetPasswordHandler(
            manager=manager,
            identity_provider=identity_provider,
            logger=logger,
            email_domain=EMAIL_DOMAIN,
            min_password_length=8,
        )
    )
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP contract tests using TestClient")
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)

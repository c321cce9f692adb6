"""
Main FastAPI application entry point.

Builds the application: trace middleware, CORS, RFC 9457 exception
handlers, system and v1 routers. The lifespan wires the token lifecycle
manager eagerly, so missing credentials fail at startup instead of on
the first request, and runs the expired-token sweep when enabled.

Run:
    uvicorn src.main:app --host 0.0.0.0 --port 3000
"""

import asyncio
import contextlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import (
    get_logger,
    get_sweep_job,
    get_token_lifecycle_manager,
)
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: build the manager (store, Firebase app), start the sweep task
    - Shutdown: cancel the sweep task

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    get_token_lifecycle_manager()
    logger.info(
        "app_started",
        environment=settings.environment.value,
        store=settings.token_store_backend,
        email_domain=settings.institutional_email_domain,
    )

    sweep_task: asyncio.Task[None] | None = None
    if settings.token_sweep_enabled:
        sweep_task = asyncio.create_task(get_sweep_job().run_forever())

    yield

    if sweep_task is not None:
        sweep_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweep_task
    logger.info("app_stopped")


app = FastAPI(
    title=settings.app_name,
    description="One-time token service for account activation and password reset",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)

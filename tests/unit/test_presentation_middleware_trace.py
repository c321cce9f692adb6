"""Unit tests for TraceMiddleware (request tracing).

Tests cover:
- Trace ID generation for new requests
- Trace ID reuse from the X-Trace-Id header
- structlog context binding during the request, cleanup afterwards
- get_trace_id() outside a request
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
import structlog

from src.presentation.routers.api.middleware import TraceMiddleware, get_trace_id


def _request(headers=None):
    request = MagicMock()
    request.headers = headers or {}
    return request


def _response():
    response = MagicMock()
    response.headers = {}
    return response


@pytest.mark.unit
class TestTraceMiddleware:
    async def test_generates_trace_id_when_missing(self):
        middleware = TraceMiddleware(app=MagicMock())
        call_next = AsyncMock(return_value=_response())

        response = await middleware.dispatch(_request(), call_next)

        UUID(response.headers["X-Trace-Id"])

    async def test_reuses_incoming_trace_id(self):
        middleware = TraceMiddleware(app=MagicMock())
        request = _request({"X-Trace-Id": "trace-abc"})

        response = await middleware.dispatch(request, AsyncMock(return_value=_response()))

        assert response.headers["X-Trace-Id"] == "trace-abc"
        assert request.state.trace_id == "trace-abc"

    async def test_trace_id_visible_during_request_only(self):
        middleware = TraceMiddleware(app=MagicMock())
        seen = {}

        async def call_next(request):
            seen["trace_id"] = get_trace_id()
            seen["context"] = structlog.contextvars.get_contextvars()
            return _response()

        await middleware.dispatch(_request({"X-Trace-Id": "trace-xyz"}), call_next)

        assert seen["trace_id"] == "trace-xyz"
        assert seen["context"]["trace_id"] == "trace-xyz"
        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()


@pytest.mark.unit
def test_get_trace_id_outside_request():
    assert get_trace_id() is None

"""Presentation layer - API endpoints and HTTP concerns.

The presentation layer is thin: it builds commands from requests,
dispatches them to handlers and translates Result values to HTTP
responses. It contains NO business logic.

Structure:
- routers/system.py: root and health endpoints
- routers/api/v1/: token resources and RFC 9457 error mapping
- routers/api/middleware/: trace ID middleware
"""

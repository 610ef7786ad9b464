"""Unit tests for server.server module."""

import pytest

from server import server
from server.request_context import RequestContextMiddleware


@pytest.mark.unit
def test_handler_is_fastapi_app():
    """Test that handler is a properly initialized FastAPI app."""
    assert server.handler is not None
    assert server.handler.title == "Greetings"
    assert hasattr(server.handler, "dependency_overrides")


@pytest.mark.unit
def test_cors_middleware_configured():
    middleware_classes = [m.cls.__name__ for m in server.handler.user_middleware]
    assert "CORSMiddleware" in middleware_classes


@pytest.mark.unit
def test_cors_only_allows_get():
    cors = next(
        m for m in server.handler.user_middleware if m.cls.__name__ == "CORSMiddleware"
    )
    assert cors.kwargs["allow_methods"] == ["GET"]


@pytest.mark.unit
def test_request_context_middleware_configured():
    middleware_classes = [m.cls for m in server.handler.user_middleware]
    assert RequestContextMiddleware in middleware_classes


@pytest.mark.unit
def test_api_router_included():
    route_paths = set(server.handler.openapi()["paths"])
    assert {
        "/health",
        "/version",
        "/api/greeting/timesensitive",
        "/api/greeting/timeinsensitive",
        "/api/greeting/locales",
    } <= route_paths


@pytest.mark.unit
def test_exception_handlers_registered():
    from modules.greetings.errors import (
        InvalidParameterError,
        LanguageNotSupportedError,
        MissingParameterError,
    )

    handlers = server.handler.exception_handlers
    for exc_class in (
        MissingParameterError,
        InvalidParameterError,
        LanguageNotSupportedError,
        Exception,
    ):
        assert exc_class in handlers

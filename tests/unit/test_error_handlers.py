"""
Unit tests for error handling

Tests:
- Model API error mapping to client-safe messages
- Global handlers render {"error": ...}
"""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from litellm.exceptions import (
    APIConnectionError,
    AuthenticationError,
    RateLimitError,
    Timeout,
)
from sqlalchemy.exc import OperationalError

from tutorchat.utils.error_handlers import ErrorHandler, setup_error_handlers

PROVIDER = "anthropic"
MODEL = "claude-3-5-sonnet-20241022"


@pytest.mark.unit
class TestHandleLlmError:
    """Test suite for ErrorHandler.handle_llm_error"""

    def test_rate_limit(self):
        error = RateLimitError(message="429 raw detail", llm_provider=PROVIDER, model=MODEL)

        assert ErrorHandler.handle_llm_error(error)["error"] == "rate_limit"

    def test_timeout(self):
        error = Timeout(message="timed out raw detail", model=MODEL, llm_provider=PROVIDER)

        assert ErrorHandler.handle_llm_error(error)["error"] == "timeout"

    def test_auth(self):
        error = AuthenticationError(message="invalid x-api-key", llm_provider=PROVIDER, model=MODEL)

        result = ErrorHandler.handle_llm_error(error)

        assert result["error"] == "auth_error"
        assert "x-api-key" not in result["message"]

    def test_connection(self):
        error = APIConnectionError(message="dns failure", llm_provider=PROVIDER, model=MODEL)

        assert ErrorHandler.handle_llm_error(error)["error"] == "connection_error"

    def test_unknown_error_is_generic(self):
        result = ErrorHandler.handle_llm_error(ValueError("internal stack detail"))

        assert result["error"] == "api_error"
        assert "internal stack detail" not in result["message"]


@pytest.fixture
def error_app():
    """Minimal app with the global handlers and failing routes"""
    app = FastAPI()
    setup_error_handlers(app)

    @app.get("/http")
    async def raise_http():
        raise HTTPException(status_code=418, detail="Short and stout")

    @app.get("/db")
    async def raise_db():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    @app.get("/boom")
    async def raise_generic():
        raise RuntimeError("unexpected")

    @app.post("/body")
    async def needs_int(value: int):
        return {"value": value}

    return app


@pytest.mark.unit
class TestGlobalHandlers:
    """Test suite for registered exception handlers"""

    def test_http_exception(self, error_app):
        response = TestClient(error_app).get("/http")

        assert response.status_code == 418
        assert response.json() == {"error": "Short and stout"}

    def test_validation_error_is_400(self, error_app):
        response = TestClient(error_app).post("/body?value=abc")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    def test_database_error(self, error_app):
        response = TestClient(error_app, raise_server_exceptions=False).get("/db")

        assert response.status_code == 500
        assert response.json() == {"error": "Database error"}

    def test_unexpected_error(self, error_app):
        response = TestClient(error_app, raise_server_exceptions=False).get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_unknown_route_uses_error_body(self, error_app):
        response = TestClient(error_app).get("/missing")

        assert response.status_code == 404
        assert "error" in response.json()

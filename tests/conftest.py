"""
Pytest configuration and shared fixtures for Tutor Chat tests

Provides:
- Test settings pointing at a temporary SQLite database
- Async SQLite engine and session for service tests
- Stub tutor client (no model API calls)
- FastAPI app and TestClient with lifespan
- LiteLLM response helpers
"""

import os

# Keep litellm from fetching its model cost map over the network at import
os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")

import pytest
import pytest_asyncio
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock, Mock
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from tutorchat.config import Settings
from tutorchat.database import (
    create_engine_from_settings,
    create_session_factory,
    init_db,
)
from tutorchat.main import create_app
from tutorchat.services.chat_service import TutorClient


TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings isolated from the environment and any .env file"""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        DATABASE_URL=f"sqlite:///{tmp_path / 'tutorchat_test.db'}",
        JWT_SECRET=TEST_JWT_SECRET,
        STATIC_DIR=str(tmp_path),
        ANTHROPIC_API_KEY="",
    )


@pytest_asyncio.fixture
async def db_engine(test_settings):
    """Async SQLite engine with all tables created"""
    engine = create_engine_from_settings(test_settings)
    assert await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Database session for service tests"""
    session_factory = create_session_factory(db_engine)
    async with session_factory() as session:
        yield session


@pytest.fixture
def stub_tutor():
    """Tutor client that always answers "4" without calling the model API"""
    tutor = Mock(spec=TutorClient)
    tutor.reply = AsyncMock(return_value="4")
    return tutor


@pytest.fixture
def app(test_settings, stub_tutor):
    """Application wired to the test database and the stub tutor"""
    return create_app(settings=test_settings, tutor=stub_tutor)


@pytest.fixture
def client(app):
    """TestClient with startup/shutdown (schema init) applied"""
    with TestClient(app) as client:
        yield client


def make_completion_response(content):
    """Build an object shaped like a LiteLLM ModelResponse"""
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


@pytest.fixture
def completion_response():
    """Factory for LiteLLM-shaped responses"""
    return make_completion_response


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for API endpoints"
    )

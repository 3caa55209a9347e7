"""
Application context

Everything a request handler needs, built once at startup and stored on
app.state.context. Tests build their own context with fakes.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from tutorchat.config import Settings
from tutorchat.core.security import TokenService, resolve_jwt_secret
from tutorchat.database import create_engine_from_settings, create_session_factory
from tutorchat.services.chat_service import TutorClient

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker
    tokens: TokenService
    tutor: TutorClient

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed")


def build_context(settings: Settings, tutor: Optional[TutorClient] = None) -> AppContext:
    """
    Wire up the shared engine, token service and tutor client

    Raises:
        ConfigurationError: Signing secret missing in production
    """
    tokens = TokenService(
        secret=resolve_jwt_secret(settings),
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )
    engine = create_engine_from_settings(settings)

    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        tokens=tokens,
        tutor=tutor or TutorClient(settings),
    )

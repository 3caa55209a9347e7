"""
Tutor Chat API - FastAPI application entry point
Signup/login with bearer tokens, single-turn tutor chat, static frontend
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from tutorchat.config import Settings, settings as default_settings
from tutorchat.context import build_context
from tutorchat.core.exceptions import http_404_not_found
from tutorchat.database import init_db
from tutorchat.services.chat_service import TutorClient
from tutorchat.utils.error_handlers import setup_error_handlers

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging and quiet chatty client libraries"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s:%(name)s:%(message)s"
    )
    logging.getLogger("LiteLLM").setLevel(logging.WARNING)
    logging.getLogger("litellm").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_app(settings: Optional[Settings] = None, tutor: Optional[TutorClient] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Settings to use (defaults to the environment-loaded settings)
        tutor: Model client override, used by tests

    Returns:
        FastAPI: Configured application
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        context = build_context(settings, tutor=tutor)
        # Failure is logged inside init_db; requests that need the database will 500
        await init_db(context.engine)
        app.state.context = context
        logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} started")
        try:
            yield
        finally:
            await context.close()
            logger.info(f"{settings.APP_NAME} stopped")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="School tutor chat backend",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "authentication", "description": "Signup and login"},
            {"name": "chat", "description": "Tutor chat"}
        ]
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_error_handlers(app)

    from tutorchat.api import auth, chat

    app.include_router(auth.router, prefix="/api")
    app.include_router(chat.router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Liveness check, does not touch the database"""
        return {"status": "ok"}

    @app.get("/", include_in_schema=False)
    async def index():
        """Serve the frontend entry page"""
        path = os.path.join(settings.STATIC_DIR, settings.INDEX_FILE)
        if not os.path.isfile(path):
            raise http_404_not_found("Not found")
        return FileResponse(path)

    # Mounted last so API routes win
    if settings.SERVE_STATIC:
        app.mount(
            "/",
            StaticFiles(directory=settings.STATIC_DIR, html=True, check_dir=False),
            name="static"
        )

    return app


setup_logging(default_settings.LOG_LEVEL)
app = create_app()


def run() -> None:
    import uvicorn
    uvicorn.run(
        "tutorchat.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
    )


if __name__ == "__main__":
    run()

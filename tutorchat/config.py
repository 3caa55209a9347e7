"""
Configuration management for the Tutor Chat API
Uses pydantic-settings for environment variable validation
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


DEFAULT_TUTOR_SYSTEM_PROMPT = (
    "You are Ellerslie School AI, a helpful tutor designed for school students. "
    "Help with homework, explain concepts clearly, suggest study tips, and encourage learning. "
    "Keep responses focused and under 500 words."
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Tutor Chat API"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"  # development or production
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Database
    DATABASE_URL: str = "postgresql://postgres@localhost:5432/postgres"
    DATABASE_SSL: bool = False  # ssl="require" for hosted Postgres (no cert verification)
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 5

    # Security
    JWT_SECRET: str = ""  # Required in production
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: Optional[int] = None  # None = tokens never expire

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Model-completion API (LiteLLM format: provider/model)
    LLM_MODEL: str = "anthropic/claude-3-5-sonnet-20241022"
    LLM_MAX_TOKENS: int = 1024
    LLM_TIMEOUT: int = 60  # Seconds
    ANTHROPIC_API_KEY: str = ""  # Falls back to the provider's own env variable
    TUTOR_SYSTEM_PROMPT: str = DEFAULT_TUTOR_SYSTEM_PROMPT

    # Frontend
    STATIC_DIR: str = "."
    INDEX_FILE: str = "index.html"
    SERVE_STATIC: bool = True

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Global settings instance
settings = Settings()

"""
Centralized Error Handling

Maps upstream and database failures to safe client messages, and renders
every error as {"error": <message>}. Original details stay in the logs.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from litellm.exceptions import (
    APIConnectionError,
    AuthenticationError as LLMAuthenticationError,
    RateLimitError,
    Timeout,
)
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Dict, Any
import logging

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized error handling"""

    @staticmethod
    def handle_llm_error(error: Exception) -> Dict[str, Any]:
        """
        Handle model-completion API errors

        Args:
            error: LiteLLM / provider exception

        Returns:
            Error dictionary with a client-safe message
        """
        if isinstance(error, RateLimitError):
            logger.warning(f"Model API rate limit exceeded: {error}")
            return {
                "error": "rate_limit",
                "message": "The tutor is busy right now. Please try again in a moment."
            }

        elif isinstance(error, Timeout):
            logger.warning(f"Model API timeout: {error}")
            return {
                "error": "timeout",
                "message": "The tutor took too long to respond. Please try again."
            }

        elif isinstance(error, LLMAuthenticationError):
            logger.error(f"Model API rejected our credentials: {error}")
            return {
                "error": "auth_error",
                "message": "The tutor service is not configured correctly."
            }

        elif isinstance(error, APIConnectionError):
            logger.error(f"Model API unreachable: {error}")
            return {
                "error": "connection_error",
                "message": "Could not reach the tutor service. Please try again."
            }

        else:
            logger.error(f"Model API error: {error}", exc_info=error)
            return {
                "error": "api_error",
                "message": "The tutor could not answer right now. Please try again."
            }


# Global exception handlers for FastAPI

async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTPException as {"error": detail}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Unparseable or wrongly typed JSON body"""
    logger.warning(f"Invalid request body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"}
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Database unreachable or statement failed"""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error"}
    )


async def generic_error_handler(request: Request, exc: Exception):
    """Anything else: log the traceback, return a generic message"""
    logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"}
    )


# Setup function for FastAPI app
def setup_error_handlers(app):
    """
    Setup global error handlers for FastAPI app

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    logger.info("Error handlers registered")

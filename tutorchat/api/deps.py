"""
FastAPI dependencies
Application context, authentication, tutor client
"""

from fastapi import Depends, Header, Request
from typing import Optional

from tutorchat.context import AppContext
from tutorchat.core.security import TokenClaims
from tutorchat.core.exceptions import AuthenticationError, http_401_unauthorized
from tutorchat.services.chat_service import TutorClient


def get_context(request: Request) -> AppContext:
    """Application context built during startup"""
    return request.app.state.context


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None, description="Bearer token"),
    context: AppContext = Depends(get_context)
) -> TokenClaims:
    """
    Get current user from the bearer token

    Args:
        request: Incoming request, the claims are attached to request.state.user
        authorization: Authorization header (format: "Bearer <token>")
        context: Application context holding the token service

    Returns:
        TokenClaims: user_id and email carried by the token

    Raises:
        HTTPException: 401 "No token" when the header is absent,
            401 "Invalid token" when it is malformed or fails verification
    """
    if not authorization:
        raise http_401_unauthorized("No token")

    scheme, _, token = authorization.partition(" ")
    if scheme != "Bearer" or not token.strip():
        raise http_401_unauthorized("Invalid token")

    try:
        claims = context.tokens.verify(token.strip())
    except AuthenticationError:
        raise http_401_unauthorized("Invalid token")

    request.state.user = claims
    return claims


def get_tutor(context: AppContext = Depends(get_context)) -> TutorClient:
    return context.tutor

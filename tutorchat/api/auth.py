"""
Authentication API endpoints
User signup and login, both returning a bearer token
"""

import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from tutorchat.database import get_db
from tutorchat.context import AppContext
from tutorchat.api.deps import get_context
from tutorchat.core.exceptions import (
    DuplicateError,
    http_400_bad_request,
    http_401_unauthorized,
)
from tutorchat.schemas.auth import SignupRequest, LoginRequest, AuthResponse
from tutorchat.services import user_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: Optional[SignupRequest] = None,
    db: AsyncSession = Depends(get_db),
    context: AppContext = Depends(get_context)
):
    """
    Register a new user and return a token

    Args:
        request: Name, email and password
        db: Database session
        context: Application context (token service)

    Returns:
        AuthResponse: Token and public user fields

    Raises:
        HTTPException: 400 if a field is missing or the email is already registered
    """
    request = request or SignupRequest()

    try:
        user = await user_service.create_user(
            db, request.name, request.email, request.password
        )
    except ValueError as e:
        raise http_400_bad_request(str(e))
    except DuplicateError as e:
        raise http_400_bad_request(str(e))

    token = context.tokens.issue(user.id, user.email)
    logger.info(f"User {user.id} signed up")

    return AuthResponse(token=token, user=user.to_public())


@router.post("/login", response_model=AuthResponse)
async def login(
    request: Optional[LoginRequest] = None,
    db: AsyncSession = Depends(get_db),
    context: AppContext = Depends(get_context)
):
    """
    Authenticate with email and password

    Returns:
        AuthResponse: Token and public user fields

    Raises:
        HTTPException: 400 if email or password is missing, 401 on any mismatch
    """
    request = request or LoginRequest()
    if not request.email or not request.password:
        raise http_400_bad_request("Missing email or password")

    user = await user_service.authenticate_user(db, request.email, request.password)
    if user is None:
        logger.info("Login failed")
        raise http_401_unauthorized("Invalid credentials")

    token = context.tokens.issue(user.id, user.email)
    logger.info(f"User {user.id} logged in")

    return AuthResponse(token=token, user=user.to_public())

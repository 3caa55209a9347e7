"""
Pydantic Schemas for Request/Response Validation

Auth Schemas:
    - SignupRequest: POST /auth/signup
    - LoginRequest: POST /auth/login
    - UserPublic: Public user fields
    - AuthResponse: Token + user

Chat Schemas:
    - ChatRequest: POST /chat
    - ChatResponse: Tutor reply
"""

from tutorchat.schemas.auth import (
    SignupRequest,
    LoginRequest,
    UserPublic,
    AuthResponse,
)

from tutorchat.schemas.chat import (
    ChatRequest,
    ChatResponse,
)

__all__ = [
    # Auth schemas
    "SignupRequest",
    "LoginRequest",
    "UserPublic",
    "AuthResponse",
    # Chat schemas
    "ChatRequest",
    "ChatResponse",
]

"""
Pydantic Schemas for Authentication endpoints
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class SignupRequest(BaseModel):
    """Request schema for signup (presence is checked by the endpoint)"""
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="Password")


class LoginRequest(BaseModel):
    """Request schema for login"""
    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="Password")


class UserPublic(BaseModel):
    """User fields safe to return to clients"""
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Response schema for signup and login"""
    token: str = Field(..., description="Bearer token for the Authorization header")
    user: UserPublic

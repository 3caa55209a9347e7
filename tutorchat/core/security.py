"""
Security utilities for authentication
Password hashing, bearer token signing and verification
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from tutorchat.config import Settings
from tutorchat.core.exceptions import AuthenticationError, ConfigurationError

logger = logging.getLogger(__name__)

# Bcrypt work factor
BCRYPT_ROUNDS = 10

# Only used outside production when JWT_SECRET is unset
DEV_JWT_SECRET = "dev_secret_key"

# Password hashing context (bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt

    Args:
        password: Plain text password

    Returns:
        str: Bcrypt hashed password (salted, cost factor 10)
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash

    Args:
        plain_password: Plain text password
        hashed_password: Stored bcrypt hash

    Returns:
        bool: True if password matches hash; False for a mismatch
        or an unrecognised stored hash
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


def resolve_jwt_secret(settings: Settings) -> str:
    """
    Pick the token-signing secret

    Raises:
        ConfigurationError: JWT_SECRET unset in production
    """
    if settings.JWT_SECRET:
        return settings.JWT_SECRET

    if settings.is_production:
        raise ConfigurationError("JWT_SECRET must be set when ENVIRONMENT=production")

    logger.warning("JWT_SECRET is not set; signing tokens with the insecure development secret")
    return DEV_JWT_SECRET


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a bearer token"""
    user_id: int
    email: str


class TokenService:
    """
    Issues and verifies signed bearer tokens (JWT)

    Tokens carry {userId, email}. An "exp" claim is only added when
    expire_minutes is configured.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: Optional[int] = None):
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, user_id: int, email: str) -> str:
        payload = {"userId": user_id, "email": email}
        if self.expire_minutes:
            payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=self.expire_minutes)
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Validate a token and return its claims

        Raises:
            AuthenticationError: Absent, malformed, tampered or expired token
        """
        if not token:
            raise AuthenticationError("Invalid token")

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            logger.debug(f"Token rejected: {e}")
            raise AuthenticationError("Invalid token") from e

        user_id = payload.get("userId")
        email = payload.get("email")
        if not isinstance(user_id, int) or not isinstance(email, str):
            raise AuthenticationError("Invalid token")

        return TokenClaims(user_id=user_id, email=email)

"""
User Service - credential storage and lookup
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from tutorchat.core.exceptions import DuplicateError
from tutorchat.core.security import hash_password, verify_password
from tutorchat.models.user import User

logger = logging.getLogger(__name__)


async def create_user(db: AsyncSession, name: str, email: str, password: str) -> User:
    """
    Create a user with a bcrypt-hashed password

    Args:
        db: Database session
        name: Display name
        email: Unique email
        password: Plain text password (hashed before storage)

    Returns:
        User: The new user

    Raises:
        ValueError: A field is absent or empty
        DuplicateError: Email already registered (unique constraint)
    """
    if not name or not email or not password:
        raise ValueError("Missing required fields")

    # bcrypt is CPU bound; keep it off the event loop
    hashed = await run_in_threadpool(hash_password, password)

    user = User(name=name, email=email, password=hashed)
    db.add(user)

    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.info(f"Signup rejected, email already registered: {e.orig}")
        raise DuplicateError("Email already exists") from e

    await db.refresh(user)
    logger.info(f"Created user {user.id}")
    return user


async def find_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """Return the user with this email, or None"""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalars().first()


async def authenticate_user(db: AsyncSession, email: str, password: str) -> Optional[User]:
    """
    Look up a user and check the password

    Unknown email and wrong password both return None so callers
    cannot reveal which accounts exist.
    """
    user = await find_user_by_email(db, email)
    if user is None:
        return None

    if not await run_in_threadpool(verify_password, password, user.password):
        return None

    return user

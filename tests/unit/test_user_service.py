"""
Unit tests for user_service (async SQLite)

Tests:
- User creation with hashed password
- Required field checks
- Duplicate email handling
- Authentication outcomes
"""

import pytest

from tutorchat.core.exceptions import DuplicateError
from tutorchat.core.security import verify_password
from tutorchat.services import user_service


@pytest.mark.unit
@pytest.mark.asyncio
class TestUserService:
    """Test suite for user_service"""

    async def test_create_user_hashes_password(self, db_session):
        user = await user_service.create_user(db_session, "Ada", "ada@x.com", "secret123")

        assert user.id is not None
        assert user.name == "Ada"
        assert user.password != "secret123"
        assert verify_password("secret123", user.password)

    async def test_public_fields_exclude_hash(self, db_session):
        user = await user_service.create_user(db_session, "Ada", "ada@x.com", "secret123")

        assert user.to_public() == {"id": user.id, "name": "Ada", "email": "ada@x.com"}

    @pytest.mark.parametrize("name,email,password", [
        (None, "ada@x.com", "secret123"),
        ("Ada", "", "secret123"),
        ("Ada", "ada@x.com", None),
    ])
    async def test_missing_fields_rejected(self, db_session, name, email, password):
        with pytest.raises(ValueError, match="Missing required fields"):
            await user_service.create_user(db_session, name, email, password)

    async def test_duplicate_email_keeps_first_user(self, db_session):
        first = await user_service.create_user(db_session, "Ada", "ada@x.com", "secret123")

        with pytest.raises(DuplicateError, match="Email already exists"):
            await user_service.create_user(db_session, "Eve", "ada@x.com", "other-pass")

        stored = await user_service.find_user_by_email(db_session, "ada@x.com")
        assert stored.id == first.id
        assert stored.name == "Ada"
        assert verify_password("secret123", stored.password)

    async def test_find_unknown_email(self, db_session):
        assert await user_service.find_user_by_email(db_session, "nobody@x.com") is None

    async def test_authenticate_success(self, db_session):
        created = await user_service.create_user(db_session, "Ada", "ada@x.com", "secret123")

        user = await user_service.authenticate_user(db_session, "ada@x.com", "secret123")

        assert user is not None
        assert user.id == created.id

    async def test_authenticate_wrong_password(self, db_session):
        await user_service.create_user(db_session, "Ada", "ada@x.com", "secret123")

        assert await user_service.authenticate_user(db_session, "ada@x.com", "wrong") is None

    async def test_authenticate_unknown_email(self, db_session):
        assert await user_service.authenticate_user(db_session, "nobody@x.com", "secret123") is None

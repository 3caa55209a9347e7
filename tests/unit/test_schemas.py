"""
Unit tests for request/response schemas

Tests:
- Request models accept missing fields (presence is checked by endpoints)
- UserPublic reads ORM attributes and drops the password hash
"""

import pytest

from tutorchat.models.user import User
from tutorchat.schemas import ChatRequest, LoginRequest, SignupRequest, UserPublic


@pytest.mark.unit
class TestSchemas:
    """Test suite for pydantic schemas"""

    def test_request_fields_optional(self):
        assert ChatRequest().message is None
        assert LoginRequest().email is None
        assert SignupRequest(name="Ada").password is None

    def test_user_public_from_orm(self):
        user = User(id=5, name="Ada", email="ada@x.com", password="$2b$10$hash")

        public = UserPublic.model_validate(user)

        assert public.model_dump() == {"id": 5, "name": "Ada", "email": "ada@x.com"}

    def test_user_public_config(self):
        assert UserPublic.model_config["from_attributes"] is True

"""
User Model - Authentication and user management
"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from tutorchat.database import Base


class User(Base):
    """
    User model for signup/login

    Attributes:
        id: Serial user identifier (embedded in bearer tokens)
        name: Display name
        email: User email (unique, enforced by the database)
        password: Bcrypt hash of the password (never plaintext)
        created_at: Account creation timestamp

    Relationships:
        chats: User's chats (one-to-many)
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    # Relationships
    chats = relationship("Chat", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)

    def to_public(self) -> dict:
        """Fields safe to return to clients (never the hash)"""
        return {"id": self.id, "name": self.name, "email": self.email}

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"

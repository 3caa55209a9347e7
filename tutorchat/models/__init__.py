"""
SQLAlchemy Database Models

All models use serial integer primary keys.
All timestamps use server_default=func.now().

Models:
    - User: Signup/login credentials
    - Chat: Conversation container (not yet used by any endpoint)
    - Message: Individual chat turns (not yet used by any endpoint)

Relationships:
    User 1:N Chat
    Chat 1:N Message

Cascade Deletes:
    - Delete User → Delete all Chats, Messages
    - Delete Chat → Delete all Messages
"""

from tutorchat.models.user import User
from tutorchat.models.chat import Chat
from tutorchat.models.message import Message

__all__ = ["User", "Chat", "Message"]

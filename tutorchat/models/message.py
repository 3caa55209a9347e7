"""
Message Model - Individual messages in a chat
"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from tutorchat.database import Base


class Message(Base):
    """
    Chat message model

    Attributes:
        id: Serial message identifier
        chat_id: Parent chat
        role: Message role, free text ('user' or 'assistant' expected)
        content: Message text
        created_at: Message timestamp
    """

    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    chat_id = Column(Integer, ForeignKey("chats.id", ondelete="CASCADE"), nullable=False)

    role = Column(String(20), nullable=False)
    content = Column(Text, nullable=False)

    created_at = Column(DateTime, server_default=func.now())

    # Relationships
    chat = relationship("Chat", back_populates="messages")

    def __repr__(self):
        return f"<Message(id={self.id}, role={self.role}, chat_id={self.chat_id})>"

"""
Chat Model - Conversation container
"""

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from tutorchat.database import Base


class Chat(Base):
    """
    Chat model - conversation container

    Declared for a future conversation-history feature; no endpoint
    reads or writes chats yet.

    Attributes:
        id: Serial chat identifier
        user_id: Chat owner
        title: Optional chat title
        created_at: Chat creation time

    Cascade Delete:
        - Deleting user deletes all chats
        - Deleting chat deletes all messages
    """

    __tablename__ = "chats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255))
    created_at = Column(DateTime, server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="chats")
    messages = relationship(
        "Message",
        back_populates="chat",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Message.created_at"
    )

    def __repr__(self):
        return f"<Chat(id={self.id}, user_id={self.user_id}, title={self.title})>"

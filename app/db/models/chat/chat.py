# app/db/models/chat/chat.py
from sqlalchemy import Column, String, DateTime, ForeignKey, Integer, Uuid
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
import uuid

from app.db.session import Base, utcnow

DEFAULT_CHAT_TITLE = "New Chat"

class Chat(Base):
    __tablename__ = "chats"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False, default=DEFAULT_CHAT_TITLE)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    owner = relationship("User")
    messages = relationship(
        "ChatMessage",
        back_populates="chat",
        cascade="all, delete-orphan",
        order_by="ChatMessage.position",
        collection_class=ordering_list("position"),
        lazy="selectin",
    )

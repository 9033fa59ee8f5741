# app/db/models/chat/chat_message.py
from sqlalchemy import Column, String, Text, ForeignKey, DateTime, Integer, Uuid
from sqlalchemy.orm import relationship
import uuid

from app.db.session import Base, utcnow

class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    chat_id = Column(Uuid, ForeignKey('chats.id', ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    role = Column(String(10), nullable=False)  # 'user' or 'assistant'
    content = Column(Text, nullable=False)
    language = Column(String(10), nullable=False, default="en")
    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    chat = relationship("Chat", back_populates="messages")

from app.db.models.user import User
from app.db.models.chat.chat import Chat
from app.db.models.chat.chat_message import ChatMessage

__all__ = ["User", "Chat", "ChatMessage"]

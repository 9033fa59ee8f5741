from app.db.models.chat.chat import Chat
from app.db.models.chat.chat_message import ChatMessage

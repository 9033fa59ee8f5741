# app/api/chat/services.py

import logging
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.api.chat.assistant import Recommendation, generate_ai_response
from app.core.language import detect_language
from app.db.models import Chat, ChatMessage
from app.db.session import utcnow

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 50


# ---------------------------------------------------
# 🛠️ Chat Management
# ---------------------------------------------------

def _parse_chat_id(chat_id: str) -> Optional[UUID]:
    try:
        return UUID(str(chat_id))
    except ValueError:
        return None


def get_user_chat(db: Session, chat_id: str, user_id: int) -> Optional[Chat]:
    """Fetch a chat only if it belongs to ``user_id``."""
    parsed_id = _parse_chat_id(chat_id)
    if parsed_id is None:
        return None
    return db.query(Chat)\
             .filter(Chat.id == parsed_id, Chat.user_id == user_id)\
             .first()


def list_user_chats(db: Session, user_id: int) -> List[Chat]:
    return db.query(Chat)\
             .filter(Chat.user_id == user_id)\
             .order_by(Chat.updated_at.desc())\
             .all()


def create_chat(db: Session, user_id: int) -> Chat:
    chat = Chat(user_id=user_id, messages=[])
    db.add(chat)
    db.commit()
    db.refresh(chat)
    logger.info("Created chat %s for user %s", chat.id, user_id)
    return chat


def delete_chat(db: Session, chat: Chat) -> None:
    chat_id = chat.id
    db.delete(chat)
    db.commit()
    logger.info("Deleted chat %s", chat_id)


def rename_chat(db: Session, chat: Chat, new_title: str) -> Chat:
    chat.title = new_title
    chat.updated_at = utcnow()
    db.commit()
    db.refresh(chat)
    return chat


# ---------------------------------------------------
# 🤖 Message Exchange
# ---------------------------------------------------

@dataclass
class MessageExchange:
    user_message: ChatMessage
    assistant_message: ChatMessage
    recommendations: List[Recommendation]


def derive_title(message: str) -> str:
    if len(message) > TITLE_MAX_LENGTH:
        return message[:TITLE_MAX_LENGTH] + "..."
    return message


def exchange_messages(db: Session, chat: Chat, message: str) -> MessageExchange:
    """Store the user's message and the generated reply as one turn."""
    language = detect_language(message)

    user_message = ChatMessage(
        role="user",
        content=message.strip(),
        language=language,
        timestamp=utcnow(),
    )
    chat.messages.append(user_message)

    reply = generate_ai_response(message, language)

    assistant_message = ChatMessage(
        role="assistant",
        content=reply.content,
        language=language,
        timestamp=utcnow(),
    )
    chat.messages.append(assistant_message)

    # First turn of the conversation names the chat
    if len(chat.messages) == 2:
        chat.title = derive_title(message)

    chat.updated_at = utcnow()
    db.commit()

    return MessageExchange(
        user_message=user_message,
        assistant_message=assistant_message,
        recommendations=reply.recommendations,
    )

from pydantic import BaseModel, Field, field_validator
from typing import List, Literal
from uuid import UUID

from app.api.chat.assistant import Recommendation
from app.api.schemas import CamelModel, UTCDateTime

# -----------------------------
# 🧾 Message Schemas
# -----------------------------

class ChatMessageCreate(BaseModel):
    message: str = Field(default=None, validate_default=True)

    @field_validator("message", mode="before")
    @classmethod
    def not_blank(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("Message is required")
        return value

class ChatMessageResponse(CamelModel):
    role: Literal["user", "assistant"]
    content: str
    language: str
    timestamp: UTCDateTime

class MessageExchangeResponse(CamelModel):
    user_message: ChatMessageResponse
    assistant_message: ChatMessageResponse
    recommendations: List[Recommendation] = []


# -----------------------------
# 📁 Chat Schemas
# -----------------------------

class ChatResponse(CamelModel):
    id: UUID
    user_id: int
    title: str
    messages: List[ChatMessageResponse] = []
    created_at: UTCDateTime
    updated_at: UTCDateTime

class ChatSummaryResponse(CamelModel):
    id: UUID
    title: str
    created_at: UTCDateTime
    updated_at: UTCDateTime


# -----------------------------
# ✏️ Rename / Delete
# -----------------------------

class ChatRenameRequest(BaseModel):
    title: str = Field(default=None, validate_default=True)

    @field_validator("title", mode="before")
    @classmethod
    def not_blank(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("Title is required")
        return value.strip() if isinstance(value, str) else value

class ChatRenameResponse(BaseModel):
    message: str
    chat: ChatResponse

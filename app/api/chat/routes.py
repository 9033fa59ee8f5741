from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from app.api.chat import schemas, services
from app.api.schemas import MessageResponse
from app.db.session import get_db
from app.db.models import User
from app.core.security import get_current_user

router = APIRouter()


def _owned_chat_or_404(db: Session, chat_id: str, user: User):
    chat = services.get_user_chat(db, chat_id=chat_id, user_id=user.id)
    if not chat:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chat not found")
    return chat


@router.get("", response_model=List[schemas.ChatSummaryResponse])
def list_chats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.list_user_chats(db, user_id=current_user.id)


@router.post("", response_model=schemas.ChatResponse, status_code=status.HTTP_201_CREATED)
def create_chat(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_chat(db, user_id=current_user.id)


@router.get("/{chat_id}", response_model=schemas.ChatResponse)
def retrieve_chat(
    chat_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return _owned_chat_or_404(db, chat_id, current_user)


@router.post(
    "/{chat_id}/messages",
    response_model=schemas.MessageExchangeResponse,
    response_model_exclude_none=True,
)
def send_message(
    chat_id: str,
    payload: schemas.ChatMessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    chat = _owned_chat_or_404(db, chat_id, current_user)
    exchange = services.exchange_messages(db, chat, payload.message)
    return {
        "user_message": exchange.user_message,
        "assistant_message": exchange.assistant_message,
        "recommendations": exchange.recommendations,
    }


@router.put("/{chat_id}/title", response_model=schemas.ChatRenameResponse)
def rename_chat(
    chat_id: str,
    rename_data: schemas.ChatRenameRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    chat = _owned_chat_or_404(db, chat_id, current_user)
    updated_chat = services.rename_chat(db, chat, new_title=rename_data.title)
    return {"message": "Chat title updated successfully", "chat": updated_chat}


@router.delete("/{chat_id}", response_model=MessageResponse)
def delete_chat(
    chat_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    chat = _owned_chat_or_404(db, chat_id, current_user)
    services.delete_chat(db, chat)
    return {"message": "Chat deleted successfully"}

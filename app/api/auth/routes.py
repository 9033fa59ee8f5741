import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.auth import services
from app.api.auth.schemas import UserCreate, UserLogin, Token
from app.core.security import create_user_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    new_user = services.register_user(db, user)
    return {"token": create_user_token(new_user), "user": new_user}


@router.post("/login", response_model=Token)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    db_user = services.authenticate_user(db, credentials.email, credentials.password)
    if db_user is None:
        logger.warning("Failed login attempt")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")

    logger.info("User %s logged in", db_user.id)
    return {"token": create_user_token(db_user), "user": db_user}

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.auth.schemas import UserCreate
from app.core.hashing import Hasher
from app.db.models import User

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def register_user(db: Session, user_data: UserCreate) -> User:
    """Create a local account. Raises 400 if the email is taken."""
    if get_user_by_email(db, user_data.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")

    new_user = User(
        name=user_data.name,
        email=user_data.email,
        hashed_password=Hasher.hash_password(user_data.password),
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration for the same email
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")
    db.refresh(new_user)

    logger.info("Registered user %s", new_user.id)
    return new_user


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Return the user when the credentials match, None otherwise."""
    user = get_user_by_email(db, email)
    if not user or not Hasher.verify_password(password, user.hashed_password):
        return None
    return user

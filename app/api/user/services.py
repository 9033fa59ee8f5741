import logging

from sqlalchemy.orm import Session

from app.db.models import User
from app.db.session import utcnow
from . import schemas

logger = logging.getLogger(__name__)


def _coordinate(value: float) -> str:
    # 40.0 -> "40", the way the client sent it
    return str(int(value)) if value.is_integer() else str(value)


def update_profile(db: Session, user: User, profile: schemas.ProfileUpdate) -> User:
    update_data = profile.model_dump(exclude_unset=True, exclude_none=True)
    for key, value in update_data.items():
        setattr(user, key, value)
    db.commit()
    db.refresh(user)
    return user


def save_location(db: Session, user: User, location: schemas.LocationUpdate) -> User:
    address = location.address or f"{_coordinate(location.latitude)}, {_coordinate(location.longitude)}"
    user.set_location(location.latitude, location.longitude, address, utcnow())
    db.commit()
    db.refresh(user)
    logger.info("Saved location for user %s", user.id)
    return user


def clear_location(db: Session, user: User) -> None:
    user.clear_location()
    db.commit()

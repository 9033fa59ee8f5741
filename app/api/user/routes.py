from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models import User
from app.api.schemas import MessageResponse
from . import schemas, services

router = APIRouter()

@router.get("/profile", response_model=schemas.Profile)
def read_profile(current_user: User = Depends(get_current_user)):
    """
    Retrieve the current user's public profile.
    """
    return current_user

@router.put("/profile", response_model=schemas.Profile)
def update_profile(
    profile_update: schemas.ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update name and/or preferred language.
    """
    return services.update_profile(db=db, user=current_user, profile=profile_update)

@router.post("/location", response_model=schemas.LocationSaved)
def save_location(
    location: schemas.LocationUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    user = services.save_location(db=db, user=current_user, location=location)
    return {"message": "Location saved successfully", "location": user.location}

@router.get("/location", response_model=schemas.Location)
def read_location(current_user: User = Depends(get_current_user)):
    if current_user.latitude is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No location data found")
    return current_user.location

@router.delete("/location", response_model=MessageResponse)
def delete_location(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.clear_location(db=db, user=current_user)
    return {"message": "Location data deleted successfully"}

from typing import Optional

from pydantic import BaseModel, model_validator

from app.api.schemas import CamelModel, UTCDateTime


class Location(CamelModel):
    latitude: float
    longitude: float
    address: Optional[str] = None
    last_updated: Optional[UTCDateTime] = None


class LocationUpdate(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    address: Optional[str] = None

    @model_validator(mode="after")
    def coordinates_present(self):
        if self.latitude is None or self.longitude is None:
            raise ValueError("Latitude and longitude are required")
        return self


class LocationSaved(BaseModel):
    message: str
    location: Location


class ProfileUpdate(CamelModel):
    name: Optional[str] = None
    preferred_language: Optional[str] = None


class Profile(CamelModel):
    id: int
    name: str
    email: str
    preferred_language: str
    location: Optional[Location] = None
    created_at: UTCDateTime

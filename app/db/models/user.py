from datetime import datetime

from sqlalchemy import Column, DateTime, Float, Integer, String
from app.db.session import Base, utcnow

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    preferred_language = Column(String(10), nullable=False, default="en")

    # Last known location, all NULL when the user has none on record
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    address = Column(String, nullable=True)
    location_updated_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


    @property
    def location(self):
        if self.latitude is None and self.longitude is None:
            return None
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "address": self.address,
            "last_updated": self.location_updated_at,
        }

    def set_location(self, latitude: float, longitude: float, address: str, updated_at: datetime):
        self.latitude = latitude
        self.longitude = longitude
        self.address = address
        self.location_updated_at = updated_at

    def clear_location(self):
        self.latitude = None
        self.longitude = None
        self.address = None
        self.location_updated_at = None

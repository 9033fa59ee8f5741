from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, EmailStr, Field, field_validator

from app.api.schemas import CamelModel

MIN_PASSWORD_LENGTH = 6


class UserCreate(BaseModel):
    name: str = Field(default=None, validate_default=True)
    email: EmailStr = Field(default=None, validate_default=True)
    password: str = Field(default=None, validate_default=True)

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def not_blank(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("Please provide all required fields")
        return value

    @field_validator("password")
    @classmethod
    def long_enough(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return value


class UserLogin(BaseModel):
    email: str = Field(default=None, validate_default=True)
    password: str = Field(default=None, validate_default=True)

    @field_validator("email", "password", mode="before")
    @classmethod
    def not_blank(cls, value):
        if value is None or (isinstance(value, str) and not value):
            raise ValueError("Please provide email and password")
        return value

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        # Match the form EmailStr stored at registration; anything unparseable
        # simply won't match a user
        try:
            return validate_email(value, check_deliverability=False).normalized
        except EmailNotValidError:
            return value


class UserOut(CamelModel):
    id: int
    name: str
    email: str
    preferred_language: str


class Token(BaseModel):
    token: str
    user: UserOut

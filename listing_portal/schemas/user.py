import re
from typing import Optional, List, Literal
from datetime import datetime
from pydantic import Field, EmailStr, field_validator

from listing_portal.schemas.common import CamelModel, trimmed
from listing_portal.schemas.listing import ListingResponse

PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{9,14}$")
_PHONE_SEPARATORS = re.compile(r"[\s\-().]")

Role = Literal["user", "admin"]
Name = trimmed(2, 50)


def normalize_phone(value: str) -> str:
    """Strip separators so "+91 99999-99999" and "+919999999999" are the same key"""
    return _PHONE_SEPARATORS.sub("", value or "")


def validate_phone(value: str) -> str:
    phone = normalize_phone(value)
    if not PHONE_PATTERN.match(phone):
        raise ValueError("Please provide a valid phone number")
    return phone


class RegisterRequest(CamelModel):
    name: Name
    phone: str
    email: Optional[EmailStr] = None
    password: str = Field(..., min_length=6)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v)

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v


class LoginRequest(CamelModel):
    phone: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("phone")
    @classmethod
    def normalize(cls, v):
        return normalize_phone(v)


class ProfileUpdate(CamelModel):
    name: Optional[Name] = None
    phone: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        if v is None:
            return v
        return validate_phone(v)


class UserStatusUpdate(CamelModel):
    is_active: bool


class UserResponse(CamelModel):
    id: int
    name: str
    phone: str
    email: Optional[str] = None
    role: Role
    is_active: bool
    profile_image: Optional[str] = None
    created_at: Optional[datetime] = None


class UserWithWishlist(UserResponse):
    wishlist: List[ListingResponse] = []


class AuthPayload(CamelModel):
    user: UserResponse
    token: str


class CurrentUserPayload(CamelModel):
    user: UserWithWishlist


class UserPayload(CamelModel):
    user: UserResponse

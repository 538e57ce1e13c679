from typing import Optional, List, Literal
from datetime import datetime
from pydantic import EmailStr, field_validator

from listing_portal.schemas.common import CamelModel, trimmed
from listing_portal.schemas.listing import ListingBrief
from listing_portal.schemas.user import validate_phone

InquiryStatus = Literal["pending", "responded", "closed"]


class InquiryCreate(CamelModel):
    """Contact details and message sent by a prospective buyer"""
    name: trimmed(2, 50)
    email: EmailStr
    phone: str
    message: trimmed(10, 1000)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v)

    @field_validator("email", mode="before")
    @classmethod
    def lower_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class InquiryRespond(CamelModel):
    # Blank or missing text is rejected by the service with EmptyResponse
    response: Optional[str] = None


class InquiryResponse(CamelModel):
    id: int
    listing_id: int
    inquirer_name: str
    inquirer_email: str
    inquirer_phone: str
    message: str
    status: InquiryStatus
    response: Optional[str] = None
    responded_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    listing: Optional[ListingBrief] = None


class InquiryPayload(CamelModel):
    inquiry: InquiryResponse


class InquiryListPayload(CamelModel):
    inquiries: List[InquiryResponse]

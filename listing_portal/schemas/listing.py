from typing import Annotated, Optional, List, Literal
from datetime import datetime
from pydantic import BaseModel, BeforeValidator, Field, computed_field

from listing_portal.schemas.common import CamelModel, trimmed

PropertyType = Literal["apartment", "house", "villa", "commercial"]
Bhk = Annotated[
    Literal["1", "2", "3", "4", "5"],
    # Accept 2 as well as "2"
    BeforeValidator(lambda v: str(v) if isinstance(v, int) and not isinstance(v, bool) else v),
]
ListingStatus = Literal["sale", "rent"]
SortOrder = Literal["asc", "desc"]

Title = trimmed(5, 100)
Location = trimmed(5, 100)
Description = trimmed(20, 1000)
Tag = trimmed(1, 100)

MAX_PRICE = 1_000_000_000
MAX_PAGE = 1_000_000


def format_price(price: int) -> str:
    """Indian notation: crores above 1e7, lakhs above 1e5"""
    if price >= 10_000_000:
        return f"₹{price / 10_000_000:.1f} Cr"
    if price >= 100_000:
        return f"₹{price / 100_000:.1f} L"
    return f"₹{price:,}"


class ListingBase(CamelModel):
    """Fields shared by create requests and responses"""
    title: str
    property_type: PropertyType = Field(alias="type")
    bhk: Bhk
    bathrooms: int
    area: int
    price: int
    location: str
    description: str
    status: ListingStatus
    images: List[str] = []
    amenities: List[str] = []
    features: List[str] = []
    nearby_places: List[str] = []


class ListingCreate(ListingBase):
    """Create request; the owner snapshot comes from the authenticated user"""
    title: Title
    bathrooms: int = Field(..., ge=1, le=10)
    area: int = Field(..., ge=100, le=50000)
    price: int = Field(..., ge=1000, le=MAX_PRICE)
    location: Location
    description: Description
    amenities: List[Tag] = []
    features: List[Tag] = []
    nearby_places: List[Tag] = []
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class ListingUpdate(CamelModel):
    """Partial update; only supplied fields change"""
    title: Optional[Title] = None
    property_type: Optional[PropertyType] = Field(None, alias="type")
    bhk: Optional[Bhk] = None
    bathrooms: Optional[int] = Field(None, ge=1, le=10)
    area: Optional[int] = Field(None, ge=100, le=50000)
    price: Optional[int] = Field(None, ge=1000, le=MAX_PRICE)
    location: Optional[Location] = None
    description: Optional[Description] = None
    status: Optional[ListingStatus] = None
    images: Optional[List[str]] = None
    amenities: Optional[List[Tag]] = None
    features: Optional[List[Tag]] = None
    nearby_places: Optional[List[Tag]] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class OwnerBrief(CamelModel):
    id: int
    name: str
    phone: str
    email: Optional[str] = None


class ListingResponse(ListingBase):
    """Listing as returned by the API"""
    id: int
    latitude: float
    longitude: float
    owner_id: int
    owner_name: str
    owner_phone: str
    owner_email: Optional[str] = None
    owner: Optional[OwnerBrief] = None
    is_approved: bool
    is_active: bool
    views: int
    rating: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field(alias="formattedPrice")
    @property
    def formatted_price(self) -> str:
        return format_price(self.price)


class ListingBrief(CamelModel):
    """Short listing reference embedded in inquiries"""
    id: int
    title: str
    location: str
    price: int
    status: ListingStatus


class ListingSearchCriteria(BaseModel):
    """Filters, sorting and paging for the public search"""
    location: Optional[str] = None
    property_type: Optional[str] = None
    bhk: Optional[str] = None
    status: Optional[ListingStatus] = None
    min_price: Optional[int] = Field(None, ge=0, le=MAX_PRICE)
    max_price: Optional[int] = Field(None, ge=0, le=MAX_PRICE)
    search: Optional[str] = None
    sort_by: str = "createdAt"
    sort_order: SortOrder = "desc"
    page: int = Field(1, ge=1, le=MAX_PAGE)
    limit: int = Field(12, ge=1, le=100)


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_properties: int
    limit: int
    has_next: bool
    has_prev: bool


class ListingPage(CamelModel):
    properties: List[ListingResponse]
    pagination: Pagination


class ListingPayload(CamelModel):
    property: ListingResponse


class ListingListPayload(CamelModel):
    properties: List[ListingResponse]


class WishlistPayload(CamelModel):
    wishlist: List[ListingResponse]


class WishlistToggleResult(CamelModel):
    in_wishlist: bool


class ApprovalUpdate(CamelModel):
    approved: bool

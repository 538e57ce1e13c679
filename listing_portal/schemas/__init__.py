from listing_portal.schemas.common import ApiResponse, CamelModel
from listing_portal.schemas.listing import (
    ListingCreate, ListingUpdate, ListingResponse, ListingBrief, ListingSearchCriteria,
    Pagination, ListingPage, ListingPayload, ListingListPayload, WishlistPayload,
    WishlistToggleResult, ApprovalUpdate,
)
from listing_portal.schemas.user import (
    RegisterRequest, LoginRequest, ProfileUpdate, UserStatusUpdate,
    UserResponse, UserWithWishlist, AuthPayload, CurrentUserPayload, UserPayload,
)
from listing_portal.schemas.inquiry import (
    InquiryCreate, InquiryRespond, InquiryResponse, InquiryPayload, InquiryListPayload,
)

__all__ = [
    "ApiResponse", "CamelModel",
    "ListingCreate", "ListingUpdate", "ListingResponse", "ListingBrief", "ListingSearchCriteria",
    "Pagination", "ListingPage", "ListingPayload", "ListingListPayload", "WishlistPayload",
    "WishlistToggleResult", "ApprovalUpdate",
    "RegisterRequest", "LoginRequest", "ProfileUpdate", "UserStatusUpdate",
    "UserResponse", "UserWithWishlist", "AuthPayload", "CurrentUserPayload", "UserPayload",
    "InquiryCreate", "InquiryRespond", "InquiryResponse", "InquiryPayload", "InquiryListPayload",
]

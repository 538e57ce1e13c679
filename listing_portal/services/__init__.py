"""
Domain services: credential store, session tokens, listings, inquiries,
wishlist and email notifications
"""
from listing_portal.services.security import PasswordHasher, TokenService, TokenClaims
from listing_portal.services.users import UserStore
from listing_portal.services.listings import ListingStore, build_pagination
from listing_portal.services.inquiries import InquiryService
from listing_portal.services.wishlist import WishlistService
from listing_portal.services.notifications import NotificationDispatcher

__all__ = [
    "PasswordHasher",
    "TokenService",
    "TokenClaims",
    "UserStore",
    "ListingStore",
    "build_pagination",
    "InquiryService",
    "WishlistService",
    "NotificationDispatcher",
]

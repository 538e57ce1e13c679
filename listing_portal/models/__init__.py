from listing_portal.models.wishlist import wishlist_items
from listing_portal.models.user import User
from listing_portal.models.listing import Listing
from listing_portal.models.inquiry import Inquiry, INQUIRY_STATUSES

__all__ = ["wishlist_items", "User", "Listing", "Inquiry", "INQUIRY_STATUSES"]

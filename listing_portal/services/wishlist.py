import logging
from typing import List

from sqlalchemy.orm import Session, joinedload

from listing_portal.exceptions import NotFound
from listing_portal.models import Listing, User, wishlist_items

logger = logging.getLogger(__name__)


class WishlistService:
    """Per-user set of saved listings"""

    def __init__(self, db: Session):
        self.db = db

    def toggle(self, user: User, listing_id: int) -> bool:
        """Add the listing if absent, remove it if present; returns the new membership"""
        listing = self.db.query(Listing).filter(Listing.id == listing_id).first()
        if not listing:
            raise NotFound("Property not found")
        if not listing.is_public:
            raise NotFound("Property not available")

        if listing in user.wishlist:
            user.wishlist.remove(listing)
            in_wishlist = False
        else:
            user.wishlist.append(listing)
            in_wishlist = True

        self.db.commit()
        logger.debug(f"Wishlist user id={user.id} listing id={listing_id} -> {in_wishlist}")
        return in_wishlist

    def list(self, user: User) -> List[Listing]:
        """
        Saved listings that are still public.
        Entries whose listing was unapproved or deactivated stay stored but are not returned.
        """
        return (
            self.db.query(Listing)
            .join(wishlist_items, wishlist_items.c.listing_id == Listing.id)
            .options(joinedload(Listing.owner))
            .filter(
                wishlist_items.c.user_id == user.id,
                Listing.is_approved == True,
                Listing.is_active == True,
            )
            .order_by(wishlist_items.c.created_at, Listing.id)
            .all()
        )

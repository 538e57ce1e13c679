import logging
from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload, Query

from listing_portal.config import get_settings
from listing_portal.exceptions import Forbidden, NotFound, ValidationFailed
from listing_portal.models import Listing, User
from listing_portal.schemas.listing import ListingCreate, ListingSearchCriteria, ListingUpdate, Pagination

logger = logging.getLogger(__name__)
settings = get_settings()

SORT_FIELDS = {
    "createdAt": Listing.created_at,
    "created_at": Listing.created_at,
    "price": Listing.price,
    "area": Listing.area,
    "views": Listing.views,
    "rating": Listing.rating,
    "title": Listing.title,
}


def build_pagination(page: int, limit: int, total: int) -> Pagination:
    pages = (total + limit - 1) // limit
    return Pagination(
        current_page=page,
        total_pages=pages,
        total_properties=total,
        limit=limit,
        has_next=page < pages,
        has_prev=page > 1,
    )


class ListingStore:
    """
    Persistence and search for property listings.

    Public reads only see listings that are both approved and active; the
    owner's own view ("my properties") is not filtered.
    """

    def __init__(self, db: Session):
        self.db = db

    def _public_query(self) -> Query:
        return (
            self.db.query(Listing)
            .options(joinedload(Listing.owner))
            .filter(Listing.is_approved == True, Listing.is_active == True)
        )

    def apply_filters(self, query: Query, criteria: ListingSearchCriteria) -> Query:
        if criteria.location:
            query = query.filter(Listing.location.icontains(criteria.location, autoescape=True))
        if criteria.property_type and criteria.property_type != "all":
            query = query.filter(Listing.property_type == criteria.property_type)
        if criteria.bhk and criteria.bhk != "all":
            query = query.filter(Listing.bhk == criteria.bhk)
        if criteria.status:
            query = query.filter(Listing.status == criteria.status)
        if criteria.min_price is not None:
            query = query.filter(Listing.price >= criteria.min_price)
        if criteria.max_price is not None:
            query = query.filter(Listing.price <= criteria.max_price)
        if criteria.search:
            term = criteria.search
            query = query.filter(
                or_(
                    Listing.title.icontains(term, autoescape=True),
                    Listing.location.icontains(term, autoescape=True),
                    Listing.description.icontains(term, autoescape=True),
                )
            )
        return query

    def apply_sort(self, query: Query, sort_by: str, sort_order: str) -> Query:
        column = SORT_FIELDS.get(sort_by)
        if column is None:
            raise ValidationFailed(f"Invalid sortBy. Allowed: {', '.join(sorted(SORT_FIELDS))}")
        if sort_order == "asc":
            return query.order_by(column.asc(), Listing.id.asc())
        return query.order_by(column.desc(), Listing.id.desc())

    def search(self, criteria: ListingSearchCriteria) -> Tuple[List[Listing], int]:
        """Public search; returns one page of listings and the total number of matches"""
        query = self.apply_filters(self._public_query(), criteria)

        total = query.count()
        items = (
            self.apply_sort(query, criteria.sort_by, criteria.sort_order)
            .offset((criteria.page - 1) * criteria.limit)
            .limit(criteria.limit)
            .all()
        )
        logger.debug(f"Search {criteria.model_dump(exclude_none=True)} -> {total} matches")
        return items, total

    def get(self, listing_id: int) -> Optional[Listing]:
        return self.db.query(Listing).filter(Listing.id == listing_id).first()

    def get_public(self, listing_id: int) -> Listing:
        """Fetch an approved, active listing and count the view"""
        listing = self._public_query().filter(Listing.id == listing_id).first()
        if not listing:
            raise NotFound("Property not found")

        listing.views = Listing.views + 1
        self.db.commit()
        self.db.refresh(listing)
        return listing

    def get_owned(self, listing_id: int, owner: User) -> Listing:
        listing = self.get(listing_id)
        if not listing:
            raise NotFound("Property not found")
        if listing.owner_id != owner.id:
            raise Forbidden("Access denied. You can only manage your own properties.")
        return listing

    def create(self, payload: ListingCreate, owner: User) -> Listing:
        data = payload.model_dump(exclude_none=True)
        if not data.get("images"):
            data["images"] = [settings.default_listing_image]

        # Listings go live immediately, there is no moderation queue on create
        listing = Listing(
            **data,
            owner_id=owner.id,
            owner_name=owner.name,
            owner_phone=owner.phone,
            owner_email=owner.email,
            is_approved=True,
            is_active=True,
        )
        self.db.add(listing)
        self.db.commit()
        self.db.refresh(listing)
        logger.info(f"Listing id={listing.id} created by user id={owner.id}")
        return listing

    def update(self, listing_id: int, owner: User, patch: ListingUpdate) -> Listing:
        listing = self.get_owned(listing_id, owner)

        update_data = {k: v for k, v in patch.model_dump(exclude_unset=True).items() if v is not None}
        if "images" in update_data and not update_data["images"]:
            update_data["images"] = [settings.default_listing_image]
        for key, value in update_data.items():
            setattr(listing, key, value)

        # Any edit sends the listing back for review
        listing.is_approved = False

        self.db.commit()
        self.db.refresh(listing)
        logger.info(f"Listing id={listing.id} updated, approval reset")
        return listing

    def delete(self, listing_id: int, owner: User) -> None:
        listing = self.get_owned(listing_id, owner)
        self.db.delete(listing)
        self.db.commit()
        logger.info(f"Listing id={listing_id} deleted by user id={owner.id}")

    def list_for_owner(self, owner: User) -> List[Listing]:
        return (
            self.db.query(Listing)
            .filter(Listing.owner_id == owner.id)
            .order_by(Listing.created_at.desc(), Listing.id.desc())
            .all()
        )

    def list_pending(self) -> List[Listing]:
        return (
            self.db.query(Listing)
            .options(joinedload(Listing.owner))
            .filter(Listing.is_approved == False)
            .order_by(Listing.created_at.desc(), Listing.id.desc())
            .all()
        )

    def set_approval(self, listing_id: int, approved: bool) -> Listing:
        listing = self.get(listing_id)
        if not listing:
            raise NotFound("Property not found")

        listing.is_approved = approved
        self.db.commit()
        self.db.refresh(listing)
        logger.info(f"Listing id={listing.id} is_approved={approved}")
        return listing

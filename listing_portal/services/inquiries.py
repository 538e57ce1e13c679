import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from listing_portal.exceptions import EmptyResponse, Forbidden, NotAvailable, NotFound
from listing_portal.models import Inquiry, Listing, User
from listing_portal.schemas.inquiry import InquiryCreate

logger = logging.getLogger(__name__)


class InquiryService:
    """
    Buyer inquiries and the owner reply workflow.

    Status only moves pending -> responded through this service; "closed"
    is a valid stored value that no operation produces.
    """

    def __init__(self, db: Session):
        self.db = db

    def submit(self, listing_id: int, contact: InquiryCreate) -> Inquiry:
        listing = self.db.query(Listing).filter(Listing.id == listing_id).first()
        if not listing:
            raise NotFound("Property not found")
        if not listing.is_public:
            raise NotAvailable()

        inquiry = Inquiry(
            listing_id=listing.id,
            inquirer_name=contact.name,
            inquirer_email=contact.email,
            inquirer_phone=contact.phone,
            message=contact.message,
            status="pending",
        )
        self.db.add(inquiry)
        self.db.commit()
        self.db.refresh(inquiry)
        logger.info(f"Inquiry id={inquiry.id} submitted for listing id={listing.id}")
        return inquiry

    def list_for_listing(self, listing_id: int, requester: User) -> List[Inquiry]:
        listing = self.db.query(Listing).filter(Listing.id == listing_id).first()
        if not listing:
            raise NotFound("Property not found")
        if listing.owner_id != requester.id:
            raise Forbidden("Access denied. You can only view inquiries for your own properties.")

        return (
            self.db.query(Inquiry)
            .options(joinedload(Inquiry.listing))
            .filter(Inquiry.listing_id == listing_id)
            .order_by(Inquiry.created_at.desc(), Inquiry.id.desc())
            .all()
        )

    def list_mine(self, requester: User) -> List[Inquiry]:
        """Inquiries received across all of the requester's listings, newest first"""
        return (
            self.db.query(Inquiry)
            .join(Listing, Inquiry.listing_id == Listing.id)
            .options(joinedload(Inquiry.listing))
            .filter(Listing.owner_id == requester.id)
            .order_by(Inquiry.created_at.desc(), Inquiry.id.desc())
            .all()
        )

    def respond(self, inquiry_id: int, requester: User, response: Optional[str]) -> Inquiry:
        text = (response or "").strip()
        if not text:
            raise EmptyResponse()

        inquiry = (
            self.db.query(Inquiry)
            .options(joinedload(Inquiry.listing))
            .filter(Inquiry.id == inquiry_id)
            .first()
        )
        if not inquiry:
            raise NotFound("Inquiry not found")
        if inquiry.listing.owner_id != requester.id:
            raise Forbidden("Access denied. You can only respond to inquiries for your own properties.")

        inquiry.response = text
        inquiry.status = "responded"
        inquiry.responded_at = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(inquiry)
        logger.info(f"Inquiry id={inquiry.id} responded")
        return inquiry

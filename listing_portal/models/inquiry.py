from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from listing_portal.database import Base


INQUIRY_STATUSES = ("pending", "responded", "closed")


class Inquiry(Base):
    """
    Buyer message to a listing owner, with an optional reply
    """
    __tablename__ = "inquiries"

    id = Column(Integer, primary_key=True, index=True)

    listing_id = Column(Integer, ForeignKey("listings.id", ondelete="CASCADE"), nullable=False, index=True)

    inquirer_name = Column(String(50), nullable=False)
    inquirer_email = Column(String(255), nullable=False)
    inquirer_phone = Column(String(20), nullable=False)
    message = Column(Text, nullable=False)

    status = Column(String(20), nullable=False, default="pending", index=True)  # pending, responded, closed
    response = Column(Text, nullable=True)
    responded_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    listing = relationship("Listing", back_populates="inquiries")

    def __repr__(self):
        return f"<Inquiry(id={self.id}, listing_id={self.listing_id}, status={self.status})>"

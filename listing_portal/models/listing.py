from sqlalchemy import Column, Integer, String, Float, DateTime, Text, ForeignKey, Boolean, BigInteger, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from listing_portal.database import Base
from listing_portal.models.wishlist import wishlist_items


class Listing(Base):
    """
    Property offered for sale or rent.
    Only approved and active listings are publicly visible.
    """
    __tablename__ = "listings"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    property_type = Column(String(20), nullable=False, index=True)
    bhk = Column(String(1), nullable=False, index=True)
    bathrooms = Column(Integer, nullable=False)
    area = Column(Integer, nullable=False)
    price = Column(BigInteger, nullable=False, index=True)
    location = Column(String(100), nullable=False, index=True)
    status = Column(String(10), nullable=False, index=True)

    images = Column(JSON, nullable=False, default=list)
    amenities = Column(JSON, nullable=False, default=list)
    features = Column(JSON, nullable=False, default=list)
    nearby_places = Column(JSON, nullable=False, default=list)

    latitude = Column(Float, nullable=False, default=19.4617)
    longitude = Column(Float, nullable=False, default=72.7869)

    # Owner snapshot taken when the listing is created
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    owner_name = Column(String(50), nullable=False)
    owner_phone = Column(String(20), nullable=False)
    owner_email = Column(String(255), nullable=True)

    is_approved = Column(Boolean, nullable=False, default=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    views = Column(Integer, nullable=False, default=0)
    rating = Column(Float, nullable=False, default=4.8)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="listings")
    inquiries = relationship("Inquiry", back_populates="listing", cascade="all, delete-orphan")
    wishlisted_by = relationship("User", secondary=wishlist_items, back_populates="wishlist")

    @property
    def is_public(self) -> bool:
        return bool(self.is_approved and self.is_active)

    def __repr__(self):
        return f"<Listing(id={self.id}, title={self.title[:50] if self.title else None})>"

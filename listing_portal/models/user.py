from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.orm import relationship, deferred
from sqlalchemy.sql import func
from listing_portal.database import Base
from listing_portal.models.wishlist import wishlist_items


class User(Base):
    """
    Account of a buyer or property owner.
    The phone number is the only unique identifier; email is optional.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(50), nullable=False)
    phone = Column(String(20), unique=True, index=True, nullable=False)
    email = Column(String(255), nullable=True, index=True)

    # Excluded from every query unless explicitly undeferred
    password_hash = deferred(Column(String(255), nullable=False), raiseload=True)

    role = Column(String(20), nullable=False, default="user")
    is_active = Column(Boolean, nullable=False, default=True)
    profile_image = Column(String(1000), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    listings = relationship("Listing", back_populates="owner", cascade="all, delete-orphan")
    wishlist = relationship(
        "Listing",
        secondary=wishlist_items,
        back_populates="wishlisted_by",
        order_by=wishlist_items.c.created_at,
    )

    def __repr__(self):
        return f"<User(id={self.id}, phone={self.phone}, role={self.role})>"

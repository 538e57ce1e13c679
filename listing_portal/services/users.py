import logging
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, undefer

from listing_portal.exceptions import (
    DuplicateEmail, DuplicatePhone, InvalidCredentials, NoPasswordOnRecord, NoPasswordProvided, NotFound,
)
from listing_portal.models import User
from listing_portal.services.security import PasswordHasher, get_password_hasher

logger = logging.getLogger(__name__)


class UserStore:
    """
    Credential store for user accounts.

    The password hash is a deferred column: plain reads never load it, and
    only the ``*_with_password`` lookups used by login undefer it.
    """

    def __init__(self, db: Session, hasher: Optional[PasswordHasher] = None):
        self.db = db
        self.hasher = hasher or get_password_hasher()

    def create_user(self, name: str, phone: str, password: str, email: Optional[str] = None) -> User:
        if self.find_by_phone(phone):
            raise DuplicatePhone()

        # Email is optional and not unique in storage, duplicates are only refused here
        if email and self.db.query(User.id).filter(User.email == email).first():
            raise DuplicateEmail()

        user = User(
            name=name,
            phone=phone,
            email=email or None,
            password_hash=self.hasher.hash(password),
            role="user",
            is_active=True,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Concurrent registration won the race for the same phone
            self.db.rollback()
            logger.info(f"Phone uniqueness constraint hit on insert: {phone}")
            raise DuplicatePhone()

        self.db.refresh(user)
        logger.info(f"Registered user id={user.id}")
        return user

    def get(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_phone(self, phone: str) -> Optional[User]:
        return self.db.query(User).filter(User.phone == phone).first()

    def find_by_phone_with_password(self, phone: str) -> Optional[User]:
        return self.db.query(User).options(undefer(User.password_hash)).filter(User.phone == phone).first()

    def find_by_id_with_password(self, user_id: int) -> Optional[User]:
        return self.db.query(User).options(undefer(User.password_hash)).filter(User.id == user_id).first()

    def verify_password(self, user: User, candidate: str) -> bool:
        if not candidate:
            raise NoPasswordProvided()
        if "password_hash" in inspect(user).unloaded:
            raise NoPasswordOnRecord()
        return self.hasher.verify(candidate, user.password_hash)

    def authenticate(self, phone: str, password: str) -> User:
        """Return the user for a phone/password pair; unknown phone and wrong password look the same"""
        user = self.find_by_phone_with_password(phone)
        if not user or not self.verify_password(user, password):
            logger.info(f"Failed login for phone={phone}")
            raise InvalidCredentials()
        return user

    def update_profile(self, user: User, name: Optional[str] = None, phone: Optional[str] = None) -> User:
        if phone and phone != user.phone:
            taken = self.db.query(User.id).filter(User.phone == phone, User.id != user.id).first()
            if taken:
                raise DuplicatePhone()
            user.phone = phone
        if name:
            user.name = name

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicatePhone()

        self.db.refresh(user)
        return user

    def set_active(self, user_id: int, is_active: bool) -> User:
        user = self.get(user_id)
        if not user:
            raise NotFound("User not found")

        user.is_active = is_active
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"User id={user.id} is_active={is_active}")
        return user

"""
Password hashing and session tokens.

Tokens are stateless HS256 JWTs carrying the user id (``sub``) and role.
There is no server-side revocation list: a deactivated account is rejected
by the access-control dependency, not by the token itself.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import jwt
from passlib.context import CryptContext

from listing_portal.config import Settings, get_settings
from listing_portal.exceptions import TokenExpired, TokenInvalidSignature, TokenMalformed

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted one-way hashing (bcrypt)"""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        return self._context.verify(password, password_hash)


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    role: str


class TokenService:
    """Issues and validates signed, expiring session tokens"""

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.secret = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm
        self.lifetime = timedelta(days=settings.token_expire_days)

    def issue(self, user_id: int, role: str, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "role": role,
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode a token and return its claims.

        Raises:
            TokenExpired: the ``exp`` claim is in the past
            TokenInvalidSignature: signed with a different secret
            TokenMalformed: anything else wrong with the token or its payload
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpired()
        # InvalidSignatureError is a DecodeError, check it first
        except jwt.InvalidSignatureError:
            raise TokenInvalidSignature()
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected malformed token: {e}")
            raise TokenMalformed()

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            raise TokenMalformed()

        return TokenClaims(user_id=user_id, role=payload.get("role", "user"))


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)


def get_token_service() -> TokenService:
    return TokenService(get_settings())

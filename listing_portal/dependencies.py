"""
Access-control dependencies.

``get_current_user`` resolves the bearer token to a stored, active user and
attaches it to ``request.state.user``; ``require_admin`` additionally
checks the stored role.
"""
import logging
from typing import Annotated, Optional

from fastapi import Depends, Path, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from listing_portal.database import get_db
from listing_portal.exceptions import AccountDeactivated, Forbidden, Unauthenticated
from listing_portal.models import User
from listing_portal.services.notifications import NotificationDispatcher
from listing_portal.services.security import TokenService, get_token_service
from listing_portal.services.users import UserStore

logger = logging.getLogger(__name__)

# auto_error=False so a missing header becomes our own 401 envelope
bearer_scheme = HTTPBearer(auto_error=False)

# Primary keys are 32-bit integers in every supported database
MAX_ID = 2**31 - 1
RecordId = Annotated[int, Path(ge=1, le=MAX_ID)]


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    claims = tokens.verify(credentials.credentials)

    # The database, not the token, is the source of truth for role and status
    user = UserStore(db).get(claims.user_id)
    if not user:
        logger.info(f"Token for unknown user id={claims.user_id}")
        raise Unauthenticated("Invalid token. User not found.")
    if not user.is_active:
        logger.info(f"Deactivated user id={user.id} attempted access")
        raise AccountDeactivated()

    request.state.user = user
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if user.role != "admin":
        raise Forbidden("Access denied. Admin privileges required.")
    return user


def get_notifier(request: Request) -> NotificationDispatcher:
    return request.app.state.notifier

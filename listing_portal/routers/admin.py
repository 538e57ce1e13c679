import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from listing_portal.database import get_db
from listing_portal.dependencies import RecordId, require_admin
from listing_portal.models import User
from listing_portal.schemas import (
    ApiResponse, ApprovalUpdate, ListingListPayload, ListingPayload, ListingResponse,
    UserPayload, UserResponse, UserStatusUpdate,
)
from listing_portal.services.listings import ListingStore
from listing_portal.services.users import UserStore

router = APIRouter(prefix="/api/admin", tags=["admin"])
logger = logging.getLogger(__name__)


@router.get("/properties/pending", response_model=ApiResponse[ListingListPayload])
def get_pending_properties(admin: User = Depends(require_admin), db: Session = Depends(get_db)):
    """Listings waiting for approval, newest first"""
    items = ListingStore(db).list_pending()
    return ApiResponse(data=ListingListPayload(
        properties=[ListingResponse.model_validate(item) for item in items]
    ))


@router.put("/properties/{property_id}/approval", response_model=ApiResponse[ListingPayload])
def set_property_approval(
    property_id: RecordId,
    payload: ApprovalUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    listing = ListingStore(db).set_approval(property_id, payload.approved)
    logger.info(f"Admin id={admin.id} set approval of listing id={property_id} to {payload.approved}")
    return ApiResponse(
        message="Property approved" if payload.approved else "Property approval revoked",
        data=ListingPayload(property=ListingResponse.model_validate(listing)),
    )


@router.put("/users/{user_id}/status", response_model=ApiResponse[UserPayload])
def set_user_status(
    user_id: RecordId,
    payload: UserStatusUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Activate or deactivate an account; deactivation locks out its existing tokens"""
    user = UserStore(db).set_active(user_id, payload.is_active)
    logger.info(f"Admin id={admin.id} set is_active={payload.is_active} for user id={user_id}")
    return ApiResponse(
        message="User activated" if payload.is_active else "User deactivated",
        data=UserPayload(user=UserResponse.model_validate(user)),
    )

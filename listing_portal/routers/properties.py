import logging
from typing import Optional
from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlalchemy.orm import Session

from listing_portal.database import get_db
from listing_portal.dependencies import RecordId, get_current_user, get_notifier
from listing_portal.models import User
from listing_portal.schemas import (
    ApiResponse, ListingCreate, ListingListPayload, ListingPage, ListingPayload, ListingResponse,
    ListingSearchCriteria, ListingUpdate, WishlistPayload, WishlistToggleResult,
)
from listing_portal.schemas.listing import MAX_PAGE, MAX_PRICE, ListingStatus, SortOrder
from listing_portal.services.listings import ListingStore, build_pagination
from listing_portal.services.notifications import NotificationDispatcher
from listing_portal.services.wishlist import WishlistService

router = APIRouter(prefix="/api/properties", tags=["properties"])
logger = logging.getLogger(__name__)


@router.get("", response_model=ApiResponse[ListingPage])
def get_properties(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(12, ge=1, le=100),
    location: Optional[str] = None,
    property_type: Optional[str] = Query(None, alias="type", description="apartment, house, villa, commercial or all"),
    bhk: Optional[str] = Query(None, description="1-5 or all"),
    status: Optional[ListingStatus] = None,
    min_price: Optional[int] = Query(None, alias="minPrice", ge=0, le=MAX_PRICE),
    max_price: Optional[int] = Query(None, alias="maxPrice", ge=0, le=MAX_PRICE),
    search: Optional[str] = None,
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_order: SortOrder = Query("desc", alias="sortOrder"),
    db: Session = Depends(get_db),
):
    """Public search over approved, active listings with filtering and pagination"""
    criteria = ListingSearchCriteria(
        location=location,
        property_type=property_type,
        bhk=bhk,
        status=status,
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    items, total = ListingStore(db).search(criteria)

    return ApiResponse(data=ListingPage(
        properties=[ListingResponse.model_validate(item) for item in items],
        pagination=build_pagination(page, limit, total),
    ))


@router.get("/user/my-properties", response_model=ApiResponse[ListingListPayload])
def get_my_properties(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """The caller's own listings, including unapproved and inactive ones"""
    items = ListingStore(db).list_for_owner(user)
    return ApiResponse(data=ListingListPayload(
        properties=[ListingResponse.model_validate(item) for item in items]
    ))


@router.get("/user/wishlist", response_model=ApiResponse[WishlistPayload])
def get_wishlist(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Saved listings that are still publicly visible"""
    items = WishlistService(db).list(user)
    return ApiResponse(data=WishlistPayload(
        wishlist=[ListingResponse.model_validate(item) for item in items]
    ))


@router.get("/{property_id}", response_model=ApiResponse[ListingPayload])
def get_property(property_id: RecordId, db: Session = Depends(get_db)):
    """Single public listing; every fetch counts as a view"""
    listing = ListingStore(db).get_public(property_id)
    return ApiResponse(data=ListingPayload(property=ListingResponse.model_validate(listing)))


@router.post("", response_model=ApiResponse[ListingPayload], status_code=201)
def create_property(
    payload: ListingCreate,
    background_tasks: BackgroundTasks,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    notifier: NotificationDispatcher = Depends(get_notifier),
):
    """Create a listing owned by the caller; it is approved immediately"""
    listing = ListingStore(db).create(payload, user)
    result = ListingResponse.model_validate(listing)

    background_tasks.add_task(notifier.notify_listing_submitted, result.model_dump())

    return ApiResponse(
        message="Property listed successfully and is now live on the website!",
        data=ListingPayload(property=result),
    )


@router.put("/{property_id}", response_model=ApiResponse[ListingPayload])
def update_property(
    property_id: RecordId,
    payload: ListingUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update the caller's listing; the listing goes back to review"""
    listing = ListingStore(db).update(property_id, user, payload)
    return ApiResponse(
        message="Property updated successfully and is pending re-approval",
        data=ListingPayload(property=ListingResponse.model_validate(listing)),
    )


@router.delete("/{property_id}", response_model=ApiResponse[dict])
def delete_property(
    property_id: RecordId,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete the caller's listing with its inquiries"""
    ListingStore(db).delete(property_id, user)
    return ApiResponse(message="Property deleted successfully", data={"id": property_id})


@router.post("/{property_id}/wishlist", response_model=ApiResponse[WishlistToggleResult])
def toggle_wishlist(
    property_id: RecordId,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Add the listing to the wishlist, or remove it if already saved"""
    in_wishlist = WishlistService(db).toggle(user, property_id)
    return ApiResponse(
        message="Property added to wishlist" if in_wishlist else "Property removed from wishlist",
        data=WishlistToggleResult(in_wishlist=in_wishlist),
    )

import logging
from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session

from listing_portal.database import get_db
from listing_portal.dependencies import RecordId, get_current_user, get_notifier
from listing_portal.models import User
from listing_portal.schemas import (
    ApiResponse, InquiryCreate, InquiryListPayload, InquiryPayload, InquiryRespond, InquiryResponse,
    ListingResponse,
)
from listing_portal.services.inquiries import InquiryService
from listing_portal.services.notifications import NotificationDispatcher

router = APIRouter(prefix="/api/inquiries", tags=["inquiries"])
logger = logging.getLogger(__name__)


@router.post("/property/{property_id}", response_model=ApiResponse[InquiryPayload], status_code=201)
def submit_inquiry(
    property_id: RecordId,
    payload: InquiryCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    notifier: NotificationDispatcher = Depends(get_notifier),
):
    """Send an inquiry about a public listing; no account needed"""
    inquiry = InquiryService(db).submit(property_id, payload)
    result = InquiryResponse.model_validate(inquiry)

    background_tasks.add_task(
        notifier.notify_inquiry_received,
        ListingResponse.model_validate(inquiry.listing).model_dump(),
        result.model_dump(),
    )

    return ApiResponse(
        message="Inquiry sent successfully! The property owner will contact you soon.",
        data=InquiryPayload(inquiry=result),
    )


@router.get("/property/{property_id}", response_model=ApiResponse[InquiryListPayload])
def get_property_inquiries(
    property_id: RecordId,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Inquiries for one of the caller's listings"""
    inquiries = InquiryService(db).list_for_listing(property_id, user)
    return ApiResponse(data=InquiryListPayload(
        inquiries=[InquiryResponse.model_validate(i) for i in inquiries]
    ))


@router.get("/my-inquiries", response_model=ApiResponse[InquiryListPayload])
@router.get("/me", response_model=ApiResponse[InquiryListPayload], include_in_schema=False)
def get_my_inquiries(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Inquiries received across all of the caller's listings"""
    inquiries = InquiryService(db).list_mine(user)
    return ApiResponse(data=InquiryListPayload(
        inquiries=[InquiryResponse.model_validate(i) for i in inquiries]
    ))


@router.put("/{inquiry_id}/respond", response_model=ApiResponse[InquiryPayload])
def respond_to_inquiry(
    inquiry_id: RecordId,
    payload: InquiryRespond,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Reply to an inquiry on one of the caller's listings"""
    inquiry = InquiryService(db).respond(inquiry_id, user, payload.response)
    return ApiResponse(
        message="Response sent successfully",
        data=InquiryPayload(inquiry=InquiryResponse.model_validate(inquiry)),
    )

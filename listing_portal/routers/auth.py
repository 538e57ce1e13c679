import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from listing_portal.database import get_db
from listing_portal.dependencies import get_current_user
from listing_portal.models import User
from listing_portal.schemas import (
    ApiResponse, AuthPayload, CurrentUserPayload, ListingResponse, LoginRequest, ProfileUpdate,
    RegisterRequest, UserPayload, UserResponse, UserWithWishlist,
)
from listing_portal.services.security import TokenService, get_token_service
from listing_portal.services.users import UserStore
from listing_portal.services.wishlist import WishlistService

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/register", response_model=ApiResponse[AuthPayload], status_code=201)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """Create an account and return it with a session token"""
    user = UserStore(db).create_user(
        name=payload.name,
        phone=payload.phone,
        password=payload.password,
        email=payload.email,
    )
    return ApiResponse(
        message="User registered successfully",
        data=AuthPayload(user=UserResponse.model_validate(user), token=tokens.issue(user.id, user.role)),
    )


@router.post("/login", response_model=ApiResponse[AuthPayload])
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """Log in with phone and password"""
    user = UserStore(db).authenticate(payload.phone, payload.password)
    logger.info(f"Login successful for user id={user.id}")
    return ApiResponse(
        message="Login successful",
        data=AuthPayload(user=UserResponse.model_validate(user), token=tokens.issue(user.id, user.role)),
    )


@router.get("/me", response_model=ApiResponse[CurrentUserPayload])
def get_me(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Current user with the listings in their wishlist"""
    wishlist = WishlistService(db).list(user)
    profile = UserWithWishlist(
        **UserResponse.model_validate(user).model_dump(),
        wishlist=[ListingResponse.model_validate(item) for item in wishlist],
    )
    return ApiResponse(data=CurrentUserPayload(user=profile))


@router.put("/profile", response_model=ApiResponse[UserPayload])
def update_profile(
    payload: ProfileUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update name and/or phone"""
    user = UserStore(db).update_profile(user, name=payload.name, phone=payload.phone)
    return ApiResponse(
        message="Profile updated successfully",
        data=UserPayload(user=UserResponse.model_validate(user)),
    )

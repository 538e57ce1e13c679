from listing_portal.routers.auth import router as auth_router
from listing_portal.routers.properties import router as properties_router
from listing_portal.routers.inquiries import router as inquiries_router
from listing_portal.routers.admin import router as admin_router

__all__ = ["auth_router", "properties_router", "inquiries_router", "admin_router"]

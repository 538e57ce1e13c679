import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from listing_portal import __version__
from listing_portal.config import get_settings
from listing_portal.database import engine, Base
from listing_portal.exceptions import AppError
from listing_portal.routers import auth_router, properties_router, inquiries_router, admin_router
from listing_portal.services.notifications import NotificationDispatcher

settings = get_settings()

log_level = logging.DEBUG if settings.debug else logging.INFO
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("passlib").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    app.state.notifier = NotificationDispatcher(settings)
    if not app.state.notifier.enabled:
        logger.warning("SMTP credentials not set, email notifications are disabled")
    logger.info(f"{settings.app_name} started ({settings.environment})")
    yield
    engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Property listing API: accounts, listings search, inquiries and wishlists",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(auth_router)
app.include_router(properties_router)
app.include_router(inquiries_router)
app.include_router(admin_router)


def error_response(status_code: int, message: str, errors=None) -> JSONResponse:
    content = {"success": False, "message": message}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.__class__.__name__}: {exc.message}")
        message = exc.message if settings.debug else "Internal Server Error"
        return error_response(exc.status_code, message)
    return error_response(exc.status_code, exc.message, exc.errors)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix, keep the field path
        loc = [str(part) for part in error.get("loc", ())[1:]]
        errors.append({"field": ".".join(loc), "message": error.get("msg", "")})
    return error_response(400, "Validation failed", errors)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return error_response(404, "API endpoint not found")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    message = f"Internal Server Error: {exc}" if settings.debug else "Internal Server Error"
    return error_response(500, message)


@app.get("/")
def index():
    return {
        "success": True,
        "message": f"Welcome to {settings.app_name} API",
        "version": __version__,
        "endpoints": {
            "auth": "/api/auth",
            "properties": "/api/properties",
            "inquiries": "/api/inquiries",
            "admin": "/api/admin",
            "health": "/api/health",
        },
    }


@app.get("/api/health")
def health_check():
    return {
        "success": True,
        "message": f"{settings.app_name} API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }


def run():
    """Serve the API with uvicorn on the configured port"""
    uvicorn.run("listing_portal.main:app", host="0.0.0.0", port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()

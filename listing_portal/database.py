from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from listing_portal.config import get_settings

settings = get_settings()

connect_args = {}
if settings.database_url.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    pool_pre_ping=True,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Database session scoped to one request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

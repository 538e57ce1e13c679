"""
Shared fixtures.

The environment is set before ``listing_portal`` is imported so the cached
settings, engine and password hasher all pick up the test values.
"""
import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="listing_portal_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DEBUG"] = "false"
os.environ["ENVIRONMENT"] = "test"
os.environ["SMTP_USER"] = ""
os.environ["SMTP_PASSWORD"] = ""

import pytest
from fastapi.testclient import TestClient

from listing_portal.database import Base, SessionLocal, engine
from listing_portal.main import app
from listing_portal.models import User

LISTING_PAYLOAD = {
    "title": "Sunny 2BHK near Virar station",
    "type": "apartment",
    "bhk": "2",
    "bathrooms": 2,
    "area": 950,
    "price": 4500000,
    "location": "Virar West, Mumbai",
    "description": "Well lit apartment, five minutes walk from the railway station.",
    "status": "sale",
    "amenities": ["Parking", "Lift"],
}

INQUIRY_PAYLOAD = {
    "name": "Asha Buyer",
    "email": "asha@example.com",
    "phone": "9123456789",
    "message": "Is the price negotiable? I would like to visit this weekend.",
}


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def auth(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user(client):
    """Register through the API; returns (token, user dict)"""
    def _register(phone="9999999999", name="Ravi Owner", password="secret123", email=None):
        body = {"name": name, "phone": phone, "password": password}
        if email:
            body["email"] = email
        response = client.post("/api/auth/register", json=body)
        assert response.status_code == 201, response.text
        data = response.json()["data"]
        return data["token"], data["user"]
    return _register


@pytest.fixture
def create_listing(client):
    """Create a listing through the API; returns the listing dict"""
    def _create(token, **overrides):
        body = {**LISTING_PAYLOAD, **overrides}
        response = client.post("/api/properties", json=body, headers=auth(token))
        assert response.status_code == 201, response.text
        return response.json()["data"]["property"]
    return _create


@pytest.fixture
def make_admin(db):
    def _make_admin(user_id):
        user = db.get(User, user_id)
        user.role = "admin"
        db.commit()
    return _make_admin

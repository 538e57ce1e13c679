import pytest

from tests.conftest import INQUIRY_PAYLOAD, auth


@pytest.fixture
def owner_listing(register_user, create_listing):
    token, _ = register_user(phone="9999999999")
    return token, create_listing(token)


def submit(client, listing_id, **overrides):
    return client.post(f"/api/inquiries/property/{listing_id}", json={**INQUIRY_PAYLOAD, **overrides})


def test_submit_inquiry_without_account(client, owner_listing):
    _, listing = owner_listing
    response = submit(client, listing["id"], email="ASHA@Example.com ")

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Inquiry sent successfully! The property owner will contact you soon."
    inquiry = body["data"]["inquiry"]
    assert inquiry["status"] == "pending"
    assert inquiry["listingId"] == listing["id"]
    assert inquiry["inquirerName"] == "Asha Buyer"
    assert inquiry["inquirerEmail"] == "asha@example.com"
    assert inquiry["inquirerPhone"] == "9123456789"
    assert inquiry["response"] is None
    assert inquiry["listing"]["title"] == listing["title"]


def test_submit_to_missing_listing(client):
    response = submit(client, 999)
    assert response.status_code == 404
    assert response.json()["message"] == "Property not found"


def test_submit_to_unavailable_listing(client, owner_listing):
    token, listing = owner_listing
    client.put(f"/api/properties/{listing['id']}", json={"price": 5000000}, headers=auth(token))

    response = submit(client, listing["id"])
    assert response.status_code == 400
    assert response.json()["message"] == "Property is not available for inquiries"

    received = client.get("/api/inquiries/my-inquiries", headers=auth(token)).json()["data"]["inquiries"]
    assert received == []


def test_submit_validation(client, owner_listing):
    _, listing = owner_listing
    response = submit(client, listing["id"], email="not-an-email", message="short")

    assert response.status_code == 400
    fields = {e["field"] for e in response.json()["errors"]}
    assert {"email", "message"} <= fields


def test_owner_lists_inquiries_for_listing(client, register_user, owner_listing):
    token, listing = owner_listing
    other_token, _ = register_user(phone="9876543210")
    submit(client, listing["id"])
    submit(client, listing["id"], name="Second Buyer")

    response = client.get(f"/api/inquiries/property/{listing['id']}", headers=auth(token))
    assert response.status_code == 200
    names = [i["inquirerName"] for i in response.json()["data"]["inquiries"]]
    assert names == ["Second Buyer", "Asha Buyer"]

    forbidden = client.get(f"/api/inquiries/property/{listing['id']}", headers=auth(other_token))
    assert forbidden.status_code == 403

    assert client.get(f"/api/inquiries/property/{listing['id']}").status_code == 401


def test_my_inquiries_spans_own_listings(client, register_user, create_listing, owner_listing):
    token, first = owner_listing
    second = create_listing(token, title="Second listing by owner")
    other_token, _ = register_user(phone="9876543210")
    foreign = create_listing(other_token)

    submit(client, first["id"])
    submit(client, second["id"])
    submit(client, foreign["id"])

    mine = client.get("/api/inquiries/my-inquiries", headers=auth(token)).json()["data"]["inquiries"]
    assert {i["listingId"] for i in mine} == {first["id"], second["id"]}

    alias = client.get("/api/inquiries/me", headers=auth(token)).json()["data"]["inquiries"]
    assert [i["id"] for i in alias] == [i["id"] for i in mine]


def test_respond_as_owner(client, owner_listing):
    token, listing = owner_listing
    inquiry = submit(client, listing["id"]).json()["data"]["inquiry"]

    response = client.put(
        f"/api/inquiries/{inquiry['id']}/respond",
        json={"response": "  Yes, Saturday at 11 works.  "},
        headers=auth(token),
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Response sent successfully"
    result = response.json()["data"]["inquiry"]
    assert result["status"] == "responded"
    assert result["response"] == "Yes, Saturday at 11 works."
    assert result["respondedAt"] is not None


def test_respond_as_non_owner(client, register_user, owner_listing):
    _, listing = owner_listing
    other_token, _ = register_user(phone="9876543210")
    inquiry = submit(client, listing["id"]).json()["data"]["inquiry"]

    response = client.put(
        f"/api/inquiries/{inquiry['id']}/respond", json={"response": "Hello"}, headers=auth(other_token)
    )
    assert response.status_code == 403


@pytest.mark.parametrize("body", [{}, {"response": ""}, {"response": "   "}])
def test_respond_requires_text(client, owner_listing, body):
    token, listing = owner_listing
    inquiry = submit(client, listing["id"]).json()["data"]["inquiry"]

    response = client.put(f"/api/inquiries/{inquiry['id']}/respond", json=body, headers=auth(token))
    assert response.status_code == 400
    assert response.json()["message"] == "Response message is required"


def test_respond_to_missing_inquiry(client, owner_listing):
    token, _ = owner_listing
    response = client.put("/api/inquiries/999/respond", json={"response": "Hello"}, headers=auth(token))
    assert response.status_code == 404
    assert response.json()["message"] == "Inquiry not found"

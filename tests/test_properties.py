from tests.conftest import LISTING_PAYLOAD, auth


def test_create_listing_is_live_immediately(client, register_user, create_listing):
    token, user = register_user()
    listing = create_listing(token)

    assert listing["isApproved"] is True
    assert listing["isActive"] is True
    assert listing["ownerId"] == user["id"]
    assert listing["ownerName"] == user["name"]
    assert listing["ownerPhone"] == user["phone"]
    assert listing["type"] == "apartment"
    assert listing["bhk"] == "2"
    assert listing["formattedPrice"] == "₹45.0 L"
    assert listing["views"] == 0
    assert listing["rating"] == 4.8
    assert len(listing["images"]) == 1


def test_create_listing_message(client, register_user):
    token, _ = register_user()
    response = client.post("/api/properties", json=LISTING_PAYLOAD, headers=auth(token))

    assert response.status_code == 201
    assert response.json()["message"] == "Property listed successfully and is now live on the website!"


def test_create_listing_accepts_numeric_bhk(client, register_user, create_listing):
    token, _ = register_user()
    assert create_listing(token, bhk=3)["bhk"] == "3"


def test_create_listing_requires_auth(client):
    response = client.post("/api/properties", json=LISTING_PAYLOAD)
    assert response.status_code == 401


def test_create_listing_validation(client, register_user):
    token, _ = register_user()
    body = {**LISTING_PAYLOAD, "title": "Flat", "bhk": "7", "price": 10, "type": "castle"}

    response = client.post("/api/properties", json=body, headers=auth(token))
    assert response.status_code == 400
    fields = {e["field"] for e in response.json()["errors"]}
    assert {"title", "bhk", "price", "type"} <= fields


def test_get_listing_counts_views(client, register_user, create_listing):
    token, _ = register_user()
    listing = create_listing(token)

    first = client.get(f"/api/properties/{listing['id']}")
    second = client.get(f"/api/properties/{listing['id']}")

    assert first.status_code == 200
    assert first.json()["data"]["property"]["views"] == 1
    assert second.json()["data"]["property"]["views"] == 2


def test_get_missing_listing(client):
    response = client.get("/api/properties/999")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Property not found"}


def test_update_resets_approval(client, register_user, create_listing):
    token, _ = register_user()
    listing = create_listing(token)

    response = client.put(
        f"/api/properties/{listing['id']}",
        json={"title": "Renovated 2BHK near Virar station", "price": 5200000},
        headers=auth(token),
    )
    assert response.status_code == 200
    updated = response.json()["data"]["property"]
    assert updated["isApproved"] is False
    assert updated["title"] == "Renovated 2BHK near Virar station"
    assert updated["price"] == 5200000
    assert updated["bhk"] == "2"

    # No longer public, but still listed for the owner
    assert client.get(f"/api/properties/{listing['id']}").status_code == 404
    mine = client.get("/api/properties/user/my-properties", headers=auth(token)).json()["data"]["properties"]
    assert [p["id"] for p in mine] == [listing["id"]]


def test_update_by_other_user_is_forbidden(client, register_user, create_listing):
    owner_token, _ = register_user(phone="9999999999")
    other_token, _ = register_user(phone="9876543210")
    listing = create_listing(owner_token)

    response = client.put(f"/api/properties/{listing['id']}", json={"price": 1000}, headers=auth(other_token))
    assert response.status_code == 403


def test_delete_listing(client, register_user, create_listing):
    owner_token, _ = register_user(phone="9999999999")
    other_token, _ = register_user(phone="9876543210")
    listing = create_listing(owner_token)

    assert client.delete(f"/api/properties/{listing['id']}", headers=auth(other_token)).status_code == 403

    response = client.delete(f"/api/properties/{listing['id']}", headers=auth(owner_token))
    assert response.status_code == 200
    assert response.json()["message"] == "Property deleted successfully"
    assert client.get(f"/api/properties/{listing['id']}").status_code == 404
    assert client.delete(f"/api/properties/{listing['id']}", headers=auth(owner_token)).status_code == 404


def test_delete_removes_inquiries(client, register_user, create_listing):
    from tests.conftest import INQUIRY_PAYLOAD

    token, _ = register_user()
    listing = create_listing(token)
    client.post(f"/api/inquiries/property/{listing['id']}", json=INQUIRY_PAYLOAD)

    client.delete(f"/api/properties/{listing['id']}", headers=auth(token))
    mine = client.get("/api/inquiries/my-inquiries", headers=auth(token)).json()["data"]["inquiries"]
    assert mine == []

import pytest

from tests.conftest import INQUIRY_PAYLOAD, auth


@pytest.fixture
def catalogue(register_user, create_listing):
    token, _ = register_user()
    return token, [
        create_listing(token, title="Compact studio in Andheri", location="Andheri East, Mumbai",
                       type="apartment", bhk="1", price=2500000, status="sale"),
        create_listing(token, title="Family house with garden", location="Kothrud, Pune",
                       type="house", bhk="3", price=12000000, status="sale"),
        create_listing(token, title="Sea facing villa retreat", location="Alibaug Beach Road",
                       type="villa", bhk="4", price=45000000, status="sale",
                       description="Private pool and direct beach access, ideal holiday home."),
        create_listing(token, title="Office floor for rent", location="Bandra Kurla Complex",
                       type="commercial", bhk="5", price=350000, status="rent"),
    ]


def search(client, **params):
    response = client.get("/api/properties", params=params)
    assert response.status_code == 200, response.text
    return response.json()["data"]


def titles(data):
    return {p["title"] for p in data["properties"]}


def test_default_search_returns_newest_first(client, catalogue):
    _, listings = catalogue
    data = search(client)

    assert [p["id"] for p in data["properties"]] == [l["id"] for l in reversed(listings)]
    assert data["pagination"] == {
        "currentPage": 1,
        "totalPages": 1,
        "totalProperties": 4,
        "limit": 12,
        "hasNext": False,
        "hasPrev": False,
    }


def test_filter_by_type_and_bhk(client, catalogue):
    assert titles(search(client, type="house")) == {"Family house with garden"}
    assert titles(search(client, bhk="4")) == {"Sea facing villa retreat"}
    assert len(search(client, type="all", bhk="all")["properties"]) == 4


def test_filter_by_price_range(client, catalogue):
    data = search(client, minPrice=1000000, maxPrice=20000000)
    assert titles(data) == {"Compact studio in Andheri", "Family house with garden"}


def test_filter_by_status(client, catalogue):
    assert titles(search(client, status="rent")) == {"Office floor for rent"}


def test_location_is_case_insensitive_substring(client, catalogue):
    assert titles(search(client, location="mumbai")) == {"Compact studio in Andheri"}


def test_search_matches_title_location_and_description(client, catalogue):
    assert titles(search(client, search="GARDEN")) == {"Family house with garden"}
    assert titles(search(client, search="kurla")) == {"Office floor for rent"}
    assert titles(search(client, search="beach access")) == {"Sea facing villa retreat"}


def test_search_treats_wildcards_literally(client, catalogue):
    assert search(client, search="%")["properties"] == []


def test_sort_by_price(client, catalogue):
    ascending = [p["price"] for p in search(client, sortBy="price", sortOrder="asc")["properties"]]
    descending = [p["price"] for p in search(client, sortBy="price", sortOrder="desc")["properties"]]

    assert ascending == sorted(ascending)
    assert descending == sorted(ascending, reverse=True)


def test_invalid_sort_field(client, catalogue):
    response = client.get("/api/properties", params={"sortBy": "password"})
    assert response.status_code == 400


def test_limit_is_capped(client):
    response = client.get("/api/properties", params={"limit": 101})
    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_last_page_holds_the_remainder(client, register_user, create_listing):
    token, _ = register_user()
    for i in range(5):
        create_listing(token, title=f"Listing number {i}")

    data = search(client, page=3, limit=2)
    assert len(data["properties"]) == 1
    assert data["pagination"] == {
        "currentPage": 3,
        "totalPages": 3,
        "totalProperties": 5,
        "limit": 2,
        "hasNext": False,
        "hasPrev": True,
    }

    assert search(client, page=4, limit=2)["properties"] == []


def test_unapproved_listings_are_hidden(client, catalogue):
    token, listings = catalogue
    client.put(f"/api/properties/{listings[0]['id']}", json={"price": 2600000}, headers=auth(token))

    data = search(client)
    assert listings[0]["id"] not in [p["id"] for p in data["properties"]]
    assert data["pagination"]["totalProperties"] == 3


@pytest.mark.parametrize("params", [
    {"page": 10**19},
    {"page": 1_000_001},
    {"minPrice": 10**20},
    {"maxPrice": 1_000_000_001},
])
def test_out_of_range_numbers_are_rejected(client, params):
    response = client.get("/api/properties", params=params)

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_price_range_at_upper_bound(client, catalogue):
    assert len(search(client, minPrice=0, maxPrice=1_000_000_000)["properties"]) == 4


@pytest.mark.parametrize("path", [
    f"/api/properties/{10**20}",
    "/api/properties/2147483648",
    "/api/properties/0",
])
def test_oversized_listing_id_is_rejected(client, path):
    response = client.get(path)

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_oversized_id_on_inquiry_submit(client):
    response = client.post(f"/api/inquiries/property/{10**20}", json=INQUIRY_PAYLOAD)
    assert response.status_code == 400

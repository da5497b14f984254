import pytest

from app.core.errors import ValidationError
from app.utils.sweet import create_sweet, update_sweet


def test_list_empty_catalog(client):
    response = client.get("/sweets")
    assert response.status_code == 200
    assert response.json() == {"sweets": [], "count": 0}


def test_create_sweet_as_admin(client, admin_headers):
    response = client.post(
        "/sweets",
        json={
            "name": "Kaju Katli",
            "category": "Barfi",
            "price": 25.5,
            "quantity": 12,
            "imageUrl": "https://cdn.example.org/kaju.png",
        },
        headers=admin_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Sweet created successfully"
    sweet = body["sweet"]
    assert sweet["name"] == "Kaju Katli"
    assert sweet["price"] == 25.5
    assert sweet["quantity"] == 12
    assert sweet["imageUrl"] == "https://cdn.example.org/kaju.png"
    assert sweet["description"] is None
    assert "createdAt" in sweet and "updatedAt" in sweet


def test_create_requires_admin(client, customer_headers):
    body = {"name": "Jalebi", "category": "Fried", "price": 5, "quantity": 3}

    response = client.post("/sweets", json=body)
    assert response.status_code == 401
    assert response.json()["code"] == "MISSING_TOKEN"

    response = client.post("/sweets", json=body, headers=customer_headers)
    assert response.status_code == 403
    assert "error" in response.json()


def test_create_validation(client, admin_headers):
    response = client.post(
        "/sweets", json={"name": "Jalebi", "category": "Fried", "quantity": 3}, headers=admin_headers
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"

    response = client.post(
        "/sweets", json={"name": "Jalebi", "category": "Fried", "price": -1, "quantity": 3}, headers=admin_headers
    )
    assert response.status_code == 400

    response = client.post(
        "/sweets", json={"name": "Jalebi", "category": "Fried", "price": 1, "quantity": -3}, headers=admin_headers
    )
    assert response.status_code == 400
    assert client.get("/sweets").json()["count"] == 0


def test_search(client, make_sweet):
    make_sweet(name="Besan Ladoo", category="Ladoo", price=10)
    make_sweet(name="Jalebi", category="Fried Sweets", price=5)
    make_sweet(name="Rasgulla", category="Syrup Sweets", price=5)
    make_sweet(name="Kaju Katli", category="Barfi", price=25)

    all_ids = {s["id"] for s in client.get("/sweets").json()["sweets"]}
    unfiltered = client.get("/sweets/search").json()
    assert {s["id"] for s in unfiltered["sweets"]} == all_ids
    assert unfiltered["count"] == 4

    exact = client.get("/sweets/search", params={"minPrice": 5, "maxPrice": 5}).json()
    assert sorted(s["name"] for s in exact["sweets"]) == ["Jalebi", "Rasgulla"]
    assert exact["filters"]["minPrice"] == 5
    assert exact["filters"]["maxPrice"] == 5

    by_name = client.get("/sweets/search", params={"name": "Lado"}).json()
    assert [s["name"] for s in by_name["sweets"]] == ["Besan Ladoo"]

    combined = client.get("/sweets/search", params={"category": "Sweets", "maxPrice": 6}).json()
    assert combined["count"] == 2
    assert combined["filters"] == {"name": None, "category": "Sweets", "minPrice": None, "maxPrice": 6}

    nothing = client.get("/sweets/search", params={"name": "Ladoo", "maxPrice": 5}).json()
    assert nothing == {
        "sweets": [],
        "count": 0,
        "filters": {"name": "Ladoo", "category": None, "minPrice": None, "maxPrice": 5},
    }


def test_get_sweet(client, make_sweet):
    sweet = make_sweet()
    assert client.get(f"/sweets/{sweet['id']}").json()["name"] == "Ladoo"

    response = client.get("/sweets/9999")
    assert response.status_code == 404
    assert response.json() == {"error": "Sweet not found", "code": "SWEET_NOT_FOUND"}


def test_invalid_id_is_a_bad_request(client):
    response = client.get("/sweets/not-a-number")
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_partial_update(client, admin_headers, make_sweet):
    sweet = make_sweet(description="Round and golden")

    response = client.put(f"/sweets/{sweet['id']}", json={"price": 12.5}, headers=admin_headers)
    assert response.status_code == 200
    updated = response.json()["sweet"]
    assert updated["price"] == 12.5
    assert updated["name"] == sweet["name"]
    assert updated["quantity"] == sweet["quantity"]
    assert updated["description"] == "Round and golden"
    assert updated["updatedAt"] >= sweet["updatedAt"]

    response = client.put(f"/sweets/{sweet['id']}", json={"description": None}, headers=admin_headers)
    assert response.json()["sweet"]["description"] is None


def test_update_rejects_bad_values(client, admin_headers, make_sweet):
    sweet = make_sweet()

    response = client.put(f"/sweets/{sweet['id']}", json={"quantity": -1}, headers=admin_headers)
    assert response.status_code == 400

    response = client.put(f"/sweets/{sweet['id']}", json={"name": None}, headers=admin_headers)
    assert response.status_code == 400

    assert client.get(f"/sweets/{sweet['id']}").json()["quantity"] == 5

    response = client.put("/sweets/9999", json={"price": 1}, headers=admin_headers)
    assert response.status_code == 404


def test_update_requires_admin(client, customer_headers, make_sweet):
    sweet = make_sweet()
    response = client.put(f"/sweets/{sweet['id']}", json={"price": 1}, headers=customer_headers)
    assert response.status_code == 403


def test_delete_sweet(client, admin_headers, make_sweet):
    sweet = make_sweet()

    response = client.delete(f"/sweets/{sweet['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Sweet deleted successfully"}

    response = client.delete(f"/sweets/{sweet['id']}", headers=admin_headers)
    assert response.status_code == 404
    assert client.get("/sweets").json()["count"] == 0


def _post_raw(client, method, url, raw, headers):
    # Non-finite numbers are valid for Python's JSON parser but not for httpx's encoder
    return client.request(method, url, content=raw, headers={**headers, "Content-Type": "application/json"})


def test_create_rejects_non_finite_price(client, admin_headers):
    for literal in ("Infinity", "NaN"):
        raw = f'{{"name": "Jalebi", "category": "Fried", "price": {literal}, "quantity": 3}}'
        response = _post_raw(client, "POST", "/sweets", raw, admin_headers)
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
    assert client.get("/sweets").json()["count"] == 0


def test_update_rejects_non_finite_price(client, admin_headers, make_sweet):
    sweet = make_sweet(price=10)
    for literal in ("Infinity", "-Infinity", "NaN"):
        response = _post_raw(client, "PUT", f"/sweets/{sweet['id']}", f'{{"price": {literal}}}', admin_headers)
        assert response.status_code == 400
    assert client.get(f"/sweets/{sweet['id']}").json()["price"] == 10


def test_accessor_rejects_non_finite_price(db_session):
    with pytest.raises(ValidationError):
        create_sweet(db_session, {"name": "Jalebi", "category": "Fried", "price": float("inf"), "quantity": 1})

    sweet = create_sweet(db_session, {"name": "Jalebi", "category": "Fried", "price": 5, "quantity": 1})
    with pytest.raises(ValidationError):
        update_sweet(db_session, sweet.id, {"price": float("nan")})


def test_update_rejects_empty_name_and_category(client, admin_headers, make_sweet):
    sweet = make_sweet()
    for body in ({"name": ""}, {"category": ""}):
        response = client.put(f"/sweets/{sweet['id']}", json=body, headers=admin_headers)
        assert response.status_code == 400
    current = client.get(f"/sweets/{sweet['id']}").json()
    assert current["name"] == "Ladoo"
    assert current["category"] == "Indian Sweet"

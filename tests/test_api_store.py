import pytest

API = "/api/v1"


@pytest.fixture
def product(client):
    resp = client.post(f"{API}/products", json={
        "name": "Professional Cricket Bat",
        "category": "cricket",
        "price": 8999.0,
        "stockQuantity": 10,
    })
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def venue(client):
    resp = client.post(f"{API}/venues", json={
        "name": "Elite Sports Complex",
        "address": "123 Sports Avenue",
        "city": "Mumbai",
        "state": "Maharashtra",
        "sports": ["cricket", "football"],
        "pricePerHour": 2500.0,
        "ownerId": "owner-1",
    })
    assert resp.status_code == 201
    return resp.json()


def test_product_filters(client, product):
    client.post(f"{API}/products", json={"name": "Football", "category": "football", "price": 1499.0})

    assert len(client.get(f"{API}/products").json()) == 2
    cricket = client.get(f"{API}/products", params={"category": "cricket"}).json()
    assert [p["id"] for p in cricket] == [product["id"]]
    assert len(client.get(f"{API}/products", params={"search": "bat"}).json()) == 1
    assert client.get(f"{API}/products/missing").status_code == 404


def test_cart_merges_quantities(client, product):
    cart_url = f"{API}/users/u1/cart"
    first = client.post(cart_url, json={"productId": product["id"]}).json()
    second = client.post(cart_url, json={"productId": product["id"], "quantity": 2}).json()

    assert second["id"] == first["id"]
    assert second["quantity"] == 3
    assert len(client.get(cart_url).json()) == 1

    updated = client.put(f"{API}/cart/{first['id']}", json={"quantity": 5})
    assert updated.json()["quantity"] == 5
    assert client.put(f"{API}/cart/{first['id']}", json={"quantity": 0}).status_code == 422

    assert client.delete(cart_url).status_code == 204
    assert client.get(cart_url).json() == []


def test_cart_rejects_unknown_or_unavailable_products(client, product):
    assert client.post(f"{API}/users/u1/cart", json={"productId": "missing"}).status_code == 404

    client.put(f"{API}/products/{product['id']}", json={"inStock": False})
    assert client.post(f"{API}/users/u1/cart", json={"productId": product["id"]}).status_code == 409


def test_remove_cart_item(client, product):
    item = client.post(f"{API}/users/u1/cart", json={"productId": product["id"]}).json()
    assert client.delete(f"{API}/cart/{item['id']}").status_code == 204
    assert client.delete(f"{API}/cart/{item['id']}").status_code == 404


def test_reviews_update_product_rating(client, product):
    url = f"{API}/reviews"
    r1 = client.post(url, json={"userId": "u1", "productId": product["id"], "rating": 5}).json()
    client.post(url, json={"userId": "u2", "productId": product["id"], "rating": 2})

    refreshed = client.get(f"{API}/products/{product['id']}").json()
    assert refreshed["rating"] == 3.5
    assert refreshed["totalReviews"] == 2

    client.put(f"{url}/{r1['id']}", json={"rating": 3})
    assert client.get(f"{API}/products/{product['id']}").json()["rating"] == 2.5

    assert client.delete(f"{url}/{r1['id']}").status_code == 204
    refreshed = client.get(f"{API}/products/{product['id']}").json()
    assert refreshed["rating"] == 2.0
    assert refreshed["totalReviews"] == 1


def test_review_needs_a_target(client):
    resp = client.post(f"{API}/reviews", json={"userId": "u1", "rating": 4})
    assert resp.status_code == 422


def test_review_rating_range(client, venue):
    resp = client.post(f"{API}/reviews", json={"userId": "u1", "venueId": venue["id"], "rating": 6})
    assert resp.status_code == 422


def test_venue_filters_and_rating_order(client, venue):
    other = client.post(f"{API}/venues", json={
        "name": "Green Field Arena",
        "address": "45 Park Road",
        "city": "Bangalore",
        "state": "Karnataka",
        "sports": ["football"],
        "pricePerHour": 1800.0,
        "ownerId": "owner-2",
    }).json()
    client.post(f"{API}/reviews", json={"userId": "u1", "venueId": other["id"], "rating": 4})

    ordered = client.get(f"{API}/venues").json()
    assert [v["id"] for v in ordered] == [other["id"], venue["id"]]

    cricket = client.get(f"{API}/venues", params={"sport": "cricket"}).json()
    assert [v["id"] for v in cricket] == [venue["id"]]
    assert len(client.get(f"{API}/venues", params={"city": "Bangalore"}).json()) == 1
    assert len(client.get(f"{API}/venues", params={"search": "park"}).json()) == 1
    assert client.get(f"{API}/reviews", params={"venue_id": other["id"]}).json()[0]["rating"] == 4


def test_bookings(client, venue):
    payload = {
        "venueId": venue["id"],
        "userId": "u1",
        "startTime": "2026-06-01T18:00:00",
        "endTime": "2026-06-01T20:00:00",
        "totalAmount": 5000.0,
    }
    booking = client.post(f"{API}/bookings", json=payload)
    assert booking.status_code == 201
    assert booking.json()["status"] == "confirmed"

    bad = client.post(f"{API}/bookings", json={**payload, "endTime": "2026-06-01T17:00:00"})
    assert bad.status_code == 422
    assert client.post(f"{API}/bookings", json={**payload, "venueId": "missing"}).status_code == 404

    assert len(client.get(f"{API}/bookings", params={"user_id": "u1"}).json()) == 1
    assert client.get(f"{API}/bookings", params={"user_id": "u2"}).json() == []

    booking_id = booking.json()["id"]
    paid = client.put(f"{API}/bookings/{booking_id}", json={"paymentStatus": "paid"})
    assert paid.json()["paymentStatus"] == "paid"
    assert client.delete(f"{API}/bookings/{booking_id}").status_code == 204

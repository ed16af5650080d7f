"""HTTP surface via TestClient."""

import pytest
from sqlalchemy.exc import OperationalError

from app.data.models import JewelryItemModel, OrderModel
from app.domain.enums import JewelryCategory
from app.services.order_service import OrderService


def _new_item_body(**overrides):
    body = {
        "name": "Tennis Bracelet",
        "description": "Line of round stones",
        "materials": "platinum, diamond",
        "category": "necklaces",
        "price": 250000,
        "image_url": None,
        "stock_quantity": 2,
        "is_featured": True,
    }
    body.update(overrides)
    return body


def _checkout_body(session_id, **overrides):
    body = {
        "session_id": session_id,
        "customer_name": "Grace Hopper",
        "customer_email": "grace@example.com",
        "shipping_address": "1 Navy Way, Arlington",
    }
    body.update(overrides)
    return body


def _add_to_cart(client, session_id, item_id, quantity):
    response = client.post(
        "/cart/items",
        json={"session_id": session_id, "jewelry_item_id": item_id, "quantity": quantity},
    )
    assert response.status_code == 200, response.text
    return response.json()


class TestHealth:
    def test_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestCatalogEndpoints:
    def test_list_and_filter(self, client, make_item):
        make_item(category=JewelryCategory.RINGS, is_featured=True)
        make_item(category=JewelryCategory.EARRINGS)

        assert len(client.get("/jewelry/").json()) == 2
        assert [i["category"] for i in client.get("/jewelry/", params={"category": "earrings"}).json()] == ["earrings"]
        assert [i["is_featured"] for i in client.get("/jewelry/featured").json()] == [True]
        assert client.get("/jewelry/", params={"category": "watches"}).status_code == 422

    def test_get_one(self, client, make_item):
        item = make_item(name="Hoops", price=4500)

        body = client.get(f"/jewelry/{item.id}").json()

        assert body["name"] == "Hoops"
        assert body["price"] == 4500
        assert client.get("/jewelry/9999").status_code == 404

    def test_create_requires_admin(self, client, db):
        response = client.post("/jewelry/", json=_new_item_body())

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert db.query(JewelryItemModel).count() == 0

    def test_create_with_bad_token(self, client, db, admin):
        response = client.post(
            "/jewelry/", json=_new_item_body(), headers={"Authorization": "Bearer not.a.token"}
        )

        assert response.status_code == 401
        assert db.query(JewelryItemModel).count() == 0

    def test_create(self, client, admin_headers):
        response = client.post("/jewelry/", json=_new_item_body(), headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["price"] == 250000

    def test_create_validation(self, client, admin_headers):
        assert client.post("/jewelry/", json=_new_item_body(price=0), headers=admin_headers).status_code == 422
        assert client.post("/jewelry/", json=_new_item_body(stock_quantity=-1), headers=admin_headers).status_code == 422
        assert client.post("/jewelry/", json=_new_item_body(name=""), headers=admin_headers).status_code == 422

    def test_update_and_delete(self, client, make_item, admin_headers):
        item = make_item(price=1000)

        assert client.patch(f"/jewelry/{item.id}", json={"price": 1100}).status_code == 401
        patched = client.patch(f"/jewelry/{item.id}", json={"price": 1100}, headers=admin_headers)
        assert patched.status_code == 200
        assert patched.json()["price"] == 1100
        assert client.patch(f"/jewelry/{item.id}", json={"name": None}, headers=admin_headers).status_code == 422

        assert client.delete(f"/jewelry/{item.id}").status_code == 401
        assert client.delete(f"/jewelry/{item.id}", headers=admin_headers).status_code == 204
        assert client.delete(f"/jewelry/{item.id}", headers=admin_headers).status_code == 404


class TestCartEndpoints:
    def test_add_get_update_remove(self, client, make_item):
        item = make_item(price=1999, stock_quantity=5)

        first = _add_to_cart(client, "sess", item.id, 1)
        again = _add_to_cart(client, "sess", item.id, 1)
        assert again["id"] == first["id"]
        assert again["quantity"] == 2
        assert again["jewelry_item"]["id"] == item.id

        cart = client.get("/cart/sess").json()
        assert cart["total_amount"] == 3998
        assert len(cart["items"]) == 1

        updated = client.patch(f"/cart/items/{first['id']}", json={"quantity": 4})
        assert updated.status_code == 200
        assert updated.json()["quantity"] == 4

        assert client.delete(f"/cart/items/{first['id']}").status_code == 204
        assert client.get("/cart/sess").json()["items"] == []

    def test_errors(self, client, make_item):
        item = make_item(stock_quantity=1)
        body = {"session_id": "sess", "jewelry_item_id": item.id, "quantity": 2}

        assert client.post("/cart/items", json=body).status_code == 400
        assert client.post("/cart/items", json={**body, "jewelry_item_id": 999}).status_code == 404
        assert client.post("/cart/items", json={**body, "quantity": 0}).status_code == 422
        assert client.post("/cart/items", json={**body, "session_id": "   "}).status_code == 422
        assert client.patch("/cart/items/999", json={"quantity": 1}).status_code == 404
        assert client.delete("/cart/items/999").status_code == 404


class TestCheckoutEndpoints:
    def test_place_and_fetch_order(self, client, make_item):
        a = make_item(price=1999, stock_quantity=3)
        b = make_item(price=599, stock_quantity=3)
        _add_to_cart(client, "sess", a.id, 2)
        _add_to_cart(client, "sess", b.id, 1)

        response = client.post("/orders/", json=_checkout_body("sess", notes="ring size N"))

        assert response.status_code == 201, response.text
        order = response.json()
        assert order["total_amount"] == 4597
        assert order["status"] == "pending"
        assert order["billing_address"] is None
        assert order["notes"] == "ring size N"
        assert {i["price_at_time"] for i in order["items"]} == {1999, 599}
        assert client.get("/cart/sess").json()["items"] == []

        fetched = client.get(f"/orders/{order['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["total_amount"] == 4597
        assert client.get(f"/jewelry/{a.id}").json()["stock_quantity"] == 1

    def test_second_checkout_is_rejected_as_empty(self, client, make_item):
        item = make_item(stock_quantity=3)
        _add_to_cart(client, "sess", item.id, 1)

        assert client.post("/orders/", json=_checkout_body("sess")).status_code == 201
        again = client.post("/orders/", json=_checkout_body("sess"))

        assert again.status_code == 400
        assert again.json()["detail"]["reason"] == "empty_cart"

    def test_insufficient_stock(self, client, db, make_item, put_in_cart):
        item = make_item(stock_quantity=1)
        put_in_cart("sess", item, 2)

        response = client.post("/orders/", json=_checkout_body("sess"))

        assert response.status_code == 400
        assert response.json()["detail"]["reason"] == "insufficient_stock"
        assert db.query(OrderModel).count() == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"customer_email": "not-an-email"},
            {"customer_name": ""},
            {"customer_name": "   "},
            {"shipping_address": ""},
            {"session_id": ""},
            {"session_id": "   "},
        ],
    )
    def test_validation_happens_before_store_access(self, client, db, make_item, put_in_cart, overrides):
        put_in_cart("sess", make_item(stock_quantity=5), 1)

        response = client.post("/orders/", json=_checkout_body(**{"session_id": "sess", **overrides}))

        assert response.status_code == 422
        assert db.query(OrderModel).count() == 0

    def test_storage_failure_is_generic_500(self, client, monkeypatch):
        def broken(self, payload):
            raise OperationalError("INSERT INTO orders", {}, Exception("connection lost"))

        monkeypatch.setattr(OrderService, "place_order", broken)

        response = client.post("/orders/", json=_checkout_body("sess"))

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    def test_missing_order(self, client):
        assert client.get("/orders/31337").status_code == 404


class TestAdminEndpoints:
    def test_login_and_verify(self, client, admin, admin_password):
        response = client.post("/admin/login", json={"username": "admin", "password": admin_password})
        assert response.status_code == 200
        token = response.json()["token"]

        verified = client.post("/admin/verify", json={"token": token})
        assert verified.status_code == 200
        assert verified.json()["id"] == admin.id
        assert "password_hash" not in verified.json()

    def test_failed_login(self, client, admin, admin_password):
        wrong_pw = client.post("/admin/login", json={"username": "admin", "password": "nope"})
        unknown = client.post("/admin/login", json={"username": "ghost", "password": admin_password})

        assert wrong_pw.status_code == unknown.status_code == 401
        assert wrong_pw.json() == unknown.json()

    def test_verify_rejects_garbage(self, client, admin):
        assert client.post("/admin/verify", json={"token": ""}).status_code == 401
        assert client.post("/admin/verify", json={"token": "x.y.z"}).status_code == 401

    def test_orders_require_admin(self, client, make_item, put_in_cart, admin_headers):
        put_in_cart("sess", make_item(stock_quantity=2), 1)
        order_id = client.post("/orders/", json=_checkout_body("sess")).json()["id"]

        assert client.get("/admin/orders").status_code == 401
        assert client.get("/admin/orders", headers={"Authorization": "Token abc"}).status_code == 401
        listed = client.get("/admin/orders", headers=admin_headers)
        assert listed.status_code == 200
        assert [o["id"] for o in listed.json()] == [order_id]

        path = f"/admin/orders/{order_id}/status"
        assert client.patch(path, json={"status": "shipped"}).status_code == 401
        assert client.get(f"/orders/{order_id}").json()["status"] == "pending"

        shipped = client.patch(path, json={"status": "shipped"}, headers=admin_headers)
        assert shipped.status_code == 200
        assert shipped.json()["status"] == "shipped"

        assert client.patch(path, json={"status": "lost"}, headers=admin_headers).status_code == 422
        assert client.patch("/admin/orders/999/status", json={"status": "shipped"}, headers=admin_headers).status_code == 404

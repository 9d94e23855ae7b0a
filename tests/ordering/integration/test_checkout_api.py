"""Integration tests for Checkout API endpoints via TestClient."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from ordering.api import checkout_error_handler, checkout_router
from ordering.coupons import set_coupon_resolver
from ordering.coupons.fake_adapter import FakeCouponResolver
from ordering.exceptions import CheckoutError
from ordering.store import set_order_store
from ordering.store.fake_adapter import InMemoryOrderStore
from payments.method.selector import PaymentMethod
from payments.redirect import get_redirector, reset_redirector, set_redirector
from payments.redirect.browser_adapter import BrowserRedirector
from payments.redirect.link_adapter import LinkRedirector


@pytest.fixture()
def store():
    store = InMemoryOrderStore()
    set_order_store(store)
    return store


@pytest.fixture()
def coupons():
    coupons = FakeCouponResolver({"123": 50})
    set_coupon_resolver(coupons)
    return coupons


@pytest.fixture()
def redirector():
    redirector = LinkRedirector()
    set_redirector(redirector)
    return redirector


@pytest.fixture()
def client(store, coupons, redirector):
    app = FastAPI()
    app.include_router(checkout_router)
    app.add_exception_handler(CheckoutError, checkout_error_handler)
    return TestClient(app)


def _checkout(client, coupon_id=None, items=None):
    body = {"items": items if items is not None else [{"productId": "prod-001", "unitPrice": 100, "quantity": 2}]}
    if coupon_id is not None:
        body["couponId"] = coupon_id
    return client.post("/checkout", json=body)


class TestCheckoutEndpoint:
    def test_checkout_without_coupon(self, client, store, redirector):
        response = _checkout(client)

        assert response.status_code == 201
        data = response.json()
        assert data["total_price"] == 200
        assert data["payment_method"] == "CREDIT"
        assert data["payment_url"] == f"https://payment.example.com/pay?orderId={data['order_id']}"

        stored = store.get(data["order_id"])
        assert stored is not None
        assert stored.payment_method == PaymentMethod.CREDIT
        assert redirector.link == data["payment_url"]

    def test_checkout_with_coupon(self, client, coupons):
        response = _checkout(client, coupon_id="123")

        assert response.status_code == 201
        assert response.json()["total_price"] == 150
        assert coupons.calls == ["123"]

    def test_accepts_snake_case_fields(self, client):
        response = client.post(
            "/checkout",
            json={"items": [{"product_id": "prod-001", "unit_price": 10, "quantity": 3}], "coupon_id": "123"},
        )
        assert response.status_code == 201
        assert response.json()["total_price"] == 0

    def test_empty_cart_returns_422(self, client, store):
        response = _checkout(client, items=[])

        assert response.status_code == 422
        assert response.json() == {"error": "ValidationError", "messages": {"items": ["items required"]}}
        assert store.calls == []

    def test_invalid_item_returns_422(self, client):
        response = _checkout(client, items=[{"productId": "prod-001", "unitPrice": 0, "quantity": 1}])

        assert response.status_code == 422
        assert response.json()["messages"] == {"items": ["items invalid"]}

    def test_unknown_coupon_returns_400(self, client, store, redirector):
        response = _checkout(client, coupon_id="UNKNOWN")

        assert response.status_code == 400
        assert response.json() == {"error": "CouponError", "messages": {"coupon_id": ["invalid coupon"]}}
        assert store.calls == []
        assert redirector.link is None

    def test_store_failure_returns_502(self, client, store, redirector):
        store.configure(should_succeed=False)

        response = _checkout(client)

        assert response.status_code == 502
        assert response.json()["error"] == "PersistenceError"
        assert redirector.link is None

    def test_payment_url_is_the_issued_link(self, client):
        redirector = LinkRedirector(base_url="https://other.example/checkout")
        set_redirector(redirector)

        response = _checkout(client)

        assert response.status_code == 201
        data = response.json()
        assert data["payment_url"] == f"https://other.example/checkout?orderId={data['order_id']}"
        assert redirector.link == data["payment_url"]

    def test_payment_url_follows_browser_redirector(self, client):
        redirector = BrowserRedirector(base_url="https://pay.test/p")
        set_redirector(redirector)

        with patch("payments.redirect.browser_adapter.webbrowser.open", return_value=True) as mock_open:
            response = _checkout(client)

        data = response.json()
        assert data["payment_url"] == f"https://pay.test/p?orderId={data['order_id']}"
        mock_open.assert_called_once_with(data["payment_url"], new=2)

    def test_default_redirector_keeps_no_state_between_checkouts(self, store, coupons):
        reset_redirector()
        app = FastAPI()
        app.include_router(checkout_router)
        client = TestClient(app)

        first = _checkout(client).json()
        second = _checkout(client).json()

        assert first["payment_url"].endswith(f"orderId={first['order_id']}")
        assert second["payment_url"].endswith(f"orderId={second['order_id']}")
        assert get_redirector() is not get_redirector()

    def test_error_responses_are_documented(self, client):
        schema = client.get("/openapi.json").json()
        responses = schema["paths"]["/checkout"]["post"]["responses"]

        for status in ("400", "422", "502"):
            assert responses[status]["content"]["application/json"]["schema"] == {
                "$ref": "#/components/schemas/ErrorResponse"
            }

    def test_malformed_body_rejected_by_schema(self, client):
        response = client.post("/checkout", json={"items": [{"productId": "p"}]})
        assert response.status_code == 422


class TestPaymentMethodsEndpoint:
    @pytest.mark.parametrize(
        ("total_price", "expected"),
        [
            (250000, ["CREDIT", "PAYPAY", "AUPAY"]),
            (350000, ["CREDIT", "PAYPAY"]),
            (600000, ["CREDIT"]),
            (0, ["CREDIT", "PAYPAY", "AUPAY"]),
        ],
    )
    def test_lists_eligible_methods(self, client, total_price, expected):
        response = client.get("/checkout/payment-methods", params={"total_price": total_price})

        assert response.status_code == 200
        assert response.json() == {"total_price": total_price, "payment_methods": expected}

    def test_total_price_required(self, client):
        response = client.get("/checkout/payment-methods")
        assert response.status_code == 422

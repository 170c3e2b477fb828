"""
Pytest Configuration and Centralized Fixtures.

Provides reusable fixtures for testing:
- PayPal JSON bodies (orders, captures, errors, tokens)
- A fake PayPal API served through httpx.MockTransport
- A PaypalClient wired to the fake API with a pre-issued token
"""

import copy
import os
from collections.abc import Iterator
from typing import Any

import httpx
import pytest
import structlog

# Keep a developer's real credentials out of the test run
for _var in ("PAYPAL_CLIENT_ID", "PAYPAL_CLIENT_SECRET", "PAYPAL_BASE_URL", "PAYPAL_ENVIRONMENT"):
    os.environ.pop(_var, None)

from paypal_checkout.client import PaypalClient
from paypal_checkout.models.auth import AccessToken

CLIENT_ID = "AYSq3RDGsmBLJE-otTkBtM-jBRd1TCQwFf9RGfwddNXWz0uFU9ztymylOhRS"
CLIENT_SECRET = "EGnHDxD_qRPdaLdZz8iCr8N7_MzF-YHPTkjs6NKYQvQSBngp4PTTVWkPZRbL"
ORDER_ID = "5O190127TN364715T"
CAPTURE_ID = "3C679366HH908993F"

# ============================================================================
# PayPal JSON Bodies
# ============================================================================

ORDER_JSON: dict[str, Any] = {
    "id": ORDER_ID,
    "status": "CREATED",
    "intent": "CAPTURE",
    "create_time": "2024-05-01T12:00:00Z",
    "purchase_units": [
        {
            "reference_id": "default",
            "amount": {
                "currency_code": "USD",
                "value": "100.00",
                "breakdown": {
                    "item_total": {"currency_code": "USD", "value": "90.00"},
                    "tax_total": {"currency_code": "USD", "value": "10.00"},
                },
            },
            "payee": {
                "email_address": "merchant@example.com",
                "merchant_id": "C7CYMKZDG8D6E",
            },
            "items": [
                {
                    "name": "T-Shirt",
                    "unit_amount": {"currency_code": "USD", "value": "45.00"},
                    "tax": {"currency_code": "USD", "value": "5.00"},
                    "quantity": "2",
                    "sku": "TSHIRT-BLUE-M",
                    "category": "PHYSICAL",
                }
            ],
        }
    ],
    "links": [
        {
            "href": f"https://api-m.sandbox.paypal.com/v2/checkout/orders/{ORDER_ID}",
            "rel": "self",
            "method": "GET",
        },
        {
            "href": f"https://www.sandbox.paypal.com/checkoutnow?token={ORDER_ID}",
            "rel": "approve",
            "method": "GET",
        },
        {
            "href": f"https://api-m.sandbox.paypal.com/v2/checkout/orders/{ORDER_ID}",
            "rel": "update",
            "method": "PATCH",
        },
        {
            "href": f"https://api-m.sandbox.paypal.com/v2/checkout/orders/{ORDER_ID}/capture",
            "rel": "capture",
            "method": "POST",
        },
    ],
}

COMPLETED_ORDER_JSON: dict[str, Any] = {
    "id": ORDER_ID,
    "status": "COMPLETED",
    "payer": {
        "name": {"given_name": "John", "surname": "Doe"},
        "email_address": "customer@example.com",
        "payer_id": "QYR5Z8XDVJNXQ",
        "address": {"country_code": "US"},
    },
    "payment_source": {
        "card": {"last_digits": "1111", "brand": "VISA", "type": "CREDIT"},
    },
    "purchase_units": [
        {
            "reference_id": "default",
            "amount": {"currency_code": "USD", "value": "100.00"},
            "shipping": {
                "name": "John Doe",
                "address": {
                    "address_line_1": "2211 N First Street",
                    "admin_area_2": "San Jose",
                    "admin_area_1": "CA",
                    "postal_code": "95131",
                    "country_code": "US",
                },
            },
            "payments": {
                "captures": [{"status": "COMPLETED"}],
            },
        }
    ],
    "links": [
        {
            "href": f"https://api-m.sandbox.paypal.com/v2/checkout/orders/{ORDER_ID}",
            "rel": "self",
            "method": "GET",
        }
    ],
}

CAPTURE_JSON: dict[str, Any] = {
    "id": CAPTURE_ID,
    "status": "COMPLETED",
    "amount": {"currency_code": "USD", "value": "100.00"},
    "final_capture": True,
    "seller_protection": {
        "status": "ELIGIBLE",
        "dispute_categories": ["ITEM_NOT_RECEIVED", "UNAUTHORIZED_TRANSACTION"],
    },
    "seller_receivable_breakdown": {
        "gross_amount": {"currency_code": "USD", "value": "100.00"},
        "paypal_fee": {"currency_code": "USD", "value": "3.98"},
        "net_amount": {"currency_code": "USD", "value": "96.02"},
    },
    "supplementary_data": {"related_ids": {"order_id": ORDER_ID}},
    "create_time": "2024-05-01T12:05:00Z",
    "update_time": "2024-05-01T12:05:00Z",
    "links": [
        {
            "href": f"https://api-m.sandbox.paypal.com/v2/payments/captures/{CAPTURE_ID}",
            "rel": "self",
            "method": "GET",
        },
        {
            "href": f"https://api-m.sandbox.paypal.com/v2/payments/captures/{CAPTURE_ID}/refund",
            "rel": "refund",
            "method": "POST",
        },
    ],
}

UNPROCESSABLE_JSON: dict[str, Any] = {
    "name": "UNPROCESSABLE_ENTITY",
    "message": (
        "The requested action could not be performed, semantically incorrect, "
        "or failed business validation."
    ),
    "debug_id": "f3b2e1c9a0d4e",
    "details": [
        {
            "issue": "ORDER_NOT_APPROVED",
            "description": "Payer has not yet approved the Order for payment.",
        }
    ],
    "links": [
        {
            "href": "https://developer.paypal.com/docs/api/orders/v2/#error-ORDER_NOT_APPROVED",
            "rel": "information_link",
            "method": "GET",
        }
    ],
}

TOKEN_JSON: dict[str, Any] = {
    "scope": "https://uri.paypal.com/services/payments/payment",
    "access_token": "A21AAFakeAccessTokenFromOAuth",
    "token_type": "Bearer",
    "app_id": "APP-80W284485P519543T",
    "expires_in": 32400,
    "nonce": "2024-05-01T12:00:00Z-nonce",
}


@pytest.fixture
def order_json() -> dict[str, Any]:
    """A freshly created order body."""
    return copy.deepcopy(ORDER_JSON)


@pytest.fixture
def completed_order_json() -> dict[str, Any]:
    """A captured order body with payer, payment source and payments."""
    return copy.deepcopy(COMPLETED_ORDER_JSON)


@pytest.fixture
def capture_json() -> dict[str, Any]:
    """A captured payment body."""
    return copy.deepcopy(CAPTURE_JSON)


@pytest.fixture
def unprocessable_json() -> dict[str, Any]:
    """A 422 error body."""
    return copy.deepcopy(UNPROCESSABLE_JSON)


@pytest.fixture
def token_json() -> dict[str, Any]:
    """An OAuth client-credentials token body."""
    return copy.deepcopy(TOKEN_JSON)


# ============================================================================
# Fake PayPal API
# ============================================================================


class FakePaypalApi:
    """Routes requests to canned responses and records every request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any] | Exception] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status_code: int = 200, json: Any = None) -> None:
        """Answer method + path with a JSON body."""
        self.routes[(method, path)] = (status_code, json)

    def add_raw(self, method: str, path: str, status_code: int, content: bytes) -> None:
        """Answer method + path with a raw body."""
        self.routes[(method, path)] = (status_code, content)

    def fail(self, method: str, path: str, exc: Exception) -> None:
        """Raise a transport exception for method + path."""
        self.routes[(method, path)] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(
                404,
                json={"name": "RESOURCE_NOT_FOUND", "message": "No route in fake API"},
            )
        if isinstance(route, Exception):
            raise route

        status_code, body = route
        if isinstance(body, bytes):
            return httpx.Response(status_code, content=body)
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def paypal_api() -> FakePaypalApi:
    """Fake PayPal API with no routes."""
    return FakePaypalApi()


@pytest.fixture
def http_client(paypal_api: FakePaypalApi) -> httpx.AsyncClient:
    """httpx client served by the fake API."""
    return httpx.AsyncClient(transport=httpx.MockTransport(paypal_api.handler))


@pytest.fixture
def access_token() -> AccessToken:
    """A valid pre-issued access token."""
    return AccessToken(
        access_token="A21AAPreIssuedToken",
        token_type="Bearer",
        expires_in=32400,
        app_id="APP-80W284485P519543T",
    )


@pytest.fixture
def client(http_client: httpx.AsyncClient, access_token: AccessToken) -> PaypalClient:
    """PaypalClient talking to the fake API, already authenticated."""
    return PaypalClient(
        CLIENT_ID,
        CLIENT_SECRET,
        access_token=access_token,
        http_client=http_client,
    )


@pytest.fixture
def unauthenticated_client(http_client: httpx.AsyncClient) -> PaypalClient:
    """PaypalClient talking to the fake API, without a token."""
    return PaypalClient(CLIENT_ID, CLIENT_SECRET, http_client=http_client)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration made by a test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()

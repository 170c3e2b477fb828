"""
Tests for exception classes.

Covers all exception types and their string representations.
"""

import httpx
import pytest

from paypal_checkout.exceptions import (
    ApiError,
    AuthenticationError,
    PaypalClientError,
    ResponseDecodeError,
    TransportError,
    WebhookVerificationError,
)
from paypal_checkout.models import IdentityErrorBody, PaypalErrorBody


class TestPaypalClientError:
    """Tests for base PaypalClientError."""

    def test_is_exception(self):
        assert issubclass(PaypalClientError, Exception)

    @pytest.mark.parametrize(
        "exc_class",
        [
            ApiError,
            AuthenticationError,
            ResponseDecodeError,
            TransportError,
            WebhookVerificationError,
        ],
    )
    def test_subclasses(self, exc_class):
        """Every client error can be caught as PaypalClientError."""
        assert issubclass(exc_class, PaypalClientError)

    def test_error_kinds_are_distinct(self):
        """Transport, API and decode failures never overlap."""
        assert not issubclass(ApiError, TransportError)
        assert not issubclass(TransportError, ApiError)
        assert not issubclass(ResponseDecodeError, ApiError)


class TestTransportError:
    """Tests for TransportError."""

    def test_attributes(self):
        cause = httpx.ConnectError("Connection refused")
        exc = TransportError("GET", "https://api-m.sandbox.paypal.com/v2/checkout/orders/X", cause)

        assert exc.method == "GET"
        assert exc.url.endswith("/orders/X")
        assert exc.cause is cause

    def test_message_format(self):
        exc = TransportError("POST", "https://example.test/x", httpx.ReadTimeout("timed out"))

        assert "POST https://example.test/x" in str(exc)
        assert "ReadTimeout" in str(exc)
        assert "timed out" in str(exc)


class TestApiError:
    """Tests for ApiError."""

    def test_attributes(self, unprocessable_json):
        error = PaypalErrorBody.model_validate(unprocessable_json)
        exc = ApiError(422, error)

        assert exc.status_code == 422
        assert exc.error is error
        assert exc.name == "UNPROCESSABLE_ENTITY"
        assert exc.debug_id == "f3b2e1c9a0d4e"
        assert exc.details[0].issue == "ORDER_NOT_APPROVED"

    def test_message_format(self):
        exc = ApiError(
            400,
            PaypalErrorBody(name="INVALID_REQUEST", message="Request is not well-formed"),
        )

        assert str(exc) == "PayPal API error 400 INVALID_REQUEST: Request is not well-formed"

    def test_no_debug_id(self):
        exc = ApiError(500, PaypalErrorBody(name="INTERNAL_SERVER_ERROR", message="x"))

        assert exc.debug_id is None
        assert exc.details == []


class TestResponseDecodeError:
    """Tests for ResponseDecodeError."""

    def test_attributes(self):
        exc = ResponseDecodeError(200, "1 validation error for Order")

        assert exc.status_code == 200
        assert exc.message == "1 validation error for Order"
        assert "status 200" in str(exc)


class TestAuthenticationError:
    """Tests for AuthenticationError."""

    def test_uses_description(self):
        exc = AuthenticationError(
            401,
            IdentityErrorBody(error="invalid_client", error_description="Client Authentication failed"),
        )

        assert exc.status_code == 401
        assert exc.error.error == "invalid_client"
        assert str(exc) == "Authentication failed (401): Client Authentication failed"

    def test_falls_back_to_error_code(self):
        exc = AuthenticationError(401, IdentityErrorBody(error="invalid_client"))

        assert "invalid_client" in str(exc)


class TestWebhookVerificationError:
    """Tests for WebhookVerificationError."""

    def test_message_format(self):
        exc = WebhookVerificationError("Missing headers: PAYPAL-AUTH-ALGO")

        assert exc.message == "Missing headers: PAYPAL-AUTH-ALGO"
        assert "Webhook verification error" in str(exc)

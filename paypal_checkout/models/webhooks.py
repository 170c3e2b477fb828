"""
Webhook Models - Signature verification request and result.

PayPal is the sole authority on whether a webhook is authentic; these models
only carry the transmission metadata to its verification endpoint.

Reference: https://developer.paypal.com/api/webhooks/v1/#verify-webhook-signature
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Generic, TypeVar

import httpx

from paypal_checkout.exceptions import WebhookVerificationError
from paypal_checkout.models.base import PaypalModel

EventT = TypeVar("EventT")

# Notification header -> payload field
TRANSMISSION_HEADERS = {
    "PAYPAL-TRANSMISSION-ID": "transmission_id",
    "PAYPAL-TRANSMISSION-TIME": "transmission_time",
    "PAYPAL-CERT-URL": "cert_url",
    "PAYPAL-AUTH-ALGO": "auth_algo",
    "PAYPAL-TRANSMISSION-SIG": "transmission_sig",
}


class VerificationStatus(str, Enum):
    """The status of the signature verification."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class Verification(PaypalModel):
    """POST /v1/notifications/verify-webhook-signature response."""

    verification_status: VerificationStatus

    def is_verified(self) -> bool:
        """Check if PayPal confirmed the signature."""
        return self.verification_status == VerificationStatus.SUCCESS


class WebhookVerificationPayload(PaypalModel, Generic[EventT]):
    """
    POST /v1/notifications/verify-webhook-signature request body.

    Generic over the caller's event shape: a plain dict, or any pydantic
    model describing the notification.
    """

    transmission_id: str  # PAYPAL-TRANSMISSION-ID header
    transmission_time: str  # PAYPAL-TRANSMISSION-TIME header, RFC 3339
    cert_url: str  # PAYPAL-CERT-URL header
    auth_algo: str  # PAYPAL-AUTH-ALGO header
    transmission_sig: str  # PAYPAL-TRANSMISSION-SIG header
    webhook_id: str  # As configured in the Developer Portal
    webhook_event: EventT

    @classmethod
    def from_headers(
        cls,
        headers: Mapping[str, str],
        webhook_id: str,
        webhook_event: Any,
    ) -> "WebhookVerificationPayload[Any]":
        """
        Build the payload from the headers of a received notification.

        Args:
            headers: Notification request headers (any casing)
            webhook_id: ID of the webhook the notification was sent to
            webhook_event: Parsed notification body

        Returns:
            Verification payload

        Raises:
            WebhookVerificationError: If a transmission header is missing
        """
        normalized = httpx.Headers(dict(headers))
        missing = [name for name in TRANSMISSION_HEADERS if not normalized.get(name)]
        if missing:
            raise WebhookVerificationError(f"Missing headers: {', '.join(missing)}")

        fields = {field: normalized[name] for name, field in TRANSMISSION_HEADERS.items()}
        return cls(webhook_id=webhook_id, webhook_event=webhook_event, **fields)

"""
Webhooks Service - Signature verification through PayPal.

No local cryptography: PayPal checks the signature and answers SUCCESS or
FAILURE.
"""

from typing import TYPE_CHECKING, Any

from structlog import get_logger

from paypal_checkout.headers import HeaderParams
from paypal_checkout.models.webhooks import Verification, WebhookVerificationPayload

if TYPE_CHECKING:
    from paypal_checkout.client import PaypalClient

logger = get_logger(__name__)

VERIFY_SIGNATURE_PATH = "/v1/notifications/verify-webhook-signature"


class WebhooksService:
    """Notifications v1 webhook operations."""

    def __init__(self, client: "PaypalClient") -> None:
        self.client = client

    async def verify_signature(
        self,
        payload: WebhookVerificationPayload[Any],
        headers: HeaderParams | None = None,
    ) -> Verification:
        """
        Ask PayPal to verify a webhook notification signature.

        Caller headers are forwarded like on any other call.

        Args:
            payload: Transmission metadata and the received event
            headers: Optional request headers

        Returns:
            Verification with SUCCESS or FAILURE status

        Raises:
            ApiError: If PayPal rejects the request
            TransportError: If the request could not be completed
            ResponseDecodeError: If the status is not SUCCESS or FAILURE
        """
        logger.info(
            "verifying_paypal_webhook_signature",
            transmission_id=payload.transmission_id,
            webhook_id=payload.webhook_id,
            auth_algo=payload.auth_algo,
        )

        verification = await self.client.send(
            "POST",
            VERIFY_SIGNATURE_PATH,
            Verification,
            headers=headers,
            json=payload.to_payload(),
        )

        if verification.is_verified():
            logger.info(
                "paypal_webhook_signature_verified",
                transmission_id=payload.transmission_id,
            )
        else:
            logger.warning(
                "paypal_webhook_signature_rejected",
                transmission_id=payload.transmission_id,
            )
        return verification

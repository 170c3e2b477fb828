"""
Payments Service - Captured payment lookup.
"""

from typing import TYPE_CHECKING
from urllib.parse import quote

from structlog import get_logger

from paypal_checkout.headers import HeaderParams
from paypal_checkout.models.payments import Payment

if TYPE_CHECKING:
    from paypal_checkout.client import PaypalClient

logger = get_logger(__name__)

CAPTURES_PATH = "/v2/payments/captures"


class PaymentsService:
    """Payments v2 captured payment operations."""

    def __init__(self, client: "PaypalClient") -> None:
        self.client = client

    async def show_captured_payment(
        self,
        capture_id: str,
        headers: HeaderParams | None = None,
    ) -> Payment:
        """
        Show details for a captured payment, by ID.

        Raises:
            ApiError: If PayPal rejects the request
            TransportError: If the request could not be completed
        """
        logger.info("getting_paypal_capture", capture_id=capture_id)

        payment = await self.client.send(
            "GET",
            f"{CAPTURES_PATH}/{quote(capture_id, safe='')}",
            Payment,
            headers=headers,
        )

        logger.info(
            "paypal_capture_retrieved",
            capture_id=payment.id,
            status=payment.status.value if payment.status else None,
        )
        return payment

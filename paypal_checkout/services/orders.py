"""
Orders Service - Create, show, update, capture and authorize orders.

NO DICTIONARIES - All data uses strongly typed models.

Reference: https://developer.paypal.com/docs/api/orders/v2/
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING
from urllib.parse import quote

from structlog import get_logger

from paypal_checkout.headers import HeaderParams
from paypal_checkout.models.orders import Intent, Order, OrderPayload, PurchaseUnit
from paypal_checkout.models.patch import build_order_patch

if TYPE_CHECKING:
    from paypal_checkout.client import PaypalClient

logger = get_logger(__name__)

ORDERS_PATH = "/v2/checkout/orders"


def order_path(order_id: str, action: str | None = None) -> str:
    """Path of an order, or of one of its sub-resources."""
    path = f"{ORDERS_PATH}/{quote(order_id, safe='')}"
    if action:
        path += f"/{action}"
    return path


class OrdersService:
    """
    Orders v2 operations.

    The service never tracks order state. Whether an order can be captured
    or authorized is for PayPal to decide.
    """

    def __init__(self, client: "PaypalClient") -> None:
        self.client = client

    async def create_order(
        self,
        payload: OrderPayload,
        headers: HeaderParams | None = None,
    ) -> Order:
        """
        Create an order.

        Args:
            payload: Intent and purchase units. PayPal rejects an empty unit list.
            headers: Optional request headers (request id, prefer, ...)

        Returns:
            The created order

        Raises:
            ApiError: If PayPal rejects the request
            TransportError: If the request could not be completed
            ResponseDecodeError: If the response does not match the schema
        """
        logger.info(
            "creating_paypal_order",
            intent=payload.intent.value,
            purchase_units=len(payload.purchase_units),
            request_id=headers.request_id if headers else None,
        )

        order = await self.client.send(
            "POST",
            ORDERS_PATH,
            Order,
            headers=headers,
            json=payload.to_payload(),
        )

        logger.info("paypal_order_created", order_id=order.id, status=order.status.value)
        return order

    async def show_order_details(
        self,
        order_id: str,
        headers: HeaderParams | None = None,
    ) -> Order:
        """Show details for an order, by ID."""
        logger.info("getting_paypal_order", order_id=order_id)

        order = await self.client.send("GET", order_path(order_id), Order, headers=headers)

        logger.info("paypal_order_retrieved", order_id=order.id, status=order.status.value)
        return order

    async def capture_order(
        self,
        order_id: str,
        headers: HeaderParams | None = None,
    ) -> Order:
        """
        Capture payment for an order.

        The payer must have approved the order first, through the "approve"
        link returned on creation.
        """
        logger.info("capturing_paypal_order", order_id=order_id)

        order = await self.client.send(
            "POST", order_path(order_id, "capture"), Order, headers=headers
        )

        logger.info("paypal_order_captured", order_id=order.id, status=order.status.value)
        return order

    async def authorize_order(
        self,
        order_id: str,
        headers: HeaderParams | None = None,
    ) -> Order:
        """
        Authorize payment for an order.

        The payer must have approved the order first, through the "approve"
        link returned on creation.
        """
        logger.info("authorizing_paypal_order", order_id=order_id)

        order = await self.client.send(
            "POST", order_path(order_id, "authorize"), Order, headers=headers
        )

        logger.info("paypal_order_authorized", order_id=order.id, status=order.status.value)
        return order

    async def update_order(
        self,
        order_id: str,
        intent: Intent | None = None,
        purchase_units: Sequence[PurchaseUnit] | None = None,
        headers: HeaderParams | None = None,
    ) -> None:
        """
        Replace the intent and/or purchase units of a CREATED or APPROVED order.

        Purchase units are addressed by reference_id ("default" when unset).
        Calling with nothing to update still sends a PATCH with an empty
        operation list. The request is always sent as application/json.

        Raises:
            ApiError: If PayPal rejects the update
            TransportError: If the request could not be completed
        """
        operations = build_order_patch(intent, purchase_units)
        request_headers = (headers or HeaderParams()).with_json_content()

        logger.info(
            "updating_paypal_order",
            order_id=order_id,
            paths=[operation.path for operation in operations],
        )

        await self.client.send_without_result(
            "PATCH",
            order_path(order_id),
            headers=request_headers,
            json=[operation.to_payload() for operation in operations],
        )

        logger.info("paypal_order_updated", order_id=order_id, operations=len(operations))

"""
Payments API Models - Captured payment resource.

Reference: https://developer.paypal.com/docs/api/payments/v2/#captures
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from paypal_checkout.models.base import PaypalModel
from paypal_checkout.models.common import LinkDescription, Money
from paypal_checkout.models.orders import Amount, CaptureStatus, CaptureStatusDetails


class SellerProtectionStatus(str, Enum):
    """Whether the transaction is eligible for seller protection."""

    ELIGIBLE = "ELIGIBLE"
    PARTIALLY_ELIGIBLE = "PARTIALLY_ELIGIBLE"
    NOT_ELIGIBLE = "NOT_ELIGIBLE"


class SellerProtection(PaypalModel):
    """Seller protection level for a captured payment."""

    dispute_categories: list[str] = Field(default_factory=list)
    status: SellerProtectionStatus


class RelatedIds(PaypalModel):
    """Identifiers related to the capture."""

    order_id: str


class SupplementaryData(PaypalModel):
    """Supplementary data about the capture."""

    related_ids: RelatedIds


class SellerReceivableBreakdown(PaypalModel):
    """What the payee receives after PayPal fees."""

    paypal_fee: Money
    gross_amount: Money
    net_amount: Money


class Payment(PaypalModel):
    """A captured payment, as returned by GET /v2/payments/captures/{id}."""

    amount: Amount
    links: list[LinkDescription]
    id: str | None = None
    status: CaptureStatus | None = None
    status_details: CaptureStatusDetails | None = None
    seller_protection: SellerProtection | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    final_capture: bool | None = None
    seller_receivable_breakdown: SellerReceivableBreakdown | None = None
    custom_id: str | None = None
    supplementary_data: SupplementaryData | None = None

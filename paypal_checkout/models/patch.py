"""
JSON Patch operations for PATCH /v2/checkout/orders/{id}.

PayPal addresses purchase units by reference id, never by position.

Reference: https://developer.paypal.com/docs/api/orders/v2/#orders_patch
"""

from collections.abc import Sequence
from typing import Any, Literal

from paypal_checkout.models.base import PaypalModel
from paypal_checkout.models.orders import Intent, PurchaseUnit

DEFAULT_REFERENCE_ID = "default"


class PatchOperation(PaypalModel):
    """A single JSON Patch replace operation."""

    op: Literal["replace"] = "replace"
    path: str
    value: Any


def purchase_unit_path(unit: PurchaseUnit) -> str:
    """Patch path addressing a purchase unit by its reference id."""
    reference_id = unit.reference_id or DEFAULT_REFERENCE_ID
    return f"/purchase_units/@reference_id='{reference_id}'"


def build_order_patch(
    intent: Intent | None = None,
    purchase_units: Sequence[PurchaseUnit] | None = None,
) -> list[PatchOperation]:
    """
    Build the replace operations for an order update.

    The intent operation comes first, then one operation per purchase unit
    in the given order. Nothing to update yields an empty list.
    """
    operations: list[PatchOperation] = []

    if intent is not None:
        operations.append(PatchOperation(path="/intent", value=intent.value))

    for unit in purchase_units or ():
        operations.append(PatchOperation(path=purchase_unit_path(unit), value=unit.to_payload()))

    return operations

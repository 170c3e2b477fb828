"""
Error body models returned by PayPal on non-2xx responses.

Reference: https://developer.paypal.com/api/rest/responses/#link-errorresponses
"""

from typing import Any

from pydantic import Field

from paypal_checkout.models.base import PaypalModel
from paypal_checkout.models.common import LinkDescription


class PaypalErrorDetail(PaypalModel):
    """One issue reported by PayPal, usually tied to a request field."""

    issue: str  # e.g. "INVALID_PARAMETER_VALUE"
    field: str | None = None  # JSON pointer, e.g. "/purchase_units/@reference_id=='default'/amount"
    value: Any = None
    location: str | None = None  # body, path or query
    description: str | None = None


class PaypalErrorBody(PaypalModel):
    """Structured error returned by the REST APIs."""

    name: str  # e.g. "UNPROCESSABLE_ENTITY"
    message: str
    debug_id: str | None = None
    details: list[PaypalErrorDetail] = Field(default_factory=list)
    links: list[LinkDescription] = Field(default_factory=list)

    @property
    def issues(self) -> list[str]:
        """Issue codes of all details."""
        return [detail.issue for detail in self.details]


class IdentityErrorBody(PaypalModel):
    """Error returned by the OAuth token endpoint."""

    error: str  # e.g. "invalid_client"
    error_description: str | None = None

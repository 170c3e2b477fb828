"""
Common PayPal records shared by orders and payments.

NO FLOATS - Monetary values are decimal strings, exactly as PayPal sends them.
"""

from decimal import Decimal
from enum import Enum

from pydantic import Field, field_validator

from paypal_checkout.models.base import PaypalModel

# PayPal's documented pattern for money values
DECIMAL_VALUE_PATTERN = r"^((-?[0-9]+)|(-?([0-9]+)?[.][0-9]+))$"


class Currency(str, Enum):
    """ISO-4217 currency codes supported by PayPal."""

    AUD = "AUD"
    BRL = "BRL"
    CAD = "CAD"
    CNY = "CNY"
    CZK = "CZK"
    DKK = "DKK"
    EUR = "EUR"
    HKD = "HKD"
    HUF = "HUF"
    ILS = "ILS"
    INR = "INR"
    JPY = "JPY"
    MYR = "MYR"
    MXN = "MXN"
    TWD = "TWD"
    NZD = "NZD"
    NOK = "NOK"
    PHP = "PHP"
    PLN = "PLN"
    GBP = "GBP"
    RUB = "RUB"
    SGD = "SGD"
    SEK = "SEK"
    CHF = "CHF"
    THB = "THB"
    USD = "USD"


class Money(PaypalModel):
    """An amount of money in a given currency."""

    currency_code: Currency
    value: str = Field(..., max_length=32, pattern=DECIMAL_VALUE_PATTERN)

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: object) -> object:
        """Accept Decimal and int, reject float to avoid rounding error."""
        if isinstance(v, bool):
            raise ValueError("value must be a decimal string")
        if isinstance(v, float):
            raise ValueError("value must be a decimal string, not a float")
        if isinstance(v, Decimal):
            return format(v, "f")
        if isinstance(v, int):
            return str(v)
        return v

    def as_decimal(self) -> Decimal:
        """Return the value as a Decimal."""
        return Decimal(self.value)


class Address(PaypalModel):
    """A postal address."""

    address_line_1: str | None = None  # Street address
    address_line_2: str | None = None  # Suite or apartment number
    admin_area_2: str | None = None  # City, town, or village
    admin_area_1: str | None = None  # State, province, or prefecture
    postal_code: str | None = None
    country_code: str = Field(..., min_length=2, max_length=2)


class LinkMethod(str, Enum):
    """HTTP method required to make the related call."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"


class LinkDescription(PaypalModel):
    """A HATEOAS link returned with a resource."""

    href: str
    rel: str  # e.g. "self", "approve", "capture"
    method: LinkMethod | None = None


class PhoneType(str, Enum):
    """The phone type."""

    FAX = "FAX"
    HOME = "HOME"
    MOBILE = "MOBILE"
    OTHER = "OTHER"
    PAGER = "PAGER"

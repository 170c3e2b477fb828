"""
Orders API Models - Pydantic records for the Orders v2 resource.

NO DICTIONARIES - Every request and response body is strongly typed.

Reference: https://developer.paypal.com/docs/api/orders/v2/
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from paypal_checkout.models.base import PaypalModel
from paypal_checkout.models.common import Address, LinkDescription, Money, PhoneType

# ============================================================================
# Enumerations
# ============================================================================


class Intent(str, Enum):
    """Capture payment immediately, or authorize it and capture later."""

    CAPTURE = "CAPTURE"
    AUTHORIZE = "AUTHORIZE"  # Not supported with more than one purchase unit


class TaxIdType(str, Enum):
    """The customer's tax ID type. PayPal payment method only."""

    BR_CPF = "BR_CPF"  # Individual
    BR_CNPJ = "BR_CNPJ"  # Business


class DisbursementMode(str, Enum):
    """When the funds held on behalf of the merchant are released."""

    INSTANT = "INSTANT"
    DELAYED = "DELAYED"


class ItemCategoryType(str, Enum):
    """The item category type."""

    DIGITAL = "DIGITAL"
    PHYSICAL = "PHYSICAL"


class AuthorizationStatus(str, Enum):
    """The status for an authorized payment."""

    CREATED = "CREATED"
    CAPTURED = "CAPTURED"
    DENIED = "DENIED"
    EXPIRED = "EXPIRED"
    PARTIALLY_EXPIRED = "PARTIALLY_EXPIRED"
    PARTIALLY_CAPTURED = "PARTIALLY_CAPTURED"
    VOIDED = "VOIDED"
    PENDING = "PENDING"


class AuthorizationStatusDetailsReason(str, Enum):
    """Why an authorization is PENDING."""

    PENDING_REVIEW = "PENDING_REVIEW"


class CaptureStatus(str, Enum):
    """The status of a captured payment."""

    COMPLETED = "COMPLETED"
    DECLINED = "DECLINED"
    PARTIALLY_REFUNDED = "PARTIALLY_REFUNDED"
    PENDING = "PENDING"
    REFUNDED = "REFUNDED"


class CaptureStatusDetailsReason(str, Enum):
    """Why a captured payment is PENDING or DENIED."""

    BUYER_COMPLAINT = "BUYER_COMPLAINT"
    CHARGEBACK = "CHARGEBACK"
    ECHECK = "ECHECK"
    INTERNATIONAL_WITHDRAWAL = "INTERNATIONAL_WITHDRAWAL"
    OTHER = "OTHER"
    PENDING_REVIEW = "PENDING_REVIEW"
    RECEIVING_PREFERENCE_MANDATES_MANUAL_ACTION = "RECEIVING_PREFERENCE_MANDATES_MANUAL_ACTION"
    REFUNDED = "REFUNDED"
    TRANSACTION_APPROVED_AWAITING_FUNDING = "TRANSACTION_APPROVED_AWAITING_FUNDING"
    UNILATERAL = "UNILATERAL"
    VERIFICATION_REQUIRED = "VERIFICATION_REQUIRED"


class RefundStatus(str, Enum):
    """The status of a refund."""

    CANCELLED = "CANCELLED"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


class RefundStatusDetailsReason(str, Enum):
    """Why a refund is PENDING."""

    ECHECK = "ECHECK"


class LandingPage(str, Enum):
    """The landing page shown on the PayPal site for checkout."""

    LOGIN = "LOGIN"
    BILLING = "BILLING"
    NO_PREFERENCE = "NO_PREFERENCE"


class ShippingPreference(str, Enum):
    """Where the shipping address comes from."""

    GET_FROM_FILE = "GET_FROM_FILE"
    NO_SHIPPING = "NO_SHIPPING"
    SET_PROVIDED_ADDRESS = "SET_PROVIDED_ADDRESS"


class UserAction(str, Enum):
    """Continue or Pay Now checkout flow."""

    CONTINUE = "CONTINUE"
    PAY_NOW = "PAY_NOW"


class PayeePreferred(str, Enum):
    """The merchant-preferred payment sources."""

    UNRESTRICTED = "UNRESTRICTED"
    IMMEDIATE_PAYMENT_REQUIRED = "IMMEDIATE_PAYMENT_REQUIRED"


class CardBrand(str, Enum):
    """The card brand or network."""

    VISA = "VISA"
    MASTERCARD = "MASTERCARD"
    DISCOVER = "DISCOVER"
    AMEX = "AMEX"
    SOLO = "SOLO"
    JCB = "JCB"
    STAR = "STAR"
    DELTA = "DELTA"
    SWITCH = "SWITCH"
    MAESTRO = "MAESTRO"
    CB_NATIONALE = "CB_NATIONALE"
    CONFIGOGA = "CONFIGOGA"
    CONFIDIS = "CONFIDIS"
    ELECTRON = "ELECTRON"
    CETELEM = "CETELEM"
    CHINA_UNION_PAY = "CHINA_UNION_PAY"


class CardType(str, Enum):
    """The payment card type."""

    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    PREPAID = "PREPAID"
    UNKNOWN = "UNKNOWN"


class OrderStatus(str, Enum):
    """The order status."""

    CREATED = "CREATED"
    SAVED = "SAVED"
    APPROVED = "APPROVED"
    VOIDED = "VOIDED"
    COMPLETED = "COMPLETED"


# ============================================================================
# Payer Models
# ============================================================================


class PayerName(PaypalModel):
    """The name of the payer."""

    given_name: str
    surname: str


class PhoneNumber(PaypalModel):
    """A phone number in E.164 format."""

    national_number: str = Field(..., min_length=1, max_length=14)


class Phone(PaypalModel):
    """The payer's phone. Only present when the merchant enabled it."""

    phone_type: PhoneType | None = None
    phone_number: PhoneNumber


class TaxInfo(PaypalModel):
    """Tax information of the payer. Required only for Brazilian payers."""

    tax_id: str = Field(..., max_length=14)
    tax_id_type: TaxIdType


class Payer(PaypalModel):
    """The customer who approves and pays for the order."""

    name: PayerName | None = None
    email_address: str | None = None
    payer_id: str | None = None  # PayPal-assigned
    phone: Phone | None = None
    birth_date: str | None = None  # YYYY-MM-DD
    tax_info: TaxInfo | None = None
    address: Address | None = None


# ============================================================================
# Amount Models
# ============================================================================


class Breakdown(PaypalModel):
    """
    Sub-totals of a purchase unit amount.

    PayPal requires amount == item_total + tax_total + shipping + handling
    + insurance - shipping_discount - discount. The provider validates this.
    """

    item_total: Money | None = None
    shipping: Money | None = None
    handling: Money | None = None
    tax_total: Money | None = None
    insurance: Money | None = None
    shipping_discount: Money | None = None
    discount: Money | None = None


class Amount(Money):
    """The total amount of a purchase unit, with an optional breakdown."""

    breakdown: Breakdown | None = None


# ============================================================================
# Purchase Unit Models
# ============================================================================


class Payee(PaypalModel):
    """The merchant who receives payment for this transaction."""

    email_address: str | None = None
    merchant_id: str | None = None


class PlatformFee(PaypalModel):
    """A fee, commission, tip or donation."""

    amount: Money
    payee: Payee | None = None


class PaymentInstruction(PaypalModel):
    """Additional payment instructions for PayPal Commerce Platform customers."""

    platform_fees: list[PlatformFee] | None = None
    disbursement_mode: DisbursementMode | None = None


class ShippingDetail(PaypalModel):
    """Name and address of the person to whom to ship the items."""

    name: str | None = None  # full_name
    address: Address | None = None


class Item(PaypalModel):
    """An item the customer purchases from the merchant."""

    name: str = Field(..., min_length=1, max_length=127)
    unit_amount: Money
    tax: Money | None = None
    quantity: str  # Whole number, as a string
    description: str | None = None
    sku: str | None = None
    category: ItemCategoryType | None = None


class AuthorizationStatusDetails(PaypalModel):
    """Details about the status of an authorization."""

    reason: AuthorizationStatusDetailsReason


class Authorization(PaypalModel):
    """An authorized payment."""

    status: AuthorizationStatus
    status_details: AuthorizationStatusDetails | None = None


class CaptureStatusDetails(PaypalModel):
    """Details about the status of a captured payment."""

    reason: CaptureStatusDetailsReason


class Capture(PaypalModel):
    """A captured payment."""

    status: CaptureStatus
    status_details: CaptureStatusDetails | None = None


class RefundStatusDetails(PaypalModel):
    """Details about the status of a refund."""

    reason: RefundStatusDetailsReason


class Refund(PaypalModel):
    """A refund."""

    status: RefundStatus
    status_details: RefundStatusDetails | None = None


class PaymentCollection(PaypalModel):
    """The history of payments for a purchase unit, as reported by PayPal."""

    authorizations: list[Authorization] = Field(default_factory=list)
    captures: list[Capture] = Field(default_factory=list)
    refunds: list[Refund] = Field(default_factory=list)


class PurchaseUnit(PaypalModel):
    """
    A full or partial order that the payer intends to purchase from the payee.

    reference_id is the key PayPal uses to address the unit in a PATCH. When
    omitted on a single-unit order, PayPal sets it to "default".
    """

    reference_id: str | None = Field(None, max_length=256)
    amount: Amount
    payee: Payee | None = None
    payment_instruction: PaymentInstruction | None = None
    description: str | None = Field(None, max_length=127)
    custom_id: str | None = Field(None, max_length=127)
    invoice_id: str | None = Field(None, max_length=127)
    id: str | None = None  # PayPal-generated, only after the order is saved
    soft_descriptor: str | None = Field(None, max_length=22)
    items: list[Item] | None = None
    shipping: ShippingDetail | None = None
    payments: PaymentCollection | None = None


# ============================================================================
# Order Request Models
# ============================================================================


class PaymentMethod(PaypalModel):
    """The customer and merchant payment preferences."""

    payer_selected: str | None = None
    payee_preferred: PayeePreferred | None = None


class ApplicationContext(PaypalModel):
    """Customizes the payer experience during approval."""

    brand_name: str | None = Field(None, max_length=127)
    locale: str | None = None  # BCP 47, e.g. "en-US"
    landing_page: LandingPage | None = None
    shipping_preference: ShippingPreference | None = None
    user_action: UserAction | None = None
    payment_method: PaymentMethod | None = None
    return_url: str | None = None
    cancel_url: str | None = None


class OrderPayload(PaypalModel):
    """POST /v2/checkout/orders request body."""

    intent: Intent = Intent.CAPTURE
    payer: Payer | None = None
    purchase_units: list[PurchaseUnit]
    application_context: ApplicationContext | None = None


# ============================================================================
# Order Response Models
# ============================================================================


class CardResponse(PaypalModel):
    """The payment card used to fund a payment."""

    last_digits: str
    brand: CardBrand
    card_type: CardType = Field(..., alias="type")


class WalletResponse(PaypalModel):
    """The customer's wallet used to fund the transaction."""

    apple_pay: CardResponse


class PaymentSourceResponse(PaypalModel):
    """The payment source used to fund the payment."""

    card: CardResponse | None = None
    wallet: WalletResponse | None = None


class Order(PaypalModel):
    """
    An order represents a payment between two or more parties.

    Orders are never changed locally. Every operation returns the latest
    representation from PayPal, which replaces the previous one.
    """

    id: str
    status: OrderStatus
    links: list[LinkDescription]
    create_time: datetime | None = None
    update_time: datetime | None = None
    payment_source: PaymentSourceResponse | None = None
    intent: Intent | None = None
    payer: Payer | None = None
    purchase_units: list[PurchaseUnit] | None = None

    def link(self, rel: str) -> LinkDescription | None:
        """Find a HATEOAS link by relation, e.g. "approve"."""
        for link in self.links:
            if link.rel == rel:
                return link
        return None

    @property
    def approve_url(self) -> str | None:
        """URL to redirect the payer to for approval."""
        approve = self.link("approve") or self.link("payer-action")
        return approve.href if approve else None

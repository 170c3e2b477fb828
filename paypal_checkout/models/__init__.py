"""
PayPal data models - Immutable pydantic records mirroring the REST schemas.
"""

from paypal_checkout.models.auth import AccessToken
from paypal_checkout.models.base import PaypalModel
from paypal_checkout.models.common import (
    Address,
    Currency,
    LinkDescription,
    LinkMethod,
    Money,
    PhoneType,
)
from paypal_checkout.models.errors import IdentityErrorBody, PaypalErrorBody, PaypalErrorDetail
from paypal_checkout.models.orders import (
    Amount,
    ApplicationContext,
    Authorization,
    AuthorizationStatus,
    AuthorizationStatusDetails,
    AuthorizationStatusDetailsReason,
    Breakdown,
    Capture,
    CaptureStatus,
    CaptureStatusDetails,
    CaptureStatusDetailsReason,
    CardBrand,
    CardResponse,
    CardType,
    DisbursementMode,
    Intent,
    Item,
    ItemCategoryType,
    LandingPage,
    Order,
    OrderPayload,
    OrderStatus,
    Payee,
    PayeePreferred,
    Payer,
    PayerName,
    PaymentCollection,
    PaymentInstruction,
    PaymentMethod,
    PaymentSourceResponse,
    Phone,
    PhoneNumber,
    PlatformFee,
    PurchaseUnit,
    Refund,
    RefundStatus,
    RefundStatusDetails,
    RefundStatusDetailsReason,
    ShippingDetail,
    ShippingPreference,
    TaxIdType,
    TaxInfo,
    UserAction,
    WalletResponse,
)
from paypal_checkout.models.patch import PatchOperation, build_order_patch
from paypal_checkout.models.payments import (
    Payment,
    RelatedIds,
    SellerProtection,
    SellerProtectionStatus,
    SellerReceivableBreakdown,
    SupplementaryData,
)
from paypal_checkout.models.webhooks import (
    Verification,
    VerificationStatus,
    WebhookVerificationPayload,
)

__all__ = [
    "AccessToken",
    "Address",
    "Amount",
    "ApplicationContext",
    "Authorization",
    "AuthorizationStatus",
    "AuthorizationStatusDetails",
    "AuthorizationStatusDetailsReason",
    "Breakdown",
    "Capture",
    "CaptureStatus",
    "CaptureStatusDetails",
    "CaptureStatusDetailsReason",
    "CardBrand",
    "CardResponse",
    "CardType",
    "Currency",
    "DisbursementMode",
    "IdentityErrorBody",
    "Intent",
    "Item",
    "ItemCategoryType",
    "LandingPage",
    "LinkDescription",
    "LinkMethod",
    "Money",
    "Order",
    "OrderPayload",
    "OrderStatus",
    "PatchOperation",
    "Payee",
    "PayeePreferred",
    "Payer",
    "PayerName",
    "Payment",
    "PaymentCollection",
    "PaymentInstruction",
    "PaymentMethod",
    "PaymentSourceResponse",
    "PaypalErrorBody",
    "PaypalErrorDetail",
    "PaypalModel",
    "Phone",
    "PhoneNumber",
    "PhoneType",
    "PlatformFee",
    "PurchaseUnit",
    "Refund",
    "RefundStatus",
    "RefundStatusDetails",
    "RefundStatusDetailsReason",
    "RelatedIds",
    "SellerProtection",
    "SellerProtectionStatus",
    "SellerReceivableBreakdown",
    "ShippingDetail",
    "ShippingPreference",
    "SupplementaryData",
    "TaxIdType",
    "TaxInfo",
    "UserAction",
    "Verification",
    "VerificationStatus",
    "WalletResponse",
    "WebhookVerificationPayload",
    "build_order_patch",
]

"""
paypal-checkout - Typed async client for PayPal Orders v2 and webhook verification.
"""

from paypal_checkout.client import PaypalClient
from paypal_checkout.config import ConfigurationError, Settings, get_settings
from paypal_checkout.exceptions import (
    ApiError,
    AuthenticationError,
    PaypalClientError,
    ResponseDecodeError,
    TransportError,
    WebhookVerificationError,
)
from paypal_checkout.headers import HeaderParams, Prefer

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ConfigurationError",
    "HeaderParams",
    "PaypalClient",
    "PaypalClientError",
    "Prefer",
    "ResponseDecodeError",
    "Settings",
    "TransportError",
    "WebhookVerificationError",
    "get_settings",
]

"""
API services - one per PayPal resource, reached through PaypalClient.
"""

from paypal_checkout.services.orders import OrdersService
from paypal_checkout.services.payments import PaymentsService
from paypal_checkout.services.webhooks import WebhooksService

__all__ = [
    "OrdersService",
    "PaymentsService",
    "WebhooksService",
]

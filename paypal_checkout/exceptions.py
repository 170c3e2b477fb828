"""
Exception Classes - Strongly typed exception hierarchy.

NO DICTIONARIES - All exceptions have typed attributes.

Transport failures (request never completed) are kept apart from API errors
(PayPal answered with a non-2xx status) and from decode failures (a body did
not match the expected schema).
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paypal_checkout.models.errors import (
        IdentityErrorBody,
        PaypalErrorBody,
        PaypalErrorDetail,
    )


class PaypalClientError(Exception):
    """Base exception for all client errors."""

    pass


class TransportError(PaypalClientError):
    """Raised when the HTTP request could not be completed."""

    def __init__(self, method: str, url: str, cause: Exception) -> None:
        self.method = method
        self.url = url
        self.cause = cause
        super().__init__(f"Transport error on {method} {url}: {type(cause).__name__}: {cause}")


class ApiError(PaypalClientError):
    """Raised when PayPal returns a non-2xx status with a structured error body."""

    def __init__(self, status_code: int, error: "PaypalErrorBody") -> None:
        self.status_code = status_code
        self.error = error
        super().__init__(f"PayPal API error {status_code} {error.name}: {error.message}")

    @property
    def name(self) -> str:
        """PayPal error name, e.g. UNPROCESSABLE_ENTITY."""
        return self.error.name

    @property
    def debug_id(self) -> str | None:
        """Debug ID to quote to PayPal support."""
        return self.error.debug_id

    @property
    def details(self) -> list["PaypalErrorDetail"]:
        """Per-field issues reported by PayPal."""
        return self.error.details


class ResponseDecodeError(PaypalClientError):
    """Raised when a response body does not match the expected schema."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Response decode error (status {status_code}): {message}")


class AuthenticationError(PaypalClientError):
    """Raised when the OAuth endpoint refuses the client credentials."""

    def __init__(self, status_code: int, error: "IdentityErrorBody") -> None:
        self.status_code = status_code
        self.error = error
        description = error.error_description or error.error
        super().__init__(f"Authentication failed ({status_code}): {description}")


class WebhookVerificationError(PaypalClientError):
    """Raised when a webhook notification cannot be prepared for verification."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Webhook verification error: {message}")

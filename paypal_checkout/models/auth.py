"""
OAuth access token model.

Reference: https://developer.paypal.com/api/rest/authentication/
"""

from datetime import UTC, datetime, timedelta

from pydantic import Field

from paypal_checkout.models.base import PaypalModel

# Refresh this long before PayPal considers the token expired
EXPIRY_BUFFER_SECONDS = 300


class AccessToken(PaypalModel):
    """POST /v1/oauth2/token response."""

    access_token: str
    token_type: str  # "Bearer"
    expires_in: int  # Seconds
    scope: str | None = None
    app_id: str | None = None
    nonce: str | None = None
    received_at: datetime = Field(default_factory=lambda: datetime.now(UTC), exclude=True)

    @property
    def expires_at(self) -> datetime:
        """When PayPal stops accepting the token."""
        return self.received_at + timedelta(seconds=self.expires_in)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the token should be refreshed before use."""
        now = now or datetime.now(UTC)
        return now >= self.expires_at - timedelta(seconds=EXPIRY_BUFFER_SECONDS)

    @property
    def authorization_header(self) -> str:
        """Value of the Authorization header."""
        return f"{self.token_type} {self.access_token}"

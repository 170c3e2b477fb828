"""
Request header parameters accepted by every operation.
"""

from dataclasses import dataclass, replace
from enum import Enum

JSON_CONTENT_TYPE = "application/json"


class Prefer(str, Enum):
    """Preferred server response on create/update calls."""

    MINIMAL = "return=minimal"
    REPRESENTATION = "return=representation"


@dataclass(frozen=True)
class HeaderParams:
    """Caller-supplied request headers, merged over the client defaults."""

    merchant_payer_id: str | None = None  # Sent as a PayPal-Auth-Assertion JWT
    client_metadata_id: str | None = None  # PayPal-Client-Metadata-Id
    partner_attribution_id: str | None = None  # PayPal-Partner-Attribution-Id (BN code)
    request_id: str | None = None  # PayPal-Request-Id, idempotency key
    prefer: Prefer | None = None  # Prefer
    content_type: str | None = None  # Content-Type

    def with_json_content(self) -> "HeaderParams":
        """Copy with the content type forced to JSON."""
        return replace(self, content_type=JSON_CONTENT_TYPE)

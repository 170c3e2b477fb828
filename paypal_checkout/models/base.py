"""
Base model shared by every PayPal record.

Records are immutable. Optional fields that are absent stay None locally and
are omitted from the JSON sent to PayPal.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class PaypalModel(BaseModel):
    """Immutable pydantic record mirroring a PayPal JSON schema."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the provider's JSON representation."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

"""
Client Configuration - Pydantic Settings for type-safe config.

NO DICTIONARIES - All configuration is strongly typed.
FAIL FAST - Missing credentials are reported before the first request.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

SANDBOX_API_BASE = "https://api-m.sandbox.paypal.com"
LIVE_API_BASE = "https://api-m.paypal.com"


class ConfigurationError(Exception):
    """Raised when critical configuration is missing or invalid."""

    pass


class Settings(BaseSettings):
    """Client settings loaded from PAYPAL_* environment variables."""

    # Credentials - NO DEFAULT, checked when a client is built
    client_id: str = ""
    client_secret: str = ""

    # Endpoint
    environment: Literal["sandbox", "live"] = "sandbox"
    base_url: str | None = None  # Overrides the environment endpoint (tests, proxies)

    # Transport
    timeout: float = 30.0  # Seconds, handed to httpx

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # json or console
    service_name: str = "paypal-checkout"
    version: str = "0.1.0"

    model_config = SettingsConfigDict(
        env_prefix="PAYPAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def api_base_url(self) -> str:
        """Get the API base URL for the configured environment."""
        if self.base_url:
            return self.base_url.rstrip("/")
        if self.environment == "live":
            return LIVE_API_BASE
        return SANDBOX_API_BASE

    def validate_credentials(self) -> None:
        """
        FAIL FAST: Ensure credentials are present.

        Raises:
            ConfigurationError: If client id or secret is empty
        """
        errors: list[str] = []
        if not self.client_id:
            errors.append("PAYPAL_CLIENT_ID is required but empty or missing")
        if not self.client_secret:
            errors.append("PAYPAL_CLIENT_SECRET is required but empty or missing")

        if errors:
            raise ConfigurationError("; ".join(errors))


# Global settings instance - credentials are only checked on use
settings = Settings()


def get_settings() -> Settings:
    """Get client settings instance."""
    return settings

"""
PayPal REST Client - Request/response mapping over one reusable httpx client.

NO DICTIONARIES - Requests and responses go through typed models.

Every call is a single round trip: build URL, merge headers, serialize,
send, then decode either the success model or PayPal's error body.
"""

from types import TracebackType
from typing import Any, TypeVar

import httpx
import jwt
from pydantic import ValidationError
from structlog import get_logger

from paypal_checkout.config import (
    LIVE_API_BASE,
    SANDBOX_API_BASE,
    ConfigurationError,
    Settings,
    get_settings,
)
from paypal_checkout.exceptions import (
    ApiError,
    AuthenticationError,
    ResponseDecodeError,
    TransportError,
)
from paypal_checkout.headers import JSON_CONTENT_TYPE, HeaderParams
from paypal_checkout.models.auth import AccessToken
from paypal_checkout.models.base import PaypalModel
from paypal_checkout.models.errors import IdentityErrorBody, PaypalErrorBody
from paypal_checkout.services.orders import OrdersService
from paypal_checkout.services.payments import PaymentsService
from paypal_checkout.services.webhooks import WebhooksService

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=PaypalModel)

TOKEN_PATH = "/v1/oauth2/token"


def decode_body(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """
    Decode a response body into a model.

    Raises:
        ResponseDecodeError: If the body is not JSON or misses required fields
    """
    try:
        return model.model_validate_json(response.content)
    except ValidationError as exc:
        logger.error(
            "paypal_response_decode_failed",
            status=response.status_code,
            model=model.__name__,
            errors=exc.error_count(),
        )
        raise ResponseDecodeError(response.status_code, str(exc)) from exc


def api_error(response: httpx.Response) -> ApiError:
    """Decode a non-2xx response into an ApiError."""
    error = decode_body(response, PaypalErrorBody)
    logger.error(
        "paypal_api_error",
        status=response.status_code,
        name=error.name,
        debug_id=error.debug_id,
        issues=error.issues,
    )
    return ApiError(response.status_code, error)


def parse_response(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Decode a success body into model, or raise the API error."""
    if response.is_success:
        return decode_body(response, model)
    raise api_error(response)


def ensure_success(response: httpx.Response) -> None:
    """Raise the API error unless the status is 2xx. The body is ignored."""
    if not response.is_success:
        raise api_error(response)


class PaypalClient:
    """
    PayPal REST API client.

    Usage:
        async with PaypalClient(client_id, client_secret) as client:
            order = await client.orders.create_order(payload)
            order = await client.orders.capture_order(order.id)
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        *,
        sandbox: bool = True,
        base_url: str | None = None,
        timeout: float = 30.0,
        access_token: AccessToken | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize PayPal client.

        Args:
            client_id: REST app client ID
            client_secret: REST app secret
            sandbox: Use the sandbox endpoint instead of live
            base_url: Explicit endpoint, overrides sandbox
            timeout: Request timeout in seconds
            access_token: Pre-issued token, skips the first OAuth call
            http_client: Shared httpx client; not closed by this client
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = (base_url or (SANDBOX_API_BASE if sandbox else LIVE_API_BASE)).rstrip("/")
        self._access_token = access_token
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

        self.orders = OrdersService(self)
        self.payments = PaymentsService(self)
        self.webhooks = WebhooksService(self)

        logger.info("paypal_client_initialized", base_url=self.base_url)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "PaypalClient":
        """
        Build a client from PAYPAL_* settings.

        Raises:
            ConfigurationError: If credentials are missing
        """
        settings = settings or get_settings()
        try:
            settings.validate_credentials()
        except ConfigurationError:
            logger.error("paypal_client_credentials_missing", environment=settings.environment)
            raise

        return cls(
            settings.client_id,
            settings.client_secret,
            base_url=settings.api_base_url,
            timeout=settings.timeout,
            http_client=http_client,
        )

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    async def authenticate(self) -> AccessToken:
        """
        Request an OAuth access token with the client credentials.

        Returns:
            The new token, also held for subsequent requests

        Raises:
            AuthenticationError: If PayPal refuses the credentials
            TransportError: If the request could not be completed
        """
        url = f"{self.base_url}{TOKEN_PATH}"
        logger.info("requesting_paypal_access_token", base_url=self.base_url)

        try:
            response = await self._http.post(
                url,
                auth=(self.client_id, self.client_secret),
                data={"grant_type": "client_credentials"},
                headers={"Accept": JSON_CONTENT_TYPE},
            )
        except httpx.HTTPError as exc:
            logger.error("paypal_transport_error", method="POST", path=TOKEN_PATH, error=str(exc))
            raise TransportError("POST", url, exc) from exc

        if not response.is_success:
            error = decode_body(response, IdentityErrorBody)
            logger.error(
                "paypal_authentication_failed",
                status=response.status_code,
                error=error.error,
            )
            raise AuthenticationError(response.status_code, error)

        token = decode_body(response, AccessToken)
        self._access_token = token

        logger.info(
            "paypal_access_token_obtained",
            app_id=token.app_id,
            expires_in=token.expires_in,
        )
        return token

    async def access_token(self) -> AccessToken:
        """Return the held token, requesting a new one when absent or expired."""
        if self._access_token is None or self._access_token.is_expired():
            return await self.authenticate()
        return self._access_token

    def _auth_assertion(self, merchant_payer_id: str) -> str:
        """JWT identifying the merchant a partner acts on behalf of."""
        claims = {"iss": self.client_id, "payer_id": merchant_payer_id}
        return jwt.encode(claims, self.client_secret, algorithm="HS256")

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    async def setup_headers(self, params: HeaderParams | None = None) -> dict[str, str]:
        """Library default headers with the caller's headers merged on top."""
        params = params or HeaderParams()
        token = await self.access_token()

        headers = {
            "Accept": JSON_CONTENT_TYPE,
            "Content-Type": JSON_CONTENT_TYPE,
            "Authorization": token.authorization_header,
        }

        if params.merchant_payer_id:
            headers["PayPal-Auth-Assertion"] = self._auth_assertion(params.merchant_payer_id)
        if params.client_metadata_id:
            headers["PayPal-Client-Metadata-Id"] = params.client_metadata_id
        if params.partner_attribution_id:
            headers["PayPal-Partner-Attribution-Id"] = params.partner_attribution_id
        if params.request_id:
            headers["PayPal-Request-Id"] = params.request_id
        if params.prefer:
            headers["Prefer"] = params.prefer.value
        if params.content_type:
            headers["Content-Type"] = params.content_type

        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: HeaderParams | None = None,
        json: Any = None,
    ) -> httpx.Response:
        """
        Send one request to the API.

        Raises:
            TransportError: If the request could not be completed
        """
        url = f"{self.base_url}{path}"
        request_headers = await self.setup_headers(headers)

        logger.debug("sending_paypal_request", method=method, path=path)

        try:
            response = await self._http.request(method, url, headers=request_headers, json=json)
        except httpx.HTTPError as exc:
            logger.error("paypal_transport_error", method=method, path=path, error=str(exc))
            raise TransportError(method, url, exc) from exc

        logger.debug(
            "paypal_response_received",
            method=method,
            path=path,
            status=response.status_code,
            debug_id=response.headers.get("paypal-debug-id"),
        )
        return response

    async def send(
        self,
        method: str,
        path: str,
        response_model: type[ModelT],
        *,
        headers: HeaderParams | None = None,
        json: Any = None,
    ) -> ModelT:
        """Send a request and decode the success body into response_model."""
        response = await self.request(method, path, headers=headers, json=json)
        return parse_response(response, response_model)

    async def send_without_result(
        self,
        method: str,
        path: str,
        *,
        headers: HeaderParams | None = None,
        json: Any = None,
    ) -> None:
        """Send a request whose success body carries nothing to decode."""
        response = await self.request(method, path, headers=headers, json=json)
        ensure_success(response)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "PaypalClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

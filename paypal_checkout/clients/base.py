# paypal_checkout/clients/base.py
import logging
from typing import Optional

import httpx

from paypal_checkout.core.errors import NetworkFailure, UpstreamHttpError
from paypal_checkout.schemas.order import ProviderResponse

logger = logging.getLogger(__name__)


def handle_response(response: httpx.Response) -> ProviderResponse:
    """
    Wrap a PayPal response. Any JSON body is returned together with its status
    code, error statuses included; a body that is not JSON raises with the raw text.
    """
    try:
        body = response.json()
    except ValueError:
        raise UpstreamHttpError(
            f"PayPal returned a non-JSON response (HTTP {response.status_code})",
            detail=response.text,
            http_status=response.status_code,
        )
    return ProviderResponse(body=body, http_status=response.status_code)


class PayPalClient:
    """Shared plumbing for the PayPal REST clients: base URL, HTTP client and request sending."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def send(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = self.url(path)
        logger.info(f"PayPal request: {method} {path}")
        try:
            response = await self.http_client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"PayPal request {method} {path} failed: {e!r}")
            raise NetworkFailure(f"Could not reach PayPal: {e}", detail=repr(e)) from e
        logger.info(f"PayPal response: {method} {path} -> {response.status_code}")
        return response


def bearer_headers(access_token: str, mock_response: Optional[str] = None) -> dict:
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {access_token}",
    }
    if mock_response:
        headers["PayPal-Mock-Response"] = mock_response
    return headers

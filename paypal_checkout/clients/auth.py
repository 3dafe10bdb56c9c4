# paypal_checkout/clients/auth.py
import logging
from typing import Optional

import httpx

from paypal_checkout.clients.base import PayPalClient, handle_response
from paypal_checkout.core.errors import MissingCredentials, UpstreamHttpError
from paypal_checkout.schemas.auth import Credentials, TokenResponse

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/oauth2/token"


class TokenProvider(PayPalClient):
    """
    OAuth 2.0 client-credentials flow against PayPal.
    See https://developer.paypal.com/api/rest/authentication/

    Tokens are not cached: every outbound call chain asks for a fresh one.
    """

    def __init__(self, credentials: Credentials, http_client: httpx.AsyncClient, base_url: str):
        super().__init__(http_client, base_url)
        self.credentials = credentials

    async def authenticate(self, extra_params: Optional[dict] = None) -> TokenResponse:
        params = {
            "grant_type": "client_credentials",
            "response_type": "id_token",
            **(extra_params or {}),
        }
        # Checked before touching the network
        if not self.credentials.is_complete:
            logger.error("Failed to generate Access Token: PayPal credentials are missing")
            raise MissingCredentials()

        response = await self.send(
            "POST",
            TOKEN_PATH,
            data=params,  # form url-encoded body
            auth=httpx.BasicAuth(self.credentials.client_id, self.credentials.client_secret),
        )
        result = handle_response(response)
        raw = result.body if isinstance(result.body, dict) else {}
        return TokenResponse(token=raw.get("access_token"), raw_response=raw, http_status=result.http_status)

    async def generate_access_token(self) -> str:
        token_response = await self.authenticate()
        if not token_response.token:
            logger.error(f"PayPal token endpoint returned no access_token (HTTP {token_response.http_status})")
            raise UpstreamHttpError(
                "Failed to generate Access Token",
                detail=token_response.raw_response,
                http_status=token_response.http_status,
            )
        return token_response.token

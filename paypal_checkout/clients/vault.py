# paypal_checkout/clients/vault.py
import logging

import httpx

from paypal_checkout.clients.auth import TokenProvider
from paypal_checkout.clients.base import PayPalClient
from paypal_checkout.core.errors import UpstreamHttpError
from paypal_checkout.schemas.vault import PaymentTokenList

logger = logging.getLogger(__name__)

PAYMENT_TOKENS_PATH = "/v3/vault/payment-tokens"


class VaultClient(PayPalClient):
    def __init__(self, token_provider: TokenProvider, http_client: httpx.AsyncClient, base_url: str):
        super().__init__(http_client, base_url)
        self.token_provider = token_provider

    async def get_payment_tokens(self, customer_id: str) -> PaymentTokenList:
        """
        List the payment methods PayPal has vaulted for ``customer_id``.
        An empty customer id short-circuits to an empty list without any network call.
        """
        if not customer_id:
            return PaymentTokenList()

        access_token = await self.token_provider.generate_access_token()
        headers = {
            "Accept": "application/json",
            "Accept-Language": "en_US",
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }
        response = await self.send("GET", PAYMENT_TOKENS_PATH, params={"customer_id": customer_id}, headers=headers)

        if not response.is_success:
            try:
                detail = response.json()
            except ValueError:
                detail = response.text
            logger.error(f"Vault lookup for customer {customer_id} failed with HTTP {response.status_code}")
            raise UpstreamHttpError(
                f"HTTP error! status: {response.status_code}",
                detail=detail,
                http_status=response.status_code,
            )
        try:
            return PaymentTokenList.model_validate(response.json())
        except ValueError as e:
            # Covers both a non-JSON body and an unexpected shape (pydantic.ValidationError)
            raise UpstreamHttpError(
                "Unexpected vault payment-tokens response",
                detail=response.text,
                http_status=response.status_code,
            ) from e

# paypal_checkout/clients/orders.py
import logging
import uuid
from typing import Any, Optional

import httpx

from paypal_checkout.clients.auth import TokenProvider
from paypal_checkout.clients.base import PayPalClient, bearer_headers, handle_response
from paypal_checkout.schemas.order import Amount, OrderPayload, ProviderResponse, PurchaseUnit

logger = logging.getLogger(__name__)

ORDERS_PATH = "/v2/checkout/orders"

# Demo fixture: the checkout page always charges this amount
DEMO_CURRENCY = "USD"
DEMO_AMOUNT = "110.00"


class OrderClient(PayPalClient):
    """Orders v2: create, capture, and vault-backed upsale orders."""

    def __init__(
        self,
        token_provider: TokenProvider,
        http_client: httpx.AsyncClient,
        base_url: str,
        return_url: str = "http://example.com",
        cancel_url: str = "http://example.com",
        mock_response: Optional[str] = None,
    ):
        super().__init__(http_client, base_url)
        self.token_provider = token_provider
        self.return_url = return_url
        self.cancel_url = cancel_url
        self.mock_response = mock_response

    async def create_order(self, cart: Any = None) -> ProviderResponse:
        """
        Create an order for the demo amount and ask PayPal to vault the payer's
        payment method once the order succeeds.
        The cart is only logged; it does not drive pricing.
        """
        logger.info(f"Shopping cart information passed from the frontend: {cart}")
        access_token = await self.token_provider.generate_access_token()

        payload = OrderPayload(
            purchase_units=[PurchaseUnit(amount=Amount(currency_code=DEMO_CURRENCY, value=DEMO_AMOUNT))],
            payment_source={
                "paypal": {
                    "attributes": {
                        "vault": {
                            "store_in_vault": "ON_SUCCESS",
                            "usage_type": "MERCHANT",
                            "customer_type": "CONSUMER",
                        },
                    },
                    "experience_context": {
                        "return_url": self.return_url,
                        "cancel_url": self.cancel_url,
                        "shipping_preference": "NO_SHIPPING",
                    },
                },
            },
        )
        response = await self.send(
            "POST",
            ORDERS_PATH,
            headers=bearer_headers(access_token, self.mock_response),
            json=payload.model_dump(exclude_none=True),
        )
        return handle_response(response)

    async def capture_order(self, order_id: str) -> ProviderResponse:
        """
        Capture payment for the created order to complete the transaction.
        See https://developer.paypal.com/docs/api/orders/v2/#orders_capture
        """
        access_token = await self.token_provider.generate_access_token()
        response = await self.send(
            "POST",
            f"{ORDERS_PATH}/{order_id}/capture",
            headers=bearer_headers(access_token, self.mock_response),
        )
        return handle_response(response)

    async def create_upsale_order(self, vault_id: str, amount: str, request_id: Optional[str] = None) -> ProviderResponse:
        """
        Charge a vaulted payment method directly, without payer interaction.

        ``request_id`` is sent as ``PayPal-Request-Id`` so a retried call is
        recognised by PayPal as the same order; a random one is generated
        when the caller has none.
        """
        access_token = await self.token_provider.generate_access_token()
        payload = OrderPayload(
            purchase_units=[PurchaseUnit(amount=Amount(currency_code=DEMO_CURRENCY, value=amount))],
            payment_source={"paypal": {"vault_id": vault_id}},
        )
        headers = bearer_headers(access_token)
        headers["PayPal-Request-Id"] = request_id or str(uuid.uuid4())

        response = await self.send("POST", ORDERS_PATH, headers=headers, json=payload.model_dump(exclude_none=True))
        return handle_response(response)

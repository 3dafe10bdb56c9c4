import logging
from typing import Optional

from paypal_checkout.clients.orders import OrderClient
from paypal_checkout.clients.vault import VaultClient
from paypal_checkout.core.errors import EmptyVault
from paypal_checkout.schemas.order import ProviderResponse

logger = logging.getLogger(__name__)


class UpsaleOrchestrator:
    """Charges an extra amount against a customer's vaulted PayPal payment method."""

    def __init__(self, vault_client: VaultClient, order_client: OrderClient):
        self.vault_client = vault_client
        self.order_client = order_client

    async def handle_upsale(self, customer_id: str, amount: str, request_id: Optional[str] = None) -> ProviderResponse:
        logger.info(f"Starting upsale for customer {customer_id}, amount {amount}")

        tokens = await self.vault_client.get_payment_tokens(customer_id)
        # First listed token, which is not necessarily the payer's default method.
        vault_id = tokens.first_vault_id()
        if vault_id is None:
            logger.warning(f"Customer {customer_id} has no vaulted payment method. Upsale aborted.")
            raise EmptyVault(customer_id)

        result = await self.order_client.create_upsale_order(vault_id, amount, request_id=request_id)
        logger.info(f"Upsale order for customer {customer_id} returned HTTP {result.http_status}")
        return result

import httpx
from fastapi import Depends, Request

from paypal_checkout.clients.auth import TokenProvider
from paypal_checkout.clients.orders import OrderClient
from paypal_checkout.clients.vault import VaultClient
from paypal_checkout.core import config
from paypal_checkout.core.config import get_credentials
from paypal_checkout.core.upsale import UpsaleOrchestrator
from paypal_checkout.schemas.auth import Credentials


async def get_http_client(request: Request) -> httpx.AsyncClient:
    # Created in the application lifespan (see main.py)
    return request.app.state.http_client


def get_base_url() -> str:
    return config.PAYPAL_API_BASE


def get_token_provider(
    credentials: Credentials = Depends(get_credentials),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    base_url: str = Depends(get_base_url),
) -> TokenProvider:
    return TokenProvider(credentials, http_client, base_url)


def get_order_client(
    token_provider: TokenProvider = Depends(get_token_provider),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    base_url: str = Depends(get_base_url),
) -> OrderClient:
    return OrderClient(
        token_provider,
        http_client,
        base_url,
        return_url=config.PAYPAL_RETURN_URL,
        cancel_url=config.PAYPAL_CANCEL_URL,
        mock_response=config.PAYPAL_MOCK_RESPONSE,
    )


def get_vault_client(
    token_provider: TokenProvider = Depends(get_token_provider),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    base_url: str = Depends(get_base_url),
) -> VaultClient:
    return VaultClient(token_provider, http_client, base_url)


def get_upsale_orchestrator(
    vault_client: VaultClient = Depends(get_vault_client),
    order_client: OrderClient = Depends(get_order_client),
) -> UpsaleOrchestrator:
    return UpsaleOrchestrator(vault_client, order_client)

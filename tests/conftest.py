import asyncio
import json
from typing import Iterator, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from paypal_checkout.clients.auth import TokenProvider
from paypal_checkout.clients.orders import OrderClient
from paypal_checkout.clients.vault import VaultClient
from paypal_checkout.core.config import get_credentials
from paypal_checkout.core.dependencies import get_http_client
from paypal_checkout.core.upsale import UpsaleOrchestrator
from paypal_checkout.main import app
from paypal_checkout.schemas.auth import Credentials

BASE_URL = "https://api-m.sandbox.paypal.test"
TEST_CLIENT_ID = "test-client-id"
TEST_CLIENT_SECRET = "test-client-secret"


class FakePayPal:
    """
    Stand-in for the PayPal REST API, served through httpx.MockTransport.
    Tests tweak the attributes below to shape the answers and inspect
    ``requests`` afterwards.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.network_down = False

        self.token_status = 200
        self.token_body = {"access_token": "A21AA-test-token", "token_type": "Bearer", "expires_in": 32400}

        self.vault_status = 200
        self.vault_tokens = [{"id": "vlt_abc", "customer": {"id": "cust_123"}}]
        self.vault_body: Optional[dict] = None  # Overrides vault_tokens when set

        self.order_status = 201
        self.order_body: Optional[dict] = None
        self.order_text: Optional[str] = None  # Non-JSON body when set

        self.capture_status = 201

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.network_down:
            raise httpx.ConnectError("Connection refused", request=request)

        path = request.url.path
        if path == "/v1/oauth2/token":
            return httpx.Response(self.token_status, json=self.token_body)
        if path == "/v3/vault/payment-tokens":
            body = self.vault_body
            if body is None:
                body = {
                    "customer": {"id": request.url.params.get("customer_id")},
                    "payment_tokens": self.vault_tokens,
                }
            return httpx.Response(self.vault_status, json=body)
        if path == "/v2/checkout/orders":
            if self.order_text is not None:
                return httpx.Response(self.order_status, text=self.order_text)
            body = self.order_body or {"id": "5O190127TN364715T", "status": "PAYER_ACTION_REQUIRED"}
            return httpx.Response(self.order_status, json=body)
        if path.startswith("/v2/checkout/orders/") and path.endswith("/capture"):
            order_id = path.split("/")[-2]
            return httpx.Response(
                self.capture_status,
                json={
                    "id": order_id,
                    "status": "COMPLETED",
                    "purchase_units": [
                        {"payments": {"captures": [{"id": "3C679366HH908993F", "status": "COMPLETED"}]}}
                    ],
                },
            )
        return httpx.Response(404, json={"name": "RESOURCE_NOT_FOUND"})

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def order_payloads(self) -> List[dict]:
        return [json.loads(r.content) for r in self.requests_to("/v2/checkout/orders")]


@pytest.fixture
def fake_paypal() -> FakePayPal:
    return FakePayPal()


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(client_id=TEST_CLIENT_ID, client_secret=TEST_CLIENT_SECRET)


def open_http_client(fake_paypal: FakePayPal) -> Iterator[httpx.AsyncClient]:
    """Yield an AsyncClient wired to ``fake_paypal`` and close it afterwards, like the app lifespan does."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_paypal.handler))
    try:
        yield http_client
    finally:
        asyncio.run(http_client.aclose())


@pytest.fixture
def http_client(fake_paypal: FakePayPal) -> Iterator[httpx.AsyncClient]:
    yield from open_http_client(fake_paypal)



@pytest.fixture
def token_provider(credentials, http_client) -> TokenProvider:
    return TokenProvider(credentials, http_client, BASE_URL)


@pytest.fixture
def order_client(token_provider, http_client) -> OrderClient:
    return OrderClient(token_provider, http_client, BASE_URL)


@pytest.fixture
def vault_client(token_provider, http_client) -> VaultClient:
    return VaultClient(token_provider, http_client, BASE_URL)


@pytest.fixture
def orchestrator(vault_client, order_client) -> UpsaleOrchestrator:
    return UpsaleOrchestrator(vault_client, order_client)


@pytest.fixture(scope="function")
def client(credentials, http_client):
    # Every outbound call goes to FakePayPal instead of the sandbox
    app.dependency_overrides[get_http_client] = lambda: http_client
    app.dependency_overrides[get_credentials] = lambda: credentials
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

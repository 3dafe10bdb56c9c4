from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class ProviderResponse(BaseModel):
    """
    Parsed PayPal response. Returned for any upstream status code as long as
    the body is JSON; callers relay ``http_status`` as-is.
    """
    body: Any
    http_status: int

    @property
    def ok(self) -> bool:
        return 200 <= self.http_status < 300


class Amount(BaseModel):
    currency_code: str = Field(default="USD", max_length=3)
    value: str  # Opaque decimal string, forwarded unchanged


class PurchaseUnit(BaseModel):
    amount: Amount


class OrderPayload(BaseModel):
    intent: str = "CAPTURE"
    purchase_units: List[PurchaseUnit]
    payment_source: Optional[Dict[str, Any]] = None


class OrderCreateRequest(BaseModel):
    """
    Body posted by the checkout page, e.g. ``{"cart": [{"id": "SKU", "quantity": "1"}]}``.
    The cart is informational only; pricing is not derived from it.
    """
    cart: Any = None  # Any JSON value; not validated

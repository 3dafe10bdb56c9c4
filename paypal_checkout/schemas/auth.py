# paypal_checkout/schemas/auth.py
from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, Optional


class Credentials(BaseModel):
    """REST app credentials. Frozen: built once at startup and shared by every client."""
    model_config = ConfigDict(frozen=True)

    client_id: str = ""
    client_secret: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.client_id) and bool(self.client_secret)


class TokenResponse(BaseModel):
    token: Optional[str] = None
    raw_response: Dict[str, Any]
    http_status: int

from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, List, Optional


class PaymentToken(BaseModel):
    # PayPal returns much more (payment_source, links, ...); keep it around.
    model_config = ConfigDict(extra="allow")

    id: str  # The vault id


class PaymentTokenList(BaseModel):
    model_config = ConfigDict(extra="allow")

    customer: Optional[Dict[str, Any]] = None
    payment_tokens: List[PaymentToken] = []

    def first_vault_id(self) -> Optional[str]:
        """Vault id of the first listed token. Not necessarily the payer's default method."""
        if not self.payment_tokens:
            return None
        return self.payment_tokens[0].id

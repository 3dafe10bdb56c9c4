from typing import Any, Optional


class PaymentProviderError(Exception):
    """Base class for every failure raised while talking to PayPal.

    ``kind`` is a stable machine-readable tag, ``detail`` carries whatever the
    caller may want to show (raw upstream text, parsed error body, message).
    """

    kind: str = "payment_provider_error"

    def __init__(self, message: str, detail: Any = None, http_status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.http_status = http_status

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind, "detail": self.detail}


class MissingCredentials(PaymentProviderError):
    kind = "missing_credentials"

    def __init__(self, message: str = "MISSING_API_CREDENTIALS"):
        super().__init__(message)


class UpstreamHttpError(PaymentProviderError):
    """PayPal answered, but not with something we can use (non-JSON or error status)."""

    kind = "upstream_http_error"


class EmptyVault(PaymentProviderError):
    kind = "empty_vault"

    def __init__(self, customer_id: str):
        super().__init__(f"No stored payment method for customer {customer_id}", detail={"customer_id": customer_id})
        self.customer_id = customer_id


class NetworkFailure(PaymentProviderError):
    kind = "network_failure"

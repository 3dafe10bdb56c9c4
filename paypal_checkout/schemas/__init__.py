from .auth import Credentials, TokenResponse
from .order import (
    ProviderResponse,
    Amount,
    PurchaseUnit,
    OrderPayload,
    OrderCreateRequest,
)
from .vault import PaymentToken, PaymentTokenList
from .error import ErrorBody

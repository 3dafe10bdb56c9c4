import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse

from paypal_checkout.core.dependencies import get_upsale_orchestrator
from paypal_checkout.core.errors import PaymentProviderError
from paypal_checkout.core.upsale import UpsaleOrchestrator
from paypal_checkout.schemas.error import ErrorBody

logger = logging.getLogger(__name__)
router = APIRouter()

# Status returned for each failure kind; upstream errors keep PayPal's own status when it has one
ERROR_STATUS = {
    "empty_vault": 404,
    "missing_credentials": 500,
    "network_failure": 502,
}


def error_status(error: PaymentProviderError) -> int:
    if error.kind in ERROR_STATUS:
        return ERROR_STATUS[error.kind]
    if error.http_status is not None and error.http_status >= 400:
        return error.http_status
    return 502


@router.get("/{customer_id}/{amount}", responses={404: {"model": ErrorBody}, 500: {"model": ErrorBody}, 502: {"model": ErrorBody}})
async def upsale(
    customer_id: str,
    amount: str,
    paypal_request_id: Optional[str] = Header(default=None),
    orchestrator: UpsaleOrchestrator = Depends(get_upsale_orchestrator),
):
    """
    Charge ``amount`` to the first payment method PayPal has vaulted for ``customer_id``.

    On success the order-creation body is returned with PayPal's status code.
    A ``PayPal-Request-Id`` request header, when present, is forwarded so retries are idempotent.
    """
    try:
        result = await orchestrator.handle_upsale(customer_id, amount, request_id=paypal_request_id)
    except PaymentProviderError as e:
        logger.error(f"Upsale transaction failed for customer {customer_id}: {e.kind}: {e.message}")
        return JSONResponse(status_code=error_status(e), content=ErrorBody(**e.to_dict()).model_dump())
    return JSONResponse(status_code=result.http_status, content=result.body)

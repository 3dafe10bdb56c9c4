import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from paypal_checkout.clients.orders import OrderClient
from paypal_checkout.core.dependencies import get_order_client
from paypal_checkout.core.errors import PaymentProviderError
from paypal_checkout.schemas.order import OrderCreateRequest

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("")
async def create_order(
    order_in: Optional[OrderCreateRequest] = Body(default=None),
    order_client: OrderClient = Depends(get_order_client),
):
    """
    Create a PayPal order for the checkout page.
    PayPal's status code and JSON body are passed through unchanged.
    """
    cart = order_in.cart if order_in else None
    try:
        result = await order_client.create_order(cart)
    except PaymentProviderError as e:
        logger.error(f"Failed to create order: {e.kind}: {e.message}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to create order."})
    if not result.ok:
        logger.warning(f"PayPal rejected order creation with HTTP {result.http_status}: {result.body}")
    return JSONResponse(status_code=result.http_status, content=result.body)


@router.post("/{order_id}/capture")
async def capture_order(
    order_id: str,
    order_client: OrderClient = Depends(get_order_client),
):
    """
    Capture an approved order. PayPal's status code and JSON body are passed through unchanged.
    """
    try:
        result = await order_client.capture_order(order_id)
    except PaymentProviderError as e:
        logger.error(f"Failed to capture order {order_id}: {e.kind}: {e.message}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to capture order."})
    if result.ok:
        logger.info(f"Capture response for order {order_id}: {result.body}")
    else:
        logger.warning(f"PayPal rejected capture of order {order_id} with HTTP {result.http_status}: {result.body}")
    return JSONResponse(status_code=result.http_status, content=result.body)

"""
Order Routes — Product display and order intake.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.catalog import get_product
from storefront.models.order import ShippingDetails
from storefront.schemas.schemas import ProductResponse, OrderSubmitRequest, OrderSubmitResponse
from storefront.services.order_service import OrderService
from storefront.utils.rate_limiter import rate_limit

router = APIRouter(prefix="/api", tags=["Order"])


@router.get("/product", response_model=ProductResponse)
def get_product_details():
    """The product on sale."""
    return ProductResponse(**get_product())


@router.post("/order/submit", response_model=OrderSubmitResponse)
def submit_order(
    payload: OrderSubmitRequest,
    _throttle: bool = Depends(rate_limit(requests=30, window=60, scope="order")),
):
    """Place an order. Non-COD orders continue to payment verification."""
    shipping = ShippingDetails(**payload.model_dump(exclude={"payment_method"}))
    result = OrderService.submit(shipping, payload.payment_method)
    if not result["success"]:
        raise HTTPException(
            status_code=400,
            detail={"message": result["message"], "missing": result["missing"]},
        )

    order = result["order"]
    requires_payment = result["requires_payment"]

    return OrderSubmitResponse(
        success=True,
        order_id=order.integrity_hash,
        payment_method=order.payment_method.value,
        requires_payment=requires_payment,
        next="payment" if requires_payment else "done",
        # COD resets the intake form; other methods keep the cart while paying
        cart_added=requires_payment,
        show_form=False,
        message=result["message"],
    )

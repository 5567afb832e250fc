"""
Confirmation Routes — Order confirmation page data.
"""
from typing import Optional

from fastapi import APIRouter, Query

from storefront.schemas.schemas import ConfirmationResponse
from storefront.services.confirmation_service import ConfirmationService

router = APIRouter(prefix="/api/confirmation", tags=["Confirmation"])


@router.get("", response_model=ConfirmationResponse)
def get_confirmation(
    order_id: Optional[str] = Query(None, alias="orderId"),
    transaction_hash: Optional[str] = Query(None, alias="transactionHash"),
    payment_method: Optional[str] = Query(None, alias="paymentMethod"),
):
    """Render the confirmation from the navigation state carried in the query string."""
    return ConfirmationResponse(**ConfirmationService.render(order_id, transaction_hash, payment_method))

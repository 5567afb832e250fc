"""
Pydantic Schemas — Request & Response models for API validation.
"""
from typing import Optional, Dict, List
from pydantic import BaseModel, Field

from storefront.models.order import PaymentMethod


# ──────────────── Product ────────────────

class ProductResponse(BaseModel):
    id: str
    name: str
    description: str
    title: str
    subtitle: str
    price: str
    amount: int
    original_price: str
    discount: str
    image: str
    features: List[str] = []


# ──────────────── Order Intake ────────────────

class OrderSubmitRequest(BaseModel):
    name: str
    phone: str
    email: str
    address: str
    city: str
    state: str
    landmark: Optional[str] = None
    pincode: str
    payment_method: PaymentMethod = Field(..., alias="paymentMethod", description="COD | Bank | Card | Crypto")

    class Config:
        populate_by_name = True


class OrderSubmitResponse(BaseModel):
    success: bool
    order_id: str                      # integrity hash, used as the order id from here on
    payment_method: str
    requires_payment: bool
    next: str                          # payment | done
    cart_added: bool
    show_form: bool
    message: str = ""


# ──────────────── Payment Verification ────────────────

class PaymentSessionRequest(BaseModel):
    order_id: str = Field(..., alias="orderId", min_length=1)
    payment_method: PaymentMethod = Field(..., alias="paymentMethod")

    class Config:
        populate_by_name = True


class CardDetails(BaseModel):
    card_number: str = Field("", alias="cardNumber")
    card_holder: str = Field("", alias="cardHolder")
    expiry_date: str = Field("", alias="expiryDate", description="MM/YY")
    cvv: str = ""

    class Config:
        populate_by_name = True


class VerifyRequest(BaseModel):
    proof: Optional[str] = Field(None, description="Transaction hash/ID or UTR/reference number")
    card: Optional[CardDetails] = None


class PaymentSessionResponse(BaseModel):
    order_id: str
    payment_method: str
    status: str                        # Pending | Verifying | Confirmed | Failed | Expired
    time_left: int
    time_display: str
    timer_level: str                   # ok | warning | critical
    error: Optional[str] = None
    copied: bool = False
    redirect: Optional[Dict[str, Optional[str]]] = None
    title: str
    action_label: str
    steps: List[str] = []
    details: Optional[Dict[str, str]] = None


class CopyRequest(BaseModel):
    field: str = Field(..., description="PaymentConfig field, e.g. wallet_address")


class CopyResponse(BaseModel):
    field: str
    value: str
    copied: bool


# ──────────────── Confirmation ────────────────

class ConfirmationItem(BaseModel):
    title: str
    subtitle: str
    price: str
    quantity: int = 1


class ConfirmationResponse(BaseModel):
    order_id: str
    transaction_label: Optional[str] = None  # Transaction ID | Transaction Hash
    transaction_hash: Optional[str] = None   # omitted for Cash on Delivery
    payment_method: str
    order_date: str
    estimated_delivery: str
    item: ConfirmationItem


# ──────────────── Generic ────────────────

class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    active_payment_sessions: int
    uptime_seconds: float

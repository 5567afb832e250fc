"""
Order Model — In-memory order created on intake submission.
Never persisted; lives only as long as the request that created it.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class PaymentMethod(str, Enum):
    COD = "COD"
    BANK = "Bank"
    CARD = "Card"
    CRYPTO = "Crypto"


class ShippingDetails(BaseModel):
    name: str
    phone: str
    email: str
    address: str
    city: str
    state: str
    landmark: Optional[str] = None
    pincode: str


class Order(BaseModel):
    order_id: str              # random 16-char token, not unique
    product_ref: str
    price: str
    shipping: ShippingDetails
    payment_method: PaymentMethod
    integrity_hash: str        # SHA-256 of the one-time snapshot; display only
    created_at: datetime

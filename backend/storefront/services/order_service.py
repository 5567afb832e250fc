"""
Order Service — Intake of shipping details and payment method.
"""
from datetime import datetime, timezone
from typing import Optional

from storefront.catalog import get_product
from storefront.config import get_settings
from storefront.models.order import Order, PaymentMethod, ShippingDetails
from storefront.utils.hashing import generate_order_id, generate_hash
from storefront.utils.logger import log
from storefront.utils.validators import missing_fields

COD_NOTICE = "Order placed successfully with Cash on Delivery option!"


class OrderService:
    """Builds orders from the intake form and decides the next step."""

    @staticmethod
    def create_order(
        shipping: ShippingDetails,
        payment_method: PaymentMethod,
        product: Optional[dict] = None,
    ) -> Order:
        """Create an in-memory order and its integrity hash.

        The hash covers a snapshot that includes the creation timestamp, so
        it can never be reproduced later. It is an identifier for display,
        not a checksum.
        """
        product = product or get_product()
        now = datetime.now(timezone.utc)
        order_id = generate_order_id(get_settings().ORDER_ID_LENGTH)

        snapshot = {
            "orderId": order_id,
            "product": product["id"],
            "price": product["price"],
            "customer": shipping.name,
            "timestamp": now.isoformat(),
        }

        return Order(
            order_id=order_id,
            product_ref=product["id"],
            price=product["price"],
            shipping=shipping,
            payment_method=payment_method,
            integrity_hash=generate_hash(snapshot),
            created_at=now,
        )

    @classmethod
    def submit(cls, shipping: ShippingDetails, payment_method: PaymentMethod) -> dict:
        """Validate and place an order.

        Returns:
            dict with 'success'. On failure, 'missing' lists the empty fields.
            On success, 'order' and 'requires_payment'; COD orders complete
            immediately and reset the intake form.
        """
        missing = missing_fields(shipping.model_dump())
        if missing:
            return {
                "success": False,
                "message": "Please fill in all required fields",
                "missing": missing,
            }

        order = cls.create_order(shipping, payment_method)

        if payment_method == PaymentMethod.COD:
            log("orders", f"COD order placed: {order.integrity_hash[:12]}")
            return {
                "success": True,
                "order": order,
                "requires_payment": False,
                "message": COD_NOTICE,
            }

        log("orders", f"Order {order.integrity_hash[:12]} handed to {payment_method.value} payment")
        return {
            "success": True,
            "order": order,
            "requires_payment": True,
            "message": "Proceed to payment",
        }

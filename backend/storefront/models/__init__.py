from storefront.models.order import Order, PaymentMethod, ShippingDetails
from storefront.models.payment import PaymentStatus, TERMINAL_STATES, EXPIRABLE_STATES

__all__ = [
    "Order", "PaymentMethod", "ShippingDetails",
    "PaymentStatus", "TERMINAL_STATES", "EXPIRABLE_STATES",
]

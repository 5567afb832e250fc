from storefront.routes.order import router as order_router
from storefront.routes.payment import router as payment_router
from storefront.routes.confirmation import router as confirmation_router

__all__ = ["order_router", "payment_router", "confirmation_router"]

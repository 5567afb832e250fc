from storefront.services.order_service import OrderService
from storefront.services.payment_session import PaymentSession
from storefront.services.session_store import PaymentSessionStore, get_session_store
from storefront.services.confirmation_service import ConfirmationService

__all__ = ["OrderService", "PaymentSession", "PaymentSessionStore", "get_session_store", "ConfirmationService"]

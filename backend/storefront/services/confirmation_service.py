"""
Confirmation Service — renders the order-confirmation page from navigation state.
"""
import random
from datetime import date, timedelta
from typing import Optional

from storefront.catalog import get_product

PLACEHOLDER = "N/A"

PAYMENT_LABELS = {
    "Crypto": "Cryptocurrency (Solana)",
    "Bank": "Bank Transfer",
    "Card": "Card Payment",
    "COD": "Cash on Delivery",
}
DEFAULT_PAYMENT_LABEL = "Online Payment"


def shorten(value: Optional[str], length: int = 12) -> str:
    """First `length` characters followed by an ellipsis, or the placeholder."""
    if not value:
        return PLACEHOLDER
    return value[:length] + "..."


def estimate_delivery(today: Optional[date] = None) -> str:
    """Delivery date 7 to 10 days out, e.g. "Monday, October 26, 2026".

    Picked at random on every call and never stored.
    """
    today = today or date.today()
    delivery = today + timedelta(days=random.randint(7, 10))
    return f"{delivery:%A}, {delivery:%B} {delivery.day}, {delivery.year}"


def order_date(today: Optional[date] = None) -> str:
    """Order date as month/day/year without zero padding, e.g. "10/17/2026"."""
    today = today or date.today()
    return f"{today.month}/{today.day}/{today.year}"


def transaction_label(payment_method: Optional[str]) -> Optional[str]:
    if payment_method == "COD":
        return None
    return "Transaction ID" if payment_method == "Card" else "Transaction Hash"


class ConfirmationService:
    @staticmethod
    def render(
        order_id: Optional[str] = None,
        transaction_hash: Optional[str] = None,
        payment_method: Optional[str] = None,
    ) -> dict:
        """Build the confirmation view. Absent values degrade to placeholders."""
        product = get_product()
        return {
            "order_id": shorten(order_id),
            "transaction_label": transaction_label(payment_method),
            "transaction_hash": None if payment_method == "COD" else shorten(transaction_hash),
            "payment_method": PAYMENT_LABELS.get(payment_method or "", DEFAULT_PAYMENT_LABEL),
            "order_date": order_date(),
            "estimated_delivery": estimate_delivery(),
            "item": {
                "title": product["title"],
                "subtitle": product["subtitle"],
                "price": product["price"],
                "quantity": 1,
            },
        }

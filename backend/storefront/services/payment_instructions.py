"""
Per-method payment page content: titles, steps and receiving-account details.
"""
from typing import Optional

from storefront.config import PaymentConfig
from storefront.models.order import PaymentMethod

TITLES = {
    PaymentMethod.CRYPTO: "Cryptocurrency Payment",
    PaymentMethod.BANK: "Bank Transfer Payment",
    PaymentMethod.CARD: "Card Payment",
}

STEPS = {
    PaymentMethod.CRYPTO: [
        "Copy the Solana wallet address or scan the QR code",
        "Open your crypto wallet app and send the exact amount",
        "Enter the transaction ID/hash below to verify payment",
        "Wait for confirmation (usually takes 1-2 minutes)",
    ],
    PaymentMethod.BANK: [
        "Use your bank's app or website to make a transfer",
        "Send the exact amount to the account details provided",
        "Enter the UTR/Reference number below to verify payment",
        "Wait for confirmation (usually takes a few minutes)",
    ],
    PaymentMethod.CARD: [
        "Enter your card details in the form below",
        "Ensure the billing address matches your card",
        "Your card will be charged the exact amount",
        "Wait for confirmation from your bank",
    ],
}


def qr_payload(wallet_address: str, amount: int) -> str:
    return f"solana:{wallet_address}?amount={amount}"


def format_time(seconds: int) -> str:
    """Format a countdown as M:SS."""
    mins, secs = divmod(max(seconds, 0), 60)
    return f"{mins}:{secs:02d}"


def timer_level(seconds: int) -> str:
    if seconds > 180:
        return "ok"
    if seconds > 60:
        return "warning"
    return "critical"


def build_instructions(method: PaymentMethod, config: PaymentConfig, amount: int) -> dict:
    """Everything the payment page renders for `method` apart from the timer."""
    details: Optional[dict] = None
    if method == PaymentMethod.CRYPTO:
        details = {
            "wallet_address": config.wallet_address,
            "qr_payload": qr_payload(config.wallet_address, amount),
        }
    elif method == PaymentMethod.BANK:
        details = {
            "account_name": config.bank_account_name,
            "account_number": config.bank_account_number,
            "routing_code": config.bank_routing_code,
            "bank_name": config.bank_name,
        }

    return {
        "title": TITLES.get(method, "Payment"),
        "action_label": "Complete Payment" if method == PaymentMethod.CARD else "Complete Verification",
        "steps": STEPS.get(method, []),
        "details": details,
    }

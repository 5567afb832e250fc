"""
Validators — presence checks for intake forms and format checks for payment proofs.
None of these consult an external system.
"""
import re

SHIPPING_REQUIRED_FIELDS = ("name", "phone", "email", "address", "city", "state", "pincode")
CARD_FIELDS = ("card_number", "card_holder", "expiry_date", "cvv")

_PROOF_PATTERN = re.compile(r"[a-f0-9]+", re.IGNORECASE)


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def missing_fields(data: dict, required=SHIPPING_REQUIRED_FIELDS) -> list[str]:
    """Return the required keys whose values are absent or whitespace-only."""
    return [field for field in required if is_blank(data.get(field))]


def validate_card(card: dict | None) -> tuple[bool, str]:
    """Length checks on card entry fields.

    Fields only need to be non-empty; whitespace counts as a value.
    No Luhn check and no expiry validation.
    """
    card = card or {}
    if not all(card.get(field) for field in CARD_FIELDS):
        return False, "Please fill in all card details"
    if len(card["card_number"]) < 16:
        return False, "Invalid card number"
    if len(card["cvv"]) < 3:
        return False, "Invalid CVV"
    return True, "Valid"


def validate_proof_format(proof: str | None, min_length: int = 10) -> bool:
    """Bank/Crypto proof check: at least `min_length` hex-class characters."""
    if not proof or len(proof) < min_length:
        return False
    return bool(_PROOF_PATTERN.fullmatch(proof))

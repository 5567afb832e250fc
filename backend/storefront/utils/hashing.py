"""
Hashing Utilities — order tokens and SHA-256 order snapshots.
"""
import hashlib
import json
import random
import string

ORDER_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_order_id(length: int = 16) -> str:
    """Random lowercase-alphanumeric token.

    Uses the non-cryptographic `random` module; two calls are independent
    and collisions are possible.
    """
    return "".join(random.choices(ORDER_ID_ALPHABET, k=length))


def hash_data(data: str) -> str:
    """SHA-256 hex digest of a string."""
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


def generate_hash(data: dict) -> str:
    """Generate a SHA-256 hash of a dictionary (sorted keys)."""
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hash_data(canonical)

from storefront.utils.hashing import generate_order_id, hash_data, generate_hash
from storefront.utils.validators import missing_fields, validate_card, validate_proof_format

__all__ = [
    "generate_order_id", "hash_data", "generate_hash",
    "missing_fields", "validate_card", "validate_proof_format",
]

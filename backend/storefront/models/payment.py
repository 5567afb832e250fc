"""
Payment Session States — closed set for one payment attempt.
"""
from enum import Enum
from typing import FrozenSet


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    VERIFYING = "Verifying"
    CONFIRMED = "Confirmed"
    FAILED = "Failed"
    EXPIRED = "Expired"


# No further verification once reached
TERMINAL_STATES: FrozenSet[PaymentStatus] = frozenset([
    PaymentStatus.CONFIRMED,
    PaymentStatus.EXPIRED,
])

# States from which the deadline can still expire the session
EXPIRABLE_STATES: FrozenSet[PaymentStatus] = frozenset([
    PaymentStatus.PENDING,
    PaymentStatus.VERIFYING,
    PaymentStatus.FAILED,
])

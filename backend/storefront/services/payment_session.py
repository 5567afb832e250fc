"""
Payment Session — countdown and verification state machine for one payment attempt.

    Pending -> Verifying -> Confirmed
                         -> Failed -> Verifying ...
    Pending | Verifying | Failed -> Expired   (deadline reached)

All transitions are local. Verification is a format check on the proof
string; no gateway, bank or blockchain is consulted.
"""
from typing import Callable, Optional

from storefront.config import PaymentConfig
from storefront.errors import (
    SessionClosedError,
    UnknownCopyFieldError,
    UnsupportedPaymentMethodError,
    VerificationInProgressError,
)
from storefront.models.order import PaymentMethod
from storefront.models.payment import EXPIRABLE_STATES, TERMINAL_STATES, PaymentStatus
from storefront.services.payment_instructions import build_instructions, format_time, timer_level
from storefront.services.scheduler import Scheduler, TimerHandle
from storefront.utils.logger import log
from storefront.utils.validators import validate_card, validate_proof_format

EXPIRED_MESSAGE = "Payment time expired. Please try again."

MISSING_PROOF_MESSAGES = {
    PaymentMethod.CRYPTO: "Please enter a transaction hash/ID",
    PaymentMethod.BANK: "Please enter a UTR/Reference number",
}


def verification_failed_message(method: PaymentMethod) -> str:
    subject = "card details" if method == PaymentMethod.CARD else "transaction"
    return f"Invalid {subject}. Please check and try again."


class PaymentSession:
    """Ephemeral state for one payment attempt.

    Owns up to four timers: the countdown, the simulated verification
    latency, the pre-redirect delay and the "copied" indicator. Every one
    of them is cancelled by `close()`.
    """

    def __init__(
        self,
        order_id: str,
        method: PaymentMethod,
        config: PaymentConfig,
        scheduler: Scheduler,
        amount: int = 0,
        window_seconds: int = 300,
        tick_interval: float = 1.0,
        verification_delay: float = 1.5,
        redirect_delay: float = 3.0,
        copy_indicator: float = 2.0,
        proof_min_length: int = 10,
        on_redirect: Optional[Callable[["PaymentSession"], None]] = None,
        on_expire: Optional[Callable[["PaymentSession"], None]] = None,
    ):
        if method == PaymentMethod.COD:
            raise UnsupportedPaymentMethodError(
                "Cash on Delivery orders do not require payment verification"
            )

        self.order_id = order_id
        self.method = method
        self.config = config
        self.amount = amount
        self.status = PaymentStatus.PENDING
        self.time_left = window_seconds
        self.error_message: Optional[str] = None
        self.proof: Optional[str] = None
        self.copied = False
        self.redirect: Optional[dict] = None
        self.closed = False

        self._scheduler = scheduler
        self._tick_interval = tick_interval
        self._verification_delay = verification_delay
        self._redirect_delay = redirect_delay
        self._copy_indicator = copy_indicator
        self._proof_min_length = proof_min_length
        self._on_redirect = on_redirect
        self._on_expire = on_expire

        self._countdown: Optional[TimerHandle] = None
        self._verification: Optional[TimerHandle] = None
        self._redirect_timer: Optional[TimerHandle] = None
        self._copy_timer: Optional[TimerHandle] = None

    # ─── Lifecycle ──────────────────────────────────────────────────

    def start(self) -> "PaymentSession":
        if self._countdown is None and not self.closed:
            self._countdown = self._scheduler.call_every(self._tick_interval, self._tick)
            log("payments", f"Session opened for {self.order_id[:12]} ({self.method.value})")
        return self

    def close(self):
        """Release every pending timer. Safe to call more than once."""
        if self.closed:
            return
        self.closed = True
        self._cancel("_countdown")
        self._cancel("_verification")
        self._cancel("_redirect_timer")
        self._cancel("_copy_timer")

    def _cancel(self, attr: str):
        handle = getattr(self, attr)
        if handle is not None:
            handle.cancel()
            setattr(self, attr, None)

    # ─── Countdown ──────────────────────────────────────────────────

    def _tick(self):
        if self.status in TERMINAL_STATES:
            self._cancel("_countdown")
            return

        self.time_left = max(self.time_left - 1, 0)
        if self.time_left == 0:
            self._expire()

    def _expire(self):
        if self.status not in EXPIRABLE_STATES:
            return
        self.status = PaymentStatus.EXPIRED
        self.error_message = EXPIRED_MESSAGE
        self._cancel("_countdown")
        self._cancel("_verification")
        log("payments", f"Session for {self.order_id[:12]} expired")
        if self._on_expire is not None:
            self._on_expire(self)

    # ─── Verification ───────────────────────────────────────────────

    def verify(self, proof: Optional[str] = None, card: Optional[dict] = None) -> PaymentStatus:
        """Submit proof of payment for checking.

        Field errors are reported through `error_message` and leave the
        status untouched. Otherwise the session moves to Verifying and
        resolves after the simulated latency.
        """
        if self.status == PaymentStatus.EXPIRED:
            raise SessionClosedError(EXPIRED_MESSAGE)
        if self.status == PaymentStatus.CONFIRMED:
            raise SessionClosedError("Payment has already been confirmed")
        if self.closed:
            raise SessionClosedError("Payment session has ended")
        if self.status == PaymentStatus.VERIFYING:
            raise VerificationInProgressError("Verification already in progress")

        if self.method == PaymentMethod.CARD:
            ok, message = validate_card(card)
            if not ok:
                self.error_message = message
                return self.status
            proof = None
        elif not proof:
            self.error_message = MISSING_PROOF_MESSAGES[self.method]
            return self.status

        self.proof = proof
        self.error_message = None
        self.status = PaymentStatus.VERIFYING
        self._verification = self._scheduler.call_later(self._verification_delay, self._resolve)
        return self.status

    def is_valid_proof(self) -> bool:
        if self.method == PaymentMethod.CARD:
            return True
        return validate_proof_format(self.proof, self._proof_min_length)

    def _resolve(self):
        self._verification = None
        if self.status != PaymentStatus.VERIFYING:
            return

        if self.is_valid_proof():
            self.status = PaymentStatus.CONFIRMED
            self._cancel("_countdown")
            self._redirect_timer = self._scheduler.call_later(self._redirect_delay, self._publish_redirect)
            log("payments", f"Payment for {self.order_id[:12]} confirmed via {self.method.value}")
        else:
            self.status = PaymentStatus.FAILED
            self.error_message = verification_failed_message(self.method)
            log("payments", f"Verification failed for {self.order_id[:12]}")

    def _publish_redirect(self):
        self._redirect_timer = None
        self.redirect = {
            "orderId": self.order_id,
            "transactionHash": self.proof,
            "paymentMethod": self.method.value,
        }
        self.close()
        if self._on_redirect is not None:
            self._on_redirect(self)

    # ─── Clipboard ──────────────────────────────────────────────────

    def copy(self, field: str) -> str:
        """Return a receiving-account value and raise the "copied" flag briefly."""
        if field not in PaymentConfig.model_fields:
            raise UnknownCopyFieldError(f"Unknown field: {field}")

        value = getattr(self.config, field)
        if not self.closed:
            self._cancel("_copy_timer")
            self.copied = True
            self._copy_timer = self._scheduler.call_later(self._copy_indicator, self._reset_copied)
        return value

    def _reset_copied(self):
        self._copy_timer = None
        self.copied = False

    # ─── Presentation ───────────────────────────────────────────────

    def snapshot(self) -> dict:
        data = {
            "order_id": self.order_id,
            "payment_method": self.method.value,
            "status": self.status.value,
            "time_left": self.time_left,
            "time_display": format_time(self.time_left),
            "timer_level": timer_level(self.time_left),
            "error": self.error_message,
            "copied": self.copied,
            "redirect": self.redirect,
        }
        data.update(build_instructions(self.method, self.config, self.amount))
        return data

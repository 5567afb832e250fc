from __future__ import annotations

import unittest

from storefront.config import PaymentConfig
from storefront.errors import (
    SessionClosedError,
    UnknownCopyFieldError,
    UnsupportedPaymentMethodError,
    VerificationInProgressError,
)
from storefront.models.order import PaymentMethod
from storefront.models.payment import PaymentStatus
from storefront.services.payment_session import PaymentSession
from tests.manual_scheduler import ManualScheduler

CONFIG = PaymentConfig(
    wallet_address="WALLET123",
    bank_account_name="Test Payments Ltd",
    bank_account_number="000111222",
    bank_routing_code="TEST0000001",
    bank_name="Test Bank",
)

VALID_CARD = {
    "card_number": "4111111111111111",
    "card_holder": "Jane Doe",
    "expiry_date": "12/29",
    "cvv": "123",
}


class PaymentSessionTestCase(unittest.TestCase):
    def setUp(self):
        self.scheduler = ManualScheduler()

    def _open(self, method: PaymentMethod, order_id: str = "f" * 64) -> PaymentSession:
        return PaymentSession(order_id, method, CONFIG, self.scheduler, amount=16499).start()

    # ─── Verification outcomes ──────────────────────────────────────

    def test_bank_proof_confirms_and_redirect_carries_proof_unchanged(self):
        session = self._open(PaymentMethod.BANK)
        self.assertEqual(session.verify(proof="abc123def4"), PaymentStatus.VERIFYING)

        self.scheduler.advance(1.0)
        self.assertEqual(session.status, PaymentStatus.VERIFYING)
        self.scheduler.advance(0.5)
        self.assertEqual(session.status, PaymentStatus.CONFIRMED)
        self.assertIsNone(session.redirect)

        self.scheduler.advance(3.0)
        self.assertEqual(
            session.redirect,
            {"orderId": "f" * 64, "transactionHash": "abc123def4", "paymentMethod": "Bank"},
        )
        self.assertTrue(session.closed)
        self.assertEqual(self.scheduler.pending(), 0)

    def test_short_crypto_proof_fails_with_message(self):
        session = self._open(PaymentMethod.CRYPTO)
        session.verify(proof="xyz")
        self.scheduler.advance(1.5)

        self.assertEqual(session.status, PaymentStatus.FAILED)
        self.assertEqual(session.error_message, "Invalid transaction. Please check and try again.")

    def test_proof_format_decides_outcome(self):
        cases = {
            "ABCDEF123456": PaymentStatus.CONFIRMED,
            "0123456789": PaymentStatus.CONFIRMED,
            "abc123def": PaymentStatus.FAILED,
            "abc123def4g": PaymentStatus.FAILED,
            "4Gw6FJXdiVQhUiWHEXZw": PaymentStatus.FAILED,
            "UTR123456789": PaymentStatus.FAILED,
        }
        for proof, expected in cases.items():
            with self.subTest(proof=proof):
                session = self._open(PaymentMethod.CRYPTO, order_id=proof)
                session.verify(proof=proof)
                self.scheduler.advance(1.5)
                self.assertEqual(session.status, expected)
                session.close()

    def test_card_always_confirms_once_fields_pass(self):
        session = self._open(PaymentMethod.CARD)
        session.verify(card={**VALID_CARD, "card_number": "0000000000000000"})
        self.scheduler.advance(1.5)
        self.assertEqual(session.status, PaymentStatus.CONFIRMED)

        self.scheduler.advance(3.0)
        self.assertIsNone(session.redirect["transactionHash"])
        self.assertEqual(session.redirect["paymentMethod"], "Card")

    def test_card_field_errors_leave_status_unchanged(self):
        cases = [
            ({**VALID_CARD, "card_holder": ""}, "Please fill in all card details"),
            (None, "Please fill in all card details"),
            ({**VALID_CARD, "card_number": "411111111111"}, "Invalid card number"),
            ({**VALID_CARD, "cvv": "12"}, "Invalid CVV"),
        ]
        session = self._open(PaymentMethod.CARD)
        for card, message in cases:
            with self.subTest(message=message):
                self.assertEqual(session.verify(card=card), PaymentStatus.PENDING)
                self.assertEqual(session.error_message, message)
        # only the countdown is armed
        self.assertEqual(self.scheduler.pending(), 1)

    def test_missing_proof_messages_are_method_specific(self):
        bank = self._open(PaymentMethod.BANK, order_id="bank")
        crypto = self._open(PaymentMethod.CRYPTO, order_id="crypto")

        bank.verify(proof="")
        crypto.verify(proof=None)

        self.assertEqual(bank.error_message, "Please enter a UTR/Reference number")
        self.assertEqual(crypto.error_message, "Please enter a transaction hash/ID")
        self.assertEqual(bank.status, PaymentStatus.PENDING)
        self.assertEqual(crypto.status, PaymentStatus.PENDING)

    def test_failed_session_can_resubmit(self):
        session = self._open(PaymentMethod.BANK)
        session.verify(proof="not-a-hash!")
        self.scheduler.advance(1.5)
        self.assertEqual(session.status, PaymentStatus.FAILED)

        self.assertEqual(session.verify(proof="deadbeef00"), PaymentStatus.VERIFYING)
        self.assertIsNone(session.error_message)
        self.scheduler.advance(1.5)
        self.assertEqual(session.status, PaymentStatus.CONFIRMED)

    def test_verify_while_verifying_is_rejected(self):
        session = self._open(PaymentMethod.BANK)
        session.verify(proof="abc123def4")
        with self.assertRaises(VerificationInProgressError):
            session.verify(proof="abc123def4")

    def test_verify_after_confirmed_is_rejected(self):
        session = self._open(PaymentMethod.BANK)
        session.verify(proof="abc123def4")
        self.scheduler.advance(1.5)
        with self.assertRaises(SessionClosedError):
            session.verify(proof="abc123def4")

    # ─── Countdown ──────────────────────────────────────────────────

    def test_countdown_decreases_one_per_second(self):
        session = self._open(PaymentMethod.CRYPTO)
        self.assertEqual(session.time_left, 300)
        self.scheduler.advance(1.0)
        self.assertEqual(session.time_left, 299)
        self.scheduler.advance(10.0)
        self.assertEqual(session.time_left, 289)

    def test_deadline_expires_session_exactly_once(self):
        session = self._open(PaymentMethod.BANK)
        self.scheduler.advance(300.0)

        self.assertEqual(session.status, PaymentStatus.EXPIRED)
        self.assertEqual(session.error_message, "Payment time expired. Please try again.")
        self.assertEqual(session.time_left, 0)

        self.scheduler.advance(30.0)
        self.assertEqual(session.time_left, 0)
        self.assertEqual(session.status, PaymentStatus.EXPIRED)
        self.assertEqual(self.scheduler.pending(), 0)

        with self.assertRaises(SessionClosedError) as ctx:
            session.verify(proof="abc123def4")
        self.assertEqual(ctx.exception.message, "Payment time expired. Please try again.")

    def test_expiry_cancels_in_flight_verification(self):
        session = self._open(PaymentMethod.BANK)
        self.scheduler.advance(299.0)
        session.verify(proof="abc123def4")

        self.scheduler.advance(1.0)
        self.assertEqual(session.status, PaymentStatus.EXPIRED)
        self.scheduler.advance(5.0)
        self.assertEqual(session.status, PaymentStatus.EXPIRED)
        self.assertIsNone(session.redirect)

    def test_failed_session_still_expires(self):
        session = self._open(PaymentMethod.CRYPTO)
        session.verify(proof="xyz")
        self.scheduler.advance(300.0)
        self.assertEqual(session.status, PaymentStatus.EXPIRED)

    def test_confirmation_stops_countdown(self):
        session = self._open(PaymentMethod.BANK)
        session.verify(proof="abc123def4")
        self.scheduler.advance(1.5)
        frozen = session.time_left
        self.scheduler.advance(400.0)
        self.assertEqual(session.time_left, frozen)
        self.assertEqual(session.status, PaymentStatus.CONFIRMED)

    # ─── Teardown ───────────────────────────────────────────────────

    def test_close_cancels_all_timers(self):
        session = self._open(PaymentMethod.BANK)
        session.copy("wallet_address")
        session.verify(proof="abc123def4")
        self.assertEqual(self.scheduler.pending(), 3)

        session.close()
        session.close()
        self.assertEqual(self.scheduler.pending(), 0)

        self.scheduler.advance(10.0)
        self.assertEqual(session.status, PaymentStatus.VERIFYING)
        self.assertEqual(session.time_left, 300)

    def test_cash_on_delivery_has_no_payment_session(self):
        with self.assertRaises(UnsupportedPaymentMethodError):
            PaymentSession("abc", PaymentMethod.COD, CONFIG, self.scheduler)

    # ─── Clipboard ──────────────────────────────────────────────────

    def test_copy_indicator_resets_after_two_seconds(self):
        session = self._open(PaymentMethod.CRYPTO)
        self.assertEqual(session.copy("wallet_address"), "WALLET123")
        self.assertTrue(session.copied)

        self.scheduler.advance(1.5)
        session.copy("bank_routing_code")
        self.scheduler.advance(1.0)
        self.assertTrue(session.copied)
        self.scheduler.advance(1.0)
        self.assertFalse(session.copied)
        self.assertEqual(session.status, PaymentStatus.PENDING)

    def test_copy_unknown_field_rejected(self):
        session = self._open(PaymentMethod.BANK)
        with self.assertRaises(UnknownCopyFieldError):
            session.copy("secret_key")

    # ─── Presentation ───────────────────────────────────────────────

    def test_snapshot_for_crypto(self):
        session = self._open(PaymentMethod.CRYPTO)
        data = session.snapshot()

        self.assertEqual(data["status"], "Pending")
        self.assertEqual(data["time_display"], "5:00")
        self.assertEqual(data["timer_level"], "ok")
        self.assertEqual(data["title"], "Cryptocurrency Payment")
        self.assertEqual(data["action_label"], "Complete Verification")
        self.assertEqual(data["details"]["qr_payload"], "solana:WALLET123?amount=16499")
        self.assertEqual(len(data["steps"]), 4)

        self.scheduler.advance(130.0)
        data = session.snapshot()
        self.assertEqual(data["time_display"], "2:50")
        self.assertEqual(data["timer_level"], "warning")

        self.scheduler.advance(120.0)
        self.assertEqual(session.snapshot()["timer_level"], "critical")

    def test_snapshot_for_bank_and_card(self):
        bank = self._open(PaymentMethod.BANK, order_id="bank").snapshot()
        card = self._open(PaymentMethod.CARD, order_id="card").snapshot()

        self.assertEqual(bank["details"]["routing_code"], "TEST0000001")
        self.assertEqual(bank["title"], "Bank Transfer Payment")
        self.assertIsNone(card["details"])
        self.assertEqual(card["action_label"], "Complete Payment")


if __name__ == "__main__":
    unittest.main()

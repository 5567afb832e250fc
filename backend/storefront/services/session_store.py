"""
Session Store — in-memory registry of live payment sessions, keyed by order id.
Nothing here survives a restart.
"""
from typing import Dict, Optional

from storefront.catalog import get_product
from storefront.config import PaymentConfig, get_payment_config, get_settings
from storefront.errors import SessionNotFoundError
from storefront.models.order import PaymentMethod
from storefront.services.payment_session import PaymentSession
from storefront.services.scheduler import AsyncioScheduler, Scheduler, TimerHandle
from storefront.utils.logger import log


class PaymentSessionStore:
    """Opens, looks up and tears down payment sessions.

    Sessions that expire or publish their redirect are removed after
    `retention_seconds`, so clients that never send DELETE do not leak
    entries. The delay keeps the timeout error and the redirect state
    readable for a client that is still polling.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        config: Optional[PaymentConfig] = None,
        retention_seconds: Optional[float] = None,
    ):
        self.scheduler = scheduler
        self.config = config or get_payment_config()
        if retention_seconds is None:
            retention_seconds = get_settings().SESSION_RETENTION_SECONDS
        self.retention_seconds = retention_seconds
        self._sessions: Dict[str, PaymentSession] = {}
        self._retirements: Dict[str, TimerHandle] = {}

    def open(self, order_id: str, method: PaymentMethod) -> PaymentSession:
        """Start a session for `order_id`.

        Any session already open for the same order (e.g. before a method
        switch) is closed first so its timers cannot fire.
        """
        settings = get_settings()
        session = PaymentSession(
            order_id,
            method,
            self.config,
            self.scheduler,
            amount=get_product()["amount"],
            window_seconds=settings.PAYMENT_WINDOW_SECONDS,
            tick_interval=settings.COUNTDOWN_INTERVAL_SECONDS,
            verification_delay=settings.VERIFICATION_DELAY_SECONDS,
            redirect_delay=settings.REDIRECT_DELAY_SECONDS,
            copy_indicator=settings.COPY_INDICATOR_SECONDS,
            proof_min_length=settings.PROOF_MIN_LENGTH,
            on_redirect=self._retire,
            on_expire=self._retire,
        )

        self._cancel_retirement(order_id)
        previous = self._sessions.pop(order_id, None)
        if previous is not None:
            previous.close()

        self._sessions[order_id] = session
        return session.start()

    def get(self, order_id: str) -> PaymentSession:
        session = self._sessions.get(order_id)
        if session is None:
            raise SessionNotFoundError("Payment session not found")
        return session

    def close(self, order_id: str) -> PaymentSession:
        self._cancel_retirement(order_id)
        session = self._sessions.pop(order_id, None)
        if session is None:
            raise SessionNotFoundError("Payment session not found")
        session.close()
        return session

    def close_all(self):
        for handle in self._retirements.values():
            handle.cancel()
        self._retirements.clear()
        for session in self._sessions.values():
            session.close()
        self._sessions.clear()

    def _retire(self, session: PaymentSession):
        self._cancel_retirement(session.order_id)
        self._retirements[session.order_id] = self.scheduler.call_later(
            self.retention_seconds, lambda: self._discard(session)
        )

    def _discard(self, session: PaymentSession):
        self._retirements.pop(session.order_id, None)
        session.close()
        # A replacement opened for the same order stays registered.
        if self._sessions.get(session.order_id) is session:
            del self._sessions[session.order_id]
            log("payments", f"Session for {session.order_id[:12]} removed ({session.status.value})")

    def _cancel_retirement(self, order_id: str):
        handle = self._retirements.pop(order_id, None)
        if handle is not None:
            handle.cancel()

    def __len__(self) -> int:
        return len(self._sessions)


_store: Optional[PaymentSessionStore] = None


def get_session_store() -> PaymentSessionStore:
    """FastAPI dependency: the process-wide session store."""
    global _store
    if _store is None:
        _store = PaymentSessionStore(AsyncioScheduler())
    return _store

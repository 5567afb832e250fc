"""
Payment Routes — Payment verification sessions.
Handles: Bank transfer, Card, Cryptocurrency (Solana). Cash on Delivery never reaches here.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.errors import StorefrontError
from storefront.schemas.schemas import (
    PaymentSessionRequest, PaymentSessionResponse, VerifyRequest,
    CopyRequest, CopyResponse,
)
from storefront.services.session_store import PaymentSessionStore, get_session_store
from storefront.utils.rate_limiter import rate_limit

router = APIRouter(prefix="/api/payment", tags=["Payment"])


def _http_error(exc: StorefrontError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


@router.post("/session", response_model=PaymentSessionResponse)
async def open_session(
    payload: PaymentSessionRequest,
    store: PaymentSessionStore = Depends(get_session_store),
    _throttle: bool = Depends(rate_limit(requests=30, window=60, scope="payment")),
):
    """Start the payment countdown for an order. Replaces any session already open for it."""
    try:
        session = store.open(payload.order_id, payload.payment_method)
    except StorefrontError as exc:
        raise _http_error(exc)
    return PaymentSessionResponse(**session.snapshot())


@router.get("/session/{order_id}", response_model=PaymentSessionResponse)
async def get_session(
    order_id: str,
    store: PaymentSessionStore = Depends(get_session_store),
):
    """Current status, countdown and redirect state of a session."""
    try:
        session = store.get(order_id)
    except StorefrontError as exc:
        raise _http_error(exc)
    return PaymentSessionResponse(**session.snapshot())


@router.post("/session/{order_id}/verify", response_model=PaymentSessionResponse)
async def verify_payment(
    order_id: str,
    payload: VerifyRequest,
    store: PaymentSessionStore = Depends(get_session_store),
):
    """Submit a proof string or card details for the simulated check."""
    card = payload.card.model_dump() if payload.card else None
    try:
        session = store.get(order_id)
        session.verify(proof=payload.proof, card=card)
    except StorefrontError as exc:
        raise _http_error(exc)
    return PaymentSessionResponse(**session.snapshot())


@router.post("/session/{order_id}/copy", response_model=CopyResponse)
async def copy_detail(
    order_id: str,
    payload: CopyRequest,
    store: PaymentSessionStore = Depends(get_session_store),
):
    """Return a receiving-account value for the clipboard."""
    try:
        session = store.get(order_id)
        value = session.copy(payload.field)
    except StorefrontError as exc:
        raise _http_error(exc)
    return CopyResponse(field=payload.field, value=value, copied=session.copied)


@router.delete("/session/{order_id}")
async def close_session(
    order_id: str,
    store: PaymentSessionStore = Depends(get_session_store),
):
    """Tear down a session and cancel its timers (navigating away)."""
    try:
        session = store.close(order_id)
    except StorefrontError as exc:
        raise _http_error(exc)
    return {"success": True, "order_id": order_id, "status": session.status.value}

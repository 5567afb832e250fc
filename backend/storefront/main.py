"""
ShopSecure Storefront — FastAPI Application Entry Point

Aggregates all routers, configures middleware, and releases live payment
sessions on shutdown.
"""
import os
import time
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import get_settings
from storefront.routes import order_router, payment_router, confirmation_router
from storefront.schemas.schemas import HealthResponse
from storefront.services.session_store import get_session_store
from storefront.utils.logger import log

settings = get_settings()

# ─── Application Instance ───────────────────────────────────────────
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "Storefront demo API: product display, shipping intake, simulated "
        "card / bank transfer / crypto / cash-on-delivery payment, and order confirmation."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
)

# ─── Startup / Shutdown ─────────────────────────────────────────────
BOOT_TIME = time.time()


@app.on_event("startup")
def on_startup():
    """Log boot info."""
    os.makedirs(settings.LOG_DIR, exist_ok=True)

    boot_msg = (
        f"\n{'='*60}\n"
        f"  {settings.APP_NAME} v{settings.APP_VERSION}\n"
        f"  TIME: {datetime.now().isoformat()}\n"
        f"  PAYMENT WINDOW: {settings.PAYMENT_WINDOW_SECONDS}s\n"
        f"  DEBUG: {settings.DEBUG}\n"
        f"{'='*60}\n"
    )
    print(boot_msg)

    log_file = os.path.join(settings.LOG_DIR, "server.log")
    with open(log_file, "a") as f:
        f.write(boot_msg)


@app.on_event("shutdown")
def on_shutdown():
    """Cancel every pending payment timer."""
    store = get_session_store()
    count = len(store)
    store.close_all()
    log("server", f"Shutdown: closed {count} payment session(s)")


# ─── Middleware ──────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with timing."""
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 1)

    if request.url.path.startswith("/api"):
        print(f"  -> {request.method} {request.url.path} -> {response.status_code} ({duration}ms)")

    return response


# ─── API Routers ─────────────────────────────────────────────────────
app.include_router(order_router)
app.include_router(payment_router)
app.include_router(confirmation_router)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
def health():
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "active_payment_sessions": len(get_session_store()),
        "uptime_seconds": round(time.time() - BOOT_TIME, 1),
    }

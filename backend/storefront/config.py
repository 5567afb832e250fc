"""
Application Configuration — Environment & Settings
Centralizes all config from .env with Pydantic Settings for validation.
"""
from pathlib import Path
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings

# Resolve paths relative to backend/ directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # --- Core ---
    APP_NAME: str = "ShopSecure Storefront API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    CORS_ORIGINS: list[str] = ["*"]

    # --- Order Intake ---
    ORDER_ID_LENGTH: int = 16

    # --- Payment Session Timing (seconds) ---
    PAYMENT_WINDOW_SECONDS: int = 300
    COUNTDOWN_INTERVAL_SECONDS: float = 1.0
    VERIFICATION_DELAY_SECONDS: float = 1.5
    REDIRECT_DELAY_SECONDS: float = 3.0
    COPY_INDICATOR_SECONDS: float = 2.0
    # How long an expired or redirected session stays readable before removal
    SESSION_RETENTION_SECONDS: float = 30.0

    # --- Verification ---
    PROOF_MIN_LENGTH: int = 10

    # --- Receiving Accounts (display only) ---
    WALLET_ADDRESS: str = "8cdcxambJVYVXVGbQrRhFVaGs1QwhtztBEToBEyHW7Vr"
    BANK_ACCOUNT_NAME: str = "ShopSecure Payments Ltd"
    BANK_ACCOUNT_NUMBER: str = "1234567890"
    BANK_ROUTING_CODE: str = "HDFC0001234"
    BANK_NAME: str = "HDFC Bank"

    # --- Logging ---
    LOG_DIR: str = str(BASE_DIR / "logs")

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True


class PaymentConfig(BaseModel):
    """Receiving-account details shown on the payment page.

    Passed explicitly into payment sessions so the verification flow
    never reads process-wide state.
    """

    wallet_address: str
    bank_account_name: str
    bank_account_number: str
    bank_routing_code: str
    bank_name: str


@lru_cache()
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


def get_payment_config() -> PaymentConfig:
    settings = get_settings()
    return PaymentConfig(
        wallet_address=settings.WALLET_ADDRESS,
        bank_account_name=settings.BANK_ACCOUNT_NAME,
        bank_account_number=settings.BANK_ACCOUNT_NUMBER,
        bank_routing_code=settings.BANK_ROUTING_CODE,
        bank_name=settings.BANK_NAME,
    )

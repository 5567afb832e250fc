"""
Domain errors raised by storefront services and mapped to HTTP codes in routes.
"""


class StorefrontError(Exception):
    """Base class for storefront errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SessionNotFoundError(StorefrontError):
    status_code = 404


class SessionClosedError(StorefrontError):
    """Verification attempted after the session was confirmed or expired."""

    status_code = 409


class VerificationInProgressError(StorefrontError):
    status_code = 409


class UnsupportedPaymentMethodError(StorefrontError):
    status_code = 400


class UnknownCopyFieldError(StorefrontError):
    status_code = 400

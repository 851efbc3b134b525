from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class BillingError(DomainError):
    """Interaction with the billing provider failed."""


class BillingNotReadyError(BillingError):
    """Billing client is not configured or not initialized."""


class BillingProviderError(BillingError):
    """Network, parsing or store failure reported by the billing provider."""

    def __init__(
        self,
        message: str,
        *,
        code: str | int | None = None,
        readable_error_code: str | None = None,
        user_cancelled: bool = False,
    ):
        super().__init__(message)
        self.code = code
        self.readable_error_code = readable_error_code
        self.user_cancelled = user_cancelled


class PurchaseCancelledError(BillingProviderError):
    """User aborted a purchase or restore."""

    def __init__(self, message: str = "Purchase was cancelled by the user.", **kwargs):
        kwargs.setdefault("code", "purchaseCancelledError")
        kwargs["user_cancelled"] = True
        super().__init__(message, **kwargs)

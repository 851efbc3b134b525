from __future__ import annotations

from entitlement_engine.domain.entities.customer_info import CustomerInfo
from entitlement_engine.domain.entities.purchase import PurchaseResult, PurchasesPackage
from entitlement_engine.domain.exceptions import BillingProviderError


class StaticBillingClient:
    """Serves a fixed snapshot without talking to a billing provider.

    The default snapshot has no entitlements and no purchase history. With
    ``ready=False`` every use case short-circuits before reading it, which is
    how an unconfigured deployment is served.
    """

    def __init__(self, customer_info: CustomerInfo | None = None, *, ready: bool = True):
        self._customer_info = customer_info or CustomerInfo()
        self._ready = ready

    def is_ready(self) -> bool:
        return self._ready

    async def get_customer_info(self) -> CustomerInfo:
        return self._customer_info

    async def restore_purchases(self) -> CustomerInfo:
        return self._customer_info

    async def purchase_package(self, package: PurchasesPackage) -> PurchaseResult:
        raise BillingProviderError(
            f"Purchasing {package.product_identifier} requires a configured billing provider.",
            code="billing_unavailable",
            readable_error_code="BILLING_UNAVAILABLE",
        )

from __future__ import annotations

from typing import Protocol

from entitlement_engine.domain.entities.customer_info import CustomerInfo
from entitlement_engine.domain.entities.purchase import PurchaseResult, PurchasesPackage


class BillingPort(Protocol):
    def is_ready(self) -> bool:
        ...

    async def get_customer_info(self) -> CustomerInfo:
        ...

    async def restore_purchases(self) -> CustomerInfo:
        ...

    async def purchase_package(self, package: PurchasesPackage) -> PurchaseResult:
        ...

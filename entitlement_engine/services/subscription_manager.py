"""Single entry point for subscription gating.

Wraps the status, restore and purchase use cases around one injected billing
port and re-exports the pure helpers callers need to render a decision::

    manager = SubscriptionManager(billing_port=client)
    status = await manager.get_simple_subscription_status()
    if manager.get_paywall_type(status) == "renewal":
        ...
"""

from __future__ import annotations

from datetime import datetime
import logging

from entitlement_engine.application.dto.subscription import (
    PurchasePackageInput,
    PurchasePackageOutput,
    RestorePurchasesOutput,
)
from entitlement_engine.application.ports.billing_port import BillingPort
from entitlement_engine.application.use_cases.get_simple_subscription_status import (
    GetSimpleSubscriptionStatusUseCase,
)
from entitlement_engine.application.use_cases.get_subscription_status import GetSubscriptionStatusUseCase
from entitlement_engine.application.use_cases.purchase_package import PurchasePackageUseCase
from entitlement_engine.application.use_cases.restore_purchases import RestorePurchasesUseCase
from entitlement_engine.domain.entities.purchase import PurchasesPackage
from entitlement_engine.domain.entities.subscription import SimpleSubscriptionStatus, SubscriptionStatus
from entitlement_engine.domain.services.expiry_advisor import (
    DEFAULT_EXPIRING_SOON_DAYS,
    format_expiry_date,
    get_subscription_status_text,
    is_subscription_expiring_soon,
)
from entitlement_engine.domain.services.paywall import get_paywall_type, has_premium_access


class SubscriptionManager:
    def __init__(
        self,
        *,
        billing_port: BillingPort,
        logger: logging.Logger | None = None,
        expiring_soon_threshold_days: int = DEFAULT_EXPIRING_SOON_DAYS,
    ):
        self._expiring_soon_threshold_days = expiring_soon_threshold_days
        self._simple_status = GetSimpleSubscriptionStatusUseCase(billing_port=billing_port, logger=logger)
        self._status = GetSubscriptionStatusUseCase(billing_port=billing_port, logger=logger)
        self._restore = RestorePurchasesUseCase(billing_port=billing_port, logger=logger)
        self._purchase = PurchasePackageUseCase(billing_port=billing_port, logger=logger)

    async def get_simple_subscription_status(self) -> SimpleSubscriptionStatus:
        return await self._simple_status.execute()

    async def get_subscription_status(self) -> SubscriptionStatus:
        return await self._status.execute()

    async def restore_purchases(self) -> RestorePurchasesOutput:
        return await self._restore.execute()

    async def purchase_package(self, package: PurchasesPackage) -> PurchasePackageOutput:
        return await self._purchase.execute(PurchasePackageInput(package=package))

    def is_subscription_expiring_soon(self, expires_at: datetime | None, *, now: datetime | None = None) -> bool:
        return is_subscription_expiring_soon(
            expires_at,
            threshold_days=self._expiring_soon_threshold_days,
            now=now,
        )

    get_paywall_type = staticmethod(get_paywall_type)
    has_premium_access = staticmethod(has_premium_access)
    format_expiry_date = staticmethod(format_expiry_date)
    get_subscription_status_text = staticmethod(get_subscription_status_text)

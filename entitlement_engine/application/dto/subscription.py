from __future__ import annotations

from dataclasses import dataclass

from entitlement_engine.domain.entities.purchase import PurchasesPackage
from entitlement_engine.domain.entities.subscription import PaywallType, SimpleSubscriptionStatus


@dataclass(frozen=True)
class PaywallDecisionOutput:
    status: SimpleSubscriptionStatus
    paywall_type: PaywallType
    has_premium_access: bool


@dataclass(frozen=True)
class RestorePurchasesOutput:
    success: bool
    has_active_subscription: bool
    user_cancelled: bool = False
    status: SimpleSubscriptionStatus = "unknown"


@dataclass(frozen=True)
class PurchasePackageInput:
    package: PurchasesPackage


@dataclass(frozen=True)
class PurchasePackageOutput:
    success: bool
    user_cancelled: bool
    has_active_subscription: bool
    status: SimpleSubscriptionStatus
    product_identifier: str | None
    error_message: str | None
    debug_code: str | None

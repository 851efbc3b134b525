from __future__ import annotations

import logging

from fastapi import Depends

from entitlement_engine.application.ports.billing_port import BillingPort
from entitlement_engine.application.use_cases.get_paywall_decision import (
    DecidePaywallForSnapshotUseCase,
    GetPaywallDecisionUseCase,
)
from entitlement_engine.application.use_cases.get_simple_subscription_status import (
    GetSimpleSubscriptionStatusUseCase,
)
from entitlement_engine.application.use_cases.get_subscription_status import GetSubscriptionStatusUseCase
from entitlement_engine.application.use_cases.purchase_package import PurchasePackageUseCase
from entitlement_engine.application.use_cases.restore_purchases import RestorePurchasesUseCase
from entitlement_engine.infrastructure.clients.revenuecat_client import (
    RevenueCatClient,
    RevenueCatClientSettings,
)
from entitlement_engine.infrastructure.clients.static_billing_client import StaticBillingClient
from entitlement_engine.shared.config import get_settings


logger = logging.getLogger(__name__)


def _get_revenuecat_client_settings() -> RevenueCatClientSettings:
    settings = get_settings()
    return RevenueCatClientSettings(
        api_base=settings.revenuecat_api_base,
        api_key=settings.revenuecat_api_key,
        platform=settings.revenuecat_platform,
        timeout_seconds=settings.revenuecat_timeout_seconds,
    )


def get_billing_port(app_user_id: str) -> BillingPort:
    client_settings = _get_revenuecat_client_settings()
    if not client_settings.api_key:
        logger.warning("deps: revenuecat_not_configured using=static_billing_client")
        # No provider to ask: callers get "unknown" and a failed restore.
        return StaticBillingClient(ready=False)
    return RevenueCatClient(client_settings, app_user_id=app_user_id)


def get_get_simple_subscription_status_use_case(
    billing_port: BillingPort = Depends(get_billing_port),
) -> GetSimpleSubscriptionStatusUseCase:
    return GetSimpleSubscriptionStatusUseCase(billing_port=billing_port)


def get_get_subscription_status_use_case(
    billing_port: BillingPort = Depends(get_billing_port),
) -> GetSubscriptionStatusUseCase:
    return GetSubscriptionStatusUseCase(billing_port=billing_port)


def get_get_paywall_decision_use_case(
    simple_status_use_case: GetSimpleSubscriptionStatusUseCase = Depends(
        get_get_simple_subscription_status_use_case
    ),
) -> GetPaywallDecisionUseCase:
    return GetPaywallDecisionUseCase(get_simple_subscription_status_use_case=simple_status_use_case)


def get_decide_paywall_for_snapshot_use_case() -> DecidePaywallForSnapshotUseCase:
    return DecidePaywallForSnapshotUseCase()


def get_restore_purchases_use_case(
    billing_port: BillingPort = Depends(get_billing_port),
) -> RestorePurchasesUseCase:
    return RestorePurchasesUseCase(billing_port=billing_port)


def get_purchase_package_use_case(
    billing_port: BillingPort = Depends(get_billing_port),
) -> PurchasePackageUseCase:
    return PurchasePackageUseCase(billing_port=billing_port)

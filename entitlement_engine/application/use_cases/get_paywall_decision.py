from __future__ import annotations

from entitlement_engine.application.dto.subscription import PaywallDecisionOutput
from entitlement_engine.domain.entities.customer_info import CustomerInfo
from entitlement_engine.domain.entities.subscription import SimpleSubscriptionStatus
from entitlement_engine.domain.services.paywall import get_paywall_type, has_premium_access
from entitlement_engine.domain.services.status_classifier import classify_subscription_status

from .get_simple_subscription_status import GetSimpleSubscriptionStatusUseCase


def build_paywall_decision(status: SimpleSubscriptionStatus) -> PaywallDecisionOutput:
    return PaywallDecisionOutput(
        status=status,
        paywall_type=get_paywall_type(status),
        has_premium_access=has_premium_access(status),
    )


class GetPaywallDecisionUseCase:
    def __init__(self, *, get_simple_subscription_status_use_case: GetSimpleSubscriptionStatusUseCase):
        self._get_simple_subscription_status_use_case = get_simple_subscription_status_use_case

    async def execute(self) -> PaywallDecisionOutput:
        status = await self._get_simple_subscription_status_use_case.execute()
        return build_paywall_decision(status)


class DecidePaywallForSnapshotUseCase:
    def execute(self, *, customer_info: CustomerInfo) -> PaywallDecisionOutput:
        return build_paywall_decision(classify_subscription_status(customer_info))

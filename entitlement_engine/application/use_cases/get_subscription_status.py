from __future__ import annotations

import logging

from entitlement_engine.application.ports.billing_port import BillingPort
from entitlement_engine.domain.entities.subscription import SubscriptionStatus
from entitlement_engine.domain.services.status_detail import (
    build_subscription_status,
    inactive_subscription_status,
)

from .billing_common import fetch_customer_info


class GetSubscriptionStatusUseCase:
    def __init__(self, *, billing_port: BillingPort, logger: logging.Logger | None = None):
        self._billing_port = billing_port
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self) -> SubscriptionStatus:
        customer_info = await fetch_customer_info(
            self._billing_port,
            log=self._logger,
            operation="subscription_status",
        )
        if customer_info is None:
            return inactive_subscription_status()

        try:
            return build_subscription_status(customer_info)
        except Exception as exc:  # noqa: BLE001
            self._logger.warning("subscription_status: detail_failed error=%s", exc)
            return inactive_subscription_status()

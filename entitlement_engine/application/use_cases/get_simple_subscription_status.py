from __future__ import annotations

import logging

from entitlement_engine.application.ports.billing_port import BillingPort
from entitlement_engine.domain.entities.subscription import SimpleSubscriptionStatus
from entitlement_engine.domain.services.status_classifier import classify_subscription_status

from .billing_common import fetch_customer_info


class GetSimpleSubscriptionStatusUseCase:
    def __init__(self, *, billing_port: BillingPort, logger: logging.Logger | None = None):
        self._billing_port = billing_port
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self) -> SimpleSubscriptionStatus:
        customer_info = await fetch_customer_info(
            self._billing_port,
            log=self._logger,
            operation="simple_subscription_status",
        )
        if customer_info is None:
            return "unknown"

        try:
            status = classify_subscription_status(customer_info)
        except Exception as exc:  # noqa: BLE001
            self._logger.warning("simple_subscription_status: classification_failed error=%s", exc)
            return "unknown"

        self._logger.info("simple_subscription_status: classified status=%s", status)
        return status

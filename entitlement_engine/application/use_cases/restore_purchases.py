from __future__ import annotations

import logging

from entitlement_engine.application.dto.subscription import RestorePurchasesOutput
from entitlement_engine.application.ports.billing_port import BillingPort
from entitlement_engine.domain.services.purchase_errors import interpret_purchase_error
from entitlement_engine.domain.services.status_classifier import (
    classify_subscription_status,
    has_active_entitlement,
)

from .billing_common import is_billing_ready, log_customer_info


class RestorePurchasesUseCase:
    def __init__(self, *, billing_port: BillingPort, logger: logging.Logger | None = None):
        self._billing_port = billing_port
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self) -> RestorePurchasesOutput:
        if not is_billing_ready(self._billing_port, log=self._logger, operation="restore_purchases"):
            return RestorePurchasesOutput(success=False, has_active_subscription=False)

        try:
            customer_info = await self._billing_port.restore_purchases()
        except Exception as exc:  # noqa: BLE001
            error_info = interpret_purchase_error(exc)
            if error_info.is_user_cancelled:
                self._logger.info("restore_purchases: cancelled_by_user")
                return RestorePurchasesOutput(
                    success=False,
                    has_active_subscription=False,
                    user_cancelled=True,
                )
            self._logger.warning(
                "restore_purchases: provider_error error=%s debug_code=%s",
                exc,
                error_info.debug_code,
            )
            return RestorePurchasesOutput(success=False, has_active_subscription=False)

        log_customer_info(customer_info, log=self._logger, operation="restore_purchases")
        has_active = has_active_entitlement(customer_info)
        status = classify_subscription_status(customer_info)
        self._logger.info(
            "restore_purchases: restored has_active_subscription=%s status=%s",
            has_active,
            status,
        )
        return RestorePurchasesOutput(
            success=True,
            has_active_subscription=has_active,
            status=status,
        )

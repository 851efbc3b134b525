from __future__ import annotations

import logging

from entitlement_engine.application.dto.subscription import PurchasePackageInput, PurchasePackageOutput
from entitlement_engine.application.ports.billing_port import BillingPort
from entitlement_engine.domain.services.paywall import has_premium_access
from entitlement_engine.domain.services.purchase_errors import interpret_purchase_error
from entitlement_engine.domain.services.status_classifier import classify_subscription_status

from .billing_common import is_billing_ready, log_customer_info


BILLING_NOT_READY_MESSAGE = "Billing is not available yet."


class PurchasePackageUseCase:
    def __init__(self, *, billing_port: BillingPort, logger: logging.Logger | None = None):
        self._billing_port = billing_port
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, command: PurchasePackageInput) -> PurchasePackageOutput:
        package = command.package
        if not is_billing_ready(self._billing_port, log=self._logger, operation="purchase_package"):
            return _failed(message=BILLING_NOT_READY_MESSAGE, debug_code=None)

        try:
            result = await self._billing_port.purchase_package(package)
        except Exception as exc:  # noqa: BLE001
            error_info = interpret_purchase_error(exc)
            if error_info.is_user_cancelled:
                self._logger.info(
                    "purchase_package: cancelled_by_user package=%s product=%s",
                    package.identifier,
                    package.product_identifier,
                )
                return PurchasePackageOutput(
                    success=False,
                    user_cancelled=True,
                    has_active_subscription=False,
                    status="unknown",
                    product_identifier=package.product_identifier,
                    error_message=None,
                    debug_code=error_info.debug_code or None,
                )
            self._logger.warning(
                "purchase_package: provider_error package=%s product=%s error=%s debug_code=%s",
                package.identifier,
                package.product_identifier,
                exc,
                error_info.debug_code,
            )
            return _failed(message=error_info.brief, debug_code=error_info.debug_code or None)

        log_customer_info(result.customer_info, log=self._logger, operation="purchase_package")
        status = classify_subscription_status(result.customer_info)
        self._logger.info(
            "purchase_package: purchased product=%s status=%s",
            result.product_identifier,
            status,
        )
        return PurchasePackageOutput(
            success=True,
            user_cancelled=False,
            has_active_subscription=has_premium_access(status),
            status=status,
            product_identifier=result.product_identifier,
            error_message=None,
            debug_code=None,
        )


def _failed(*, message: str, debug_code: str | None) -> PurchasePackageOutput:
    return PurchasePackageOutput(
        success=False,
        user_cancelled=False,
        has_active_subscription=False,
        status="unknown",
        product_identifier=None,
        error_message=message,
        debug_code=debug_code,
    )

from __future__ import annotations

import logging

from entitlement_engine.application.ports.billing_port import BillingPort
from entitlement_engine.domain.entities.customer_info import CustomerInfo


def is_billing_ready(billing_port: BillingPort, *, log: logging.Logger, operation: str) -> bool:
    try:
        ready = bool(billing_port.is_ready())
    except Exception as exc:  # noqa: BLE001
        log.warning("%s: readiness_check_failed error=%s", operation, exc)
        return False
    if not ready:
        log.warning("%s: billing_not_ready", operation)
    return ready


async def fetch_customer_info(
    billing_port: BillingPort,
    *,
    log: logging.Logger,
    operation: str,
) -> CustomerInfo | None:
    """Read a snapshot from the provider, or None when it cannot be trusted."""
    if not is_billing_ready(billing_port, log=log, operation=operation):
        return None

    try:
        customer_info = await billing_port.get_customer_info()
    except Exception as exc:  # noqa: BLE001
        log.warning("%s: provider_error error=%s", operation, exc)
        return None

    log_customer_info(customer_info, log=log, operation=operation)
    return customer_info


def log_customer_info(customer_info: CustomerInfo, *, log: logging.Logger, operation: str) -> None:
    entitlements = customer_info.entitlements
    log.debug(
        "%s: customer_info active_entitlements=%s all_entitlements=%s purchased_products=%s active_subscriptions=%s",
        operation,
        len(entitlements.active or {}) if entitlements else 0,
        len(entitlements.all or {}) if entitlements else 0,
        len(customer_info.all_purchased_product_identifiers or ()),
        len(customer_info.active_subscriptions or ()),
    )

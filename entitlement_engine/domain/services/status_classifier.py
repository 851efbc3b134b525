"""Classification of a billing snapshot into a simple subscription status.

Entitlements are visited in lexicographic key order so that a snapshot with
several active (or historical) entitlements always classifies the same way.
"""

from __future__ import annotations

from collections.abc import Mapping

from entitlement_engine.domain.entities.customer_info import CustomerInfo, EntitlementInfo
from entitlement_engine.domain.entities.subscription import SimpleSubscriptionStatus


def _active_entitlements(info: CustomerInfo | None) -> Mapping[str, EntitlementInfo]:
    if info is None or info.entitlements is None:
        return {}
    return info.entitlements.active or {}


def _all_entitlements(info: CustomerInfo | None) -> Mapping[str, EntitlementInfo]:
    if info is None or info.entitlements is None:
        return {}
    return info.entitlements.all or {}


def _first_entry(entitlements: Mapping[str, EntitlementInfo]) -> tuple[str, EntitlementInfo] | None:
    if not entitlements:
        return None
    key = min(entitlements)
    return key, entitlements[key]


def select_active_entitlement(info: CustomerInfo | None) -> tuple[str, EntitlementInfo] | None:
    return _first_entry(_active_entitlements(info))


def has_active_entitlement(info: CustomerInfo | None) -> bool:
    return bool(_active_entitlements(info))


def has_purchase_history(info: CustomerInfo | None) -> bool:
    if info is None:
        return False
    return bool(info.all_purchased_product_identifiers)


def classify_subscription_status(info: CustomerInfo | None) -> SimpleSubscriptionStatus:
    selected = select_active_entitlement(info)
    if selected is not None:
        _, entitlement = selected
        if entitlement.period_type == "TRIAL":
            return "trial_active"
        # Cancelled-but-still-in-period entitlements are reported as active.
        return "active"

    if not has_purchase_history(info):
        # Historical entitlements without any purchase are treated as a new customer.
        return "never_subscribed"

    latest = _first_entry(_all_entitlements(info))
    if latest is not None and latest[1].period_type == "TRIAL":
        return "trial_expired"
    return "expired"

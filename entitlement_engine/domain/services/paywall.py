from __future__ import annotations

from entitlement_engine.domain.entities.subscription import PaywallType, SimpleSubscriptionStatus


PAYWALL_BY_STATUS: dict[str, PaywallType] = {
    "never_subscribed": "payment",
    "expired": "renewal",
    "trial_expired": "renewal",
    "unknown": "payment",
    "active": "none",
    "trial_active": "none",
    "cancelled_but_active": "none",
}

PREMIUM_STATUSES: frozenset[str] = frozenset({"active", "trial_active", "cancelled_but_active"})


def get_paywall_type(status: SimpleSubscriptionStatus) -> PaywallType:
    # Unrecognised values are denied like "unknown".
    return PAYWALL_BY_STATUS.get(status, "payment")


def has_premium_access(status: SimpleSubscriptionStatus) -> bool:
    return status in PREMIUM_STATUSES

from __future__ import annotations

from datetime import date, datetime, timedelta

from entitlement_engine.domain.entities.subscription import SimpleSubscriptionStatus, SubscriptionStatus
from entitlement_engine.shared.clock import as_utc, utcnow


DEFAULT_EXPIRING_SOON_DAYS = 3

# en-US month names, independent of the process locale.
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

STATUS_MESSAGES: dict[str, str] = {
    "active": "Your subscription is active and will renew automatically",
    "trial_active": "You're currently in your free trial period",
    "cancelled_but_active": "Your subscription is cancelled but still active until expiration",
    "expired": "Your subscription has expired",
    "trial_expired": "Your free trial has ended",
}

UNKNOWN_STATUS_MESSAGE = "Unable to determine subscription status"


def format_expiry_date(value: date | datetime) -> str:
    return f"{_MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def is_subscription_expiring_soon(
    expires_at: datetime | None,
    *,
    threshold_days: int = DEFAULT_EXPIRING_SOON_DAYS,
    now: datetime | None = None,
) -> bool:
    if expires_at is None:
        return False
    reference = as_utc(now) if now is not None else utcnow()
    return as_utc(expires_at) <= reference + timedelta(days=threshold_days)


def _with_date(label: str, verb: str, expires_at: datetime | None) -> str:
    if expires_at is None:
        return label
    return f"{label} ({verb} {format_expiry_date(expires_at)})"


def get_subscription_status_text(status: SubscriptionStatus) -> str:
    if not status.is_active:
        return "No active subscription"

    if status.is_trial:
        verb = "auto-renews" if status.will_renew else "ends"
        return _with_date("Free trial", verb, status.expires_at)

    verb = "renews" if status.will_renew else "ends"
    return _with_date("Active", verb, status.expires_at)


def get_status_message(status: SimpleSubscriptionStatus) -> str:
    return STATUS_MESSAGES.get(status, UNKNOWN_STATUS_MESSAGE)

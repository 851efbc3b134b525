from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


SimpleSubscriptionStatus = Literal[
    "active",
    "trial_active",
    "cancelled_but_active",
    "expired",
    "trial_expired",
    "never_subscribed",
    "unknown",
]

PaywallType = Literal["payment", "renewal", "none"]

Platform = Literal["ios", "android"]


@dataclass(frozen=True)
class SubscriptionStatus:
    is_active: bool
    is_trial: bool
    will_renew: bool
    expires_at: datetime | None
    product_identifier: str | None
    entitlement_identifier: str | None

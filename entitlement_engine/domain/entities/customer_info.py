from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal


PeriodType = Literal["NORMAL", "INTRO", "TRIAL", "PREPAID"]

PERIOD_TYPES: frozenset[str] = frozenset({"NORMAL", "INTRO", "TRIAL", "PREPAID"})


@dataclass(frozen=True)
class EntitlementInfo:
    identifier: str
    period_type: PeriodType
    will_renew: bool
    expiration_date: datetime | None
    product_identifier: str | None


@dataclass(frozen=True)
class EntitlementInfos:
    active: Mapping[str, EntitlementInfo] = field(default_factory=dict)
    all: Mapping[str, EntitlementInfo] = field(default_factory=dict)


@dataclass(frozen=True)
class CustomerInfo:
    entitlements: EntitlementInfos = field(default_factory=EntitlementInfos)
    all_purchased_product_identifiers: tuple[str, ...] = ()
    active_subscriptions: frozenset[str] = frozenset()
    original_app_user_id: str | None = None
    management_url: str | None = None


def normalize_period_type(value: str | None) -> PeriodType:
    period_type = (value or "").strip().upper()
    if period_type in PERIOD_TYPES:
        return period_type  # type: ignore[return-value]
    return "NORMAL"

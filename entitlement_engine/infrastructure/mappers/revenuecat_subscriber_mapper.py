from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from entitlement_engine.domain.entities.customer_info import (
    CustomerInfo,
    EntitlementInfo,
    EntitlementInfos,
    normalize_period_type,
)
from entitlement_engine.shared.clock import as_utc, parse_iso_datetime


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _is_unexpired(expires_at: datetime | None, grace_expires_at: datetime | None, now: datetime) -> bool:
    if expires_at is None:
        return True
    effective = max(expires_at, grace_expires_at) if grace_expires_at else expires_at
    return effective > now


def _will_renew(subscription: Mapping[str, Any], expires_at: datetime | None) -> bool:
    if not subscription or expires_at is None:
        return False
    return (
        subscription.get("unsubscribe_detected_at") is None
        and subscription.get("billing_issues_detected_at") is None
    )


def map_subscriber_entitlement(
    *,
    entitlement_id: str,
    row: Mapping[str, Any],
    subscriptions: Mapping[str, Any],
) -> EntitlementInfo:
    product_identifier = row.get("product_identifier")
    subscription = _as_mapping(subscriptions.get(product_identifier)) if product_identifier else {}
    expires_at = parse_iso_datetime(row.get("expires_date"))
    return EntitlementInfo(
        identifier=entitlement_id,
        period_type=normalize_period_type(subscription.get("period_type")),
        will_renew=_will_renew(subscription, expires_at),
        expiration_date=expires_at,
        product_identifier=product_identifier,
    )


def map_subscriber_to_customer_info(subscriber: Mapping[str, Any], *, now: datetime) -> CustomerInfo:
    now = as_utc(now)
    subscriptions = _as_mapping(subscriber.get("subscriptions"))
    non_subscriptions = _as_mapping(subscriber.get("non_subscriptions"))

    all_entitlements: dict[str, EntitlementInfo] = {}
    active_entitlements: dict[str, EntitlementInfo] = {}
    for entitlement_id, row in _as_mapping(subscriber.get("entitlements")).items():
        row = _as_mapping(row)
        entitlement = map_subscriber_entitlement(
            entitlement_id=entitlement_id,
            row=row,
            subscriptions=subscriptions,
        )
        all_entitlements[entitlement_id] = entitlement
        grace_expires_at = parse_iso_datetime(row.get("grace_period_expires_date"))
        if _is_unexpired(entitlement.expiration_date, grace_expires_at, now):
            active_entitlements[entitlement_id] = entitlement

    purchased: list[str] = []
    for product_id in (*subscriptions.keys(), *non_subscriptions.keys()):
        if product_id not in purchased:
            purchased.append(product_id)

    active_subscriptions = frozenset(
        product_id
        for product_id, row in subscriptions.items()
        if _is_unexpired(
            parse_iso_datetime(_as_mapping(row).get("expires_date")),
            parse_iso_datetime(_as_mapping(row).get("grace_period_expires_date")),
            now,
        )
    )

    return CustomerInfo(
        entitlements=EntitlementInfos(active=active_entitlements, all=all_entitlements),
        all_purchased_product_identifiers=tuple(purchased),
        active_subscriptions=active_subscriptions,
        original_app_user_id=subscriber.get("original_app_user_id"),
        management_url=subscriber.get("management_url"),
    )

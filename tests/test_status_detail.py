from __future__ import annotations

from datetime import datetime, timezone

from entitlement_engine.domain.entities.customer_info import (
    CustomerInfo,
    EntitlementInfo,
    EntitlementInfos,
)
from entitlement_engine.domain.services.status_detail import (
    build_subscription_status,
    inactive_subscription_status,
)


EXPIRES = datetime(2024, 12, 31, tzinfo=timezone.utc)


def _entitlement(*, period_type: str = "NORMAL", will_renew: bool = True) -> EntitlementInfo:
    return EntitlementInfo(
        identifier="premium",
        period_type=period_type,
        will_renew=will_renew,
        expiration_date=EXPIRES,
        product_identifier="premium_monthly",
    )


def test_active_entitlement_fills_detail():
    info = CustomerInfo(
        entitlements=EntitlementInfos(active={"premium": _entitlement()}),
        all_purchased_product_identifiers=("premium_monthly",),
    )

    detail = build_subscription_status(info)

    assert detail.is_active is True
    assert detail.is_trial is False
    assert detail.will_renew is True
    assert detail.expires_at == EXPIRES
    assert detail.product_identifier == "premium_monthly"
    assert detail.entitlement_identifier == "premium"


def test_active_trial_sets_is_trial():
    info = CustomerInfo(entitlements=EntitlementInfos(active={"premium": _entitlement(period_type="TRIAL")}))

    assert build_subscription_status(info).is_trial is True


def test_no_active_entitlement_hides_historical_expiry():
    info = CustomerInfo(
        entitlements=EntitlementInfos(all={"premium": _entitlement()}),
        all_purchased_product_identifiers=("premium_monthly",),
    )

    detail = build_subscription_status(info)

    assert detail == inactive_subscription_status()


def test_expired_trial_marks_inactive_detail_as_trial():
    info = CustomerInfo(
        entitlements=EntitlementInfos(all={"premium": _entitlement(period_type="TRIAL")}),
        all_purchased_product_identifiers=("premium_monthly",),
    )

    detail = build_subscription_status(info)

    assert detail.is_active is False
    assert detail.is_trial is True
    assert detail.expires_at is None
    assert detail.product_identifier is None

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from entitlement_engine.domain.entities.customer_info import (
    CustomerInfo,
    EntitlementInfo,
    EntitlementInfos,
)
from entitlement_engine.domain.entities.purchase import PurchasesPackage
from entitlement_engine.infrastructure.clients.static_billing_client import StaticBillingClient
from entitlement_engine.services.subscription_manager import SubscriptionManager


EXPIRES = datetime(2024, 12, 31, tzinfo=timezone.utc)


def _active_info() -> CustomerInfo:
    entitlement = EntitlementInfo(
        identifier="premium",
        period_type="NORMAL",
        will_renew=True,
        expiration_date=EXPIRES,
        product_identifier="premium_monthly",
    )
    return CustomerInfo(
        entitlements=EntitlementInfos(active={"premium": entitlement}, all={"premium": entitlement}),
        all_purchased_product_identifiers=("premium_monthly",),
    )


class SequencedBillingPort:
    """Hands out one snapshot per fetch and finishes them in reverse order."""

    def __init__(self, snapshots: list[CustomerInfo]):
        self.snapshots = snapshots
        self.fetches = 0

    def is_ready(self) -> bool:
        return True

    async def get_customer_info(self) -> CustomerInfo:
        index = self.fetches
        self.fetches += 1
        await asyncio.sleep(0.01 * (len(self.snapshots) - index))
        return self.snapshots[index]


@pytest.mark.asyncio
async def test_active_subscriber_end_to_end():
    manager = SubscriptionManager(billing_port=StaticBillingClient(_active_info()))

    status = await manager.get_simple_subscription_status()
    detail = await manager.get_subscription_status()

    assert status == "active"
    assert manager.get_paywall_type(status) == "none"
    assert manager.has_premium_access(status) is True
    assert manager.get_subscription_status_text(detail) == "Active (renews December 31, 2024)"
    assert manager.format_expiry_date(detail.expires_at) == "December 31, 2024"


@pytest.mark.asyncio
async def test_empty_snapshot_means_payment_paywall():
    manager = SubscriptionManager(billing_port=StaticBillingClient())

    status = await manager.get_simple_subscription_status()

    assert status == "never_subscribed"
    assert manager.get_paywall_type(status) == "payment"


@pytest.mark.asyncio
async def test_uninitialised_billing_is_unknown():
    manager = SubscriptionManager(billing_port=StaticBillingClient(ready=False))

    status = await manager.get_simple_subscription_status()
    restore = await manager.restore_purchases()

    assert status == "unknown"
    assert manager.get_paywall_type(status) == "payment"
    assert restore.success is False


@pytest.mark.asyncio
async def test_restore_and_purchase_through_manager():
    manager = SubscriptionManager(billing_port=StaticBillingClient(_active_info()))

    restore = await manager.restore_purchases()
    purchase = await manager.purchase_package(
        PurchasesPackage(identifier="$rc_annual", product_identifier="premium_yearly", store_token="tok")
    )

    assert restore.success is True
    assert restore.has_active_subscription is True
    assert purchase.success is False
    assert purchase.error_message == "Billing is unavailable on this device."


@pytest.mark.asyncio
async def test_concurrent_calls_each_read_their_own_snapshot():
    trial = EntitlementInfo(
        identifier="premium",
        period_type="TRIAL",
        will_renew=True,
        expiration_date=EXPIRES,
        product_identifier="premium_monthly",
    )
    port = SequencedBillingPort(
        [
            _active_info(),
            CustomerInfo(),
            CustomerInfo(
                entitlements=EntitlementInfos(active={"premium": trial}),
                all_purchased_product_identifiers=("premium_monthly",),
            ),
            CustomerInfo(all_purchased_product_identifiers=("premium_monthly",)),
        ]
    )
    manager = SubscriptionManager(billing_port=port)

    results = await asyncio.gather(
        manager.get_simple_subscription_status(),
        manager.get_simple_subscription_status(),
        manager.get_subscription_status(),
        manager.get_subscription_status(),
    )

    assert port.fetches == 4
    assert results[0] == "active"
    assert results[1] == "never_subscribed"
    assert results[2].is_active is True
    assert results[2].is_trial is True
    assert results[3].is_active is False
    assert results[3].expires_at is None


def test_expiring_soon_uses_configured_threshold():
    manager = SubscriptionManager(billing_port=StaticBillingClient(), expiring_soon_threshold_days=7)
    now = datetime(2024, 6, 1, tzinfo=timezone.utc)

    assert manager.is_subscription_expiring_soon(now + timedelta(days=6), now=now) is True
    assert manager.is_subscription_expiring_soon(now + timedelta(days=8), now=now) is False
    assert manager.is_subscription_expiring_soon(None) is False

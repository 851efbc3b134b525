from __future__ import annotations

import pytest

from entitlement_engine.domain.services.paywall import get_paywall_type, has_premium_access


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("never_subscribed", "payment"),
        ("expired", "renewal"),
        ("trial_expired", "renewal"),
        ("unknown", "payment"),
        ("active", "none"),
        ("trial_active", "none"),
        ("cancelled_but_active", "none"),
    ],
)
def test_paywall_type_by_status(status, expected):
    assert get_paywall_type(status) == expected


def test_unrecognised_status_fails_closed():
    assert get_paywall_type("grace_period") == "payment"


def test_premium_access_only_for_entitled_statuses():
    assert has_premium_access("active") is True
    assert has_premium_access("trial_active") is True
    assert has_premium_access("cancelled_but_active") is True
    assert has_premium_access("expired") is False
    assert has_premium_access("unknown") is False
    assert has_premium_access("never_subscribed") is False

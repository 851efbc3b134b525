from __future__ import annotations

from fastapi.testclient import TestClient

from entitlement_engine.core.auth import require_service_token
from entitlement_engine.main import app


def test_decision_for_expired_trial_snapshot():
    app.dependency_overrides[require_service_token] = lambda: None

    client = TestClient(app)
    response = client.post(
        "/v1/paywall/decision",
        json={
            "entitlements": {
                "active": {},
                "all": {
                    "premium": {
                        "identifier": "premium",
                        "periodType": "TRIAL",
                        "willRenew": False,
                        "expirationDate": "2024-01-01T00:00:00Z",
                        "productIdentifier": "premium_monthly",
                    }
                },
            },
            "allPurchasedProductIdentifiers": ["premium_monthly"],
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "status": "trial_expired",
        "paywall_type": "renewal",
        "has_premium_access": False,
    }

    app.dependency_overrides.clear()


def test_decision_for_active_snapshot_with_lowercase_period():
    app.dependency_overrides[require_service_token] = lambda: None

    client = TestClient(app)
    payload = client.post(
        "/v1/paywall/decision",
        json={
            "entitlements": {
                "active": {"premium": {"periodType": "trial", "willRenew": True}},
            },
            "allPurchasedProductIdentifiers": ["premium_monthly"],
        },
    ).json()

    assert payload["status"] == "trial_active"
    assert payload["paywall_type"] == "none"

    app.dependency_overrides.clear()


def test_decision_for_empty_snapshot():
    app.dependency_overrides[require_service_token] = lambda: None

    client = TestClient(app)
    payload = client.post(
        "/v1/paywall/decision",
        json={"entitlements": None, "allPurchasedProductIdentifiers": None},
    ).json()

    assert payload["status"] == "never_subscribed"
    assert payload["paywall_type"] == "payment"

    app.dependency_overrides.clear()


def test_invalid_expiration_date_is_rejected():
    app.dependency_overrides[require_service_token] = lambda: None

    client = TestClient(app)
    response = client.post(
        "/v1/paywall/decision",
        json={"entitlements": {"all": {"premium": {"expirationDate": "yesterday"}}}},
    )

    assert response.status_code == 422

    app.dependency_overrides.clear()

from __future__ import annotations

from entitlement_engine.domain.entities.customer_info import CustomerInfo
from entitlement_engine.domain.entities.subscription import SubscriptionStatus
from entitlement_engine.domain.services.status_classifier import (
    classify_subscription_status,
    select_active_entitlement,
)


def inactive_subscription_status(*, is_trial: bool = False) -> SubscriptionStatus:
    return SubscriptionStatus(
        is_active=False,
        is_trial=is_trial,
        will_renew=False,
        expires_at=None,
        product_identifier=None,
        entitlement_identifier=None,
    )


def build_subscription_status(info: CustomerInfo | None) -> SubscriptionStatus:
    selected = select_active_entitlement(info)
    if selected is None:
        # Historical expiry dates are not surfaced here.
        return inactive_subscription_status(
            is_trial=classify_subscription_status(info) == "trial_expired",
        )

    entitlement_id, entitlement = selected
    return SubscriptionStatus(
        is_active=True,
        is_trial=entitlement.period_type == "TRIAL",
        will_renew=bool(entitlement.will_renew),
        expires_at=entitlement.expiration_date,
        product_identifier=entitlement.product_identifier,
        entitlement_identifier=entitlement_id,
    )

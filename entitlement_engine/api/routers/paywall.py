from __future__ import annotations

from fastapi import APIRouter, Depends

from entitlement_engine.api.deps import get_decide_paywall_for_snapshot_use_case
from entitlement_engine.api.schemas.paywall import (
    CustomerInfoPayload,
    EntitlementInfoPayload,
    PaywallDecisionResponse,
)
from entitlement_engine.application.use_cases.get_paywall_decision import DecidePaywallForSnapshotUseCase
from entitlement_engine.core.auth import require_service_token
from entitlement_engine.domain.entities.customer_info import (
    CustomerInfo,
    EntitlementInfo,
    EntitlementInfos,
    normalize_period_type,
)
from entitlement_engine.shared.clock import parse_iso_datetime


router = APIRouter(dependencies=[Depends(require_service_token)])


def _to_entitlement(entitlement_id: str, payload: EntitlementInfoPayload) -> EntitlementInfo:
    return EntitlementInfo(
        identifier=payload.identifier or entitlement_id,
        period_type=normalize_period_type(payload.period_type),
        will_renew=payload.will_renew,
        expiration_date=parse_iso_datetime(payload.expiration_date),
        product_identifier=payload.product_identifier,
    )


def _to_customer_info(payload: CustomerInfoPayload) -> CustomerInfo:
    return CustomerInfo(
        entitlements=EntitlementInfos(
            active={key: _to_entitlement(key, row) for key, row in payload.entitlements.active.items()},
            all={key: _to_entitlement(key, row) for key, row in payload.entitlements.all.items()},
        ),
        all_purchased_product_identifiers=tuple(payload.all_purchased_product_identifiers),
        active_subscriptions=frozenset(payload.active_subscriptions),
        original_app_user_id=payload.original_app_user_id,
        management_url=payload.management_url,
    )


@router.post("/v1/paywall/decision", response_model=PaywallDecisionResponse)
def decide_paywall(
    req: CustomerInfoPayload,
    use_case: DecidePaywallForSnapshotUseCase = Depends(get_decide_paywall_for_snapshot_use_case),
):
    output = use_case.execute(customer_info=_to_customer_info(req))
    return PaywallDecisionResponse(
        status=output.status,
        paywall_type=output.paywall_type,
        has_premium_access=output.has_premium_access,
    )

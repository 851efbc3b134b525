from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from entitlement_engine.api.deps import (
    get_get_paywall_decision_use_case,
    get_get_subscription_status_use_case,
    get_purchase_package_use_case,
    get_restore_purchases_use_case,
)
from entitlement_engine.api.schemas.subscription import (
    CancellationInstructionsResponse,
    PurchaseRequest,
    PurchaseResponse,
    RestorePurchasesResponse,
    SubscriptionDetailResponse,
    SubscriptionStatusResponse,
)
from entitlement_engine.application.dto.subscription import PurchasePackageInput
from entitlement_engine.application.use_cases.get_paywall_decision import GetPaywallDecisionUseCase
from entitlement_engine.application.use_cases.get_subscription_status import GetSubscriptionStatusUseCase
from entitlement_engine.application.use_cases.purchase_package import PurchasePackageUseCase
from entitlement_engine.application.use_cases.restore_purchases import RestorePurchasesUseCase
from entitlement_engine.core.auth import require_service_token
from entitlement_engine.domain.entities.purchase import PurchasesPackage
from entitlement_engine.domain.entities.subscription import Platform
from entitlement_engine.domain.services.expiry_advisor import (
    format_expiry_date,
    get_status_message,
    get_subscription_status_text,
    is_subscription_expiring_soon,
)
from entitlement_engine.domain.services.subscription_management import (
    get_cancellation_instructions,
    restore_result_message,
)
from entitlement_engine.shared.config import get_settings


router = APIRouter(dependencies=[Depends(require_service_token)])


@router.get(
    "/v1/subscribers/{app_user_id}/subscription-status",
    response_model=SubscriptionStatusResponse,
)
async def get_subscription_status_summary(
    use_case: GetPaywallDecisionUseCase = Depends(get_get_paywall_decision_use_case),
):
    output = await use_case.execute()
    return SubscriptionStatusResponse(
        status=output.status,
        paywall_type=output.paywall_type,
        has_premium_access=output.has_premium_access,
        message=get_status_message(output.status),
    )


@router.get(
    "/v1/subscribers/{app_user_id}/subscription",
    response_model=SubscriptionDetailResponse,
)
async def get_subscription_detail(
    use_case: GetSubscriptionStatusUseCase = Depends(get_get_subscription_status_use_case),
):
    settings = get_settings()
    detail = await use_case.execute()
    return SubscriptionDetailResponse(
        is_active=detail.is_active,
        is_trial=detail.is_trial,
        will_renew=detail.will_renew,
        expires_at=detail.expires_at,
        expires_at_display=format_expiry_date(detail.expires_at) if detail.expires_at else None,
        expiring_soon=is_subscription_expiring_soon(
            detail.expires_at,
            threshold_days=settings.expiring_soon_threshold_days,
        ),
        product_identifier=detail.product_identifier,
        entitlement_identifier=detail.entitlement_identifier,
        status_text=get_subscription_status_text(detail),
    )


@router.post(
    "/v1/subscribers/{app_user_id}/restore",
    response_model=RestorePurchasesResponse,
)
async def restore_purchases(
    use_case: RestorePurchasesUseCase = Depends(get_restore_purchases_use_case),
):
    output = await use_case.execute()
    return RestorePurchasesResponse(
        success=output.success,
        has_active_subscription=output.has_active_subscription,
        user_cancelled=output.user_cancelled,
        status=output.status,
        message=restore_result_message(
            success=output.success,
            has_active_subscription=output.has_active_subscription,
            user_cancelled=output.user_cancelled,
        ),
    )


@router.post(
    "/v1/subscribers/{app_user_id}/purchases",
    response_model=PurchaseResponse,
)
async def purchase_package(
    req: PurchaseRequest,
    use_case: PurchasePackageUseCase = Depends(get_purchase_package_use_case),
):
    output = await use_case.execute(
        PurchasePackageInput(
            package=PurchasesPackage(
                identifier=req.package_identifier or req.product_identifier,
                product_identifier=req.product_identifier,
                store_token=req.store_token,
            )
        )
    )
    return PurchaseResponse(
        success=output.success,
        user_cancelled=output.user_cancelled,
        has_active_subscription=output.has_active_subscription,
        status=output.status,
        product_identifier=output.product_identifier,
        error_message=output.error_message,
        debug_code=output.debug_code,
    )


@router.get(
    "/v1/subscription/cancellation-instructions",
    response_model=CancellationInstructionsResponse,
)
def cancellation_instructions(platform: Platform = Query("ios")):
    instructions = get_cancellation_instructions(platform)
    return CancellationInstructionsResponse(
        title=instructions.title,
        message=instructions.message,
        management_url=instructions.management_url,
    )

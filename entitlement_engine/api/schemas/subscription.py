from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


SimpleSubscriptionStatusValue = Literal[
    "active",
    "trial_active",
    "cancelled_but_active",
    "expired",
    "trial_expired",
    "never_subscribed",
    "unknown",
]

PaywallTypeValue = Literal["payment", "renewal", "none"]


class SubscriptionStatusResponse(BaseModel):
    status: SimpleSubscriptionStatusValue
    paywall_type: PaywallTypeValue
    has_premium_access: bool
    message: str


class SubscriptionDetailResponse(BaseModel):
    is_active: bool
    is_trial: bool
    will_renew: bool
    expires_at: datetime | None
    expires_at_display: str | None
    expiring_soon: bool
    product_identifier: str | None
    entitlement_identifier: str | None
    status_text: str


class RestorePurchasesResponse(BaseModel):
    success: bool
    has_active_subscription: bool
    user_cancelled: bool
    status: SimpleSubscriptionStatusValue
    message: str | None


class PurchaseRequest(BaseModel):
    product_identifier: str = Field(..., min_length=1)
    store_token: str = Field(..., min_length=1)
    package_identifier: str | None = None


class PurchaseResponse(BaseModel):
    success: bool
    user_cancelled: bool
    has_active_subscription: bool
    status: SimpleSubscriptionStatusValue
    product_identifier: str | None
    error_message: str | None
    debug_code: str | None


class CancellationInstructionsResponse(BaseModel):
    title: str
    message: str
    management_url: str

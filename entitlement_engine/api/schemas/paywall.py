from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from entitlement_engine.api.schemas.subscription import PaywallTypeValue, SimpleSubscriptionStatusValue
from entitlement_engine.shared.clock import parse_iso_datetime


class EntitlementInfoPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    identifier: str | None = None
    period_type: str = Field("NORMAL", alias="periodType")
    will_renew: bool = Field(False, alias="willRenew")
    expiration_date: str | None = Field(None, alias="expirationDate")
    product_identifier: str | None = Field(None, alias="productIdentifier")

    @field_validator("expiration_date")
    @classmethod
    def _check_expiration_date(cls, value: str | None) -> str | None:
        parse_iso_datetime(value)
        return value


class EntitlementInfosPayload(BaseModel):
    active: dict[str, EntitlementInfoPayload] = Field(default_factory=dict)
    all: dict[str, EntitlementInfoPayload] = Field(default_factory=dict)

    @field_validator("active", "all", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return {} if value is None else value


class CustomerInfoPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    entitlements: EntitlementInfosPayload = Field(default_factory=EntitlementInfosPayload)
    all_purchased_product_identifiers: list[str] = Field(
        default_factory=list,
        alias="allPurchasedProductIdentifiers",
    )
    active_subscriptions: list[str] = Field(default_factory=list, alias="activeSubscriptions")
    original_app_user_id: str | None = Field(None, alias="originalAppUserId")
    management_url: str | None = Field(None, alias="managementURL")

    @field_validator("entitlements", "all_purchased_product_identifiers", "active_subscriptions", mode="before")
    @classmethod
    def _none_as_default(cls, value, info):
        if value is not None:
            return value
        return {} if info.field_name == "entitlements" else []


class PaywallDecisionResponse(BaseModel):
    status: SimpleSubscriptionStatusValue
    paywall_type: PaywallTypeValue
    has_premium_access: bool

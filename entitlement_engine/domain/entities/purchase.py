from __future__ import annotations

from dataclasses import dataclass

from entitlement_engine.domain.entities.customer_info import CustomerInfo


@dataclass(frozen=True)
class PurchasesPackage:
    identifier: str
    product_identifier: str
    store_token: str | None = None


@dataclass(frozen=True)
class PurchaseResult:
    customer_info: CustomerInfo
    product_identifier: str


@dataclass(frozen=True)
class PurchaseErrorInfo:
    is_user_cancelled: bool
    brief: str
    debug_code: str


@dataclass(frozen=True)
class CancellationInstructions:
    title: str
    message: str
    management_url: str

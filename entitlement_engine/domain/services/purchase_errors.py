from __future__ import annotations

from entitlement_engine.domain.entities.purchase import PurchaseErrorInfo


CANCELLED_ERROR_CODE = "purchasecancellederror"

# (readable code fragment, raw code fragment, brief)
STORE_ERROR_BRIEFS: tuple[tuple[str, str | None, str], ...] = (
    ("payment_not_allowed", "paymentnotallowed", "Purchases not allowed for this account/device."),
    ("product_not_available", "productnotavailable", "Product not available for your App Store region."),
    ("authentication_failed", "authentication", "Apple ID authentication failed."),
    ("billing_unavailable", None, "Billing is unavailable on this device."),
)


def interpret_purchase_error(error: BaseException) -> PurchaseErrorInfo:
    code = getattr(error, "code", None)
    readable = getattr(error, "readable_error_code", None) or ""
    code_text = str(code) if code is not None else ""

    is_user_cancelled = bool(getattr(error, "user_cancelled", False)) or (
        code_text.lower() == CANCELLED_ERROR_CODE
    )

    brief = str(error) or "Purchase failed"
    if not is_user_cancelled:
        readable_l = readable.lower()
        code_l = code_text.lower()
        for readable_fragment, code_fragment, store_brief in STORE_ERROR_BRIEFS:
            if readable_fragment in readable_l or (code_fragment and code_fragment in code_l):
                brief = store_brief
                break

    debug_code = "/".join(part for part in (readable, code_text) if part)
    return PurchaseErrorInfo(
        is_user_cancelled=is_user_cancelled,
        brief=brief,
        debug_code=debug_code,
    )

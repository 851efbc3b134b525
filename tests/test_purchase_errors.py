from __future__ import annotations

from entitlement_engine.domain.exceptions import BillingProviderError, PurchaseCancelledError
from entitlement_engine.domain.services.purchase_errors import interpret_purchase_error


def test_cancelled_purchase_is_flagged():
    info = interpret_purchase_error(PurchaseCancelledError())

    assert info.is_user_cancelled is True
    assert info.debug_code == "purchaseCancelledError"


def test_cancel_code_is_matched_case_insensitively():
    error = BillingProviderError("cancelled", code="PURCHASECANCELLEDERROR")

    assert interpret_purchase_error(error).is_user_cancelled is True


def test_payment_not_allowed_brief():
    error = BillingProviderError(
        "Store said no",
        code="PaymentNotAllowedError",
        readable_error_code="PAYMENT_NOT_ALLOWED",
    )

    info = interpret_purchase_error(error)

    assert info.is_user_cancelled is False
    assert info.brief == "Purchases not allowed for this account/device."
    assert info.debug_code == "PAYMENT_NOT_ALLOWED/PaymentNotAllowedError"


def test_product_not_available_matched_by_raw_code():
    error = BillingProviderError("nope", code="ProductNotAvailableForPurchaseError")

    assert interpret_purchase_error(error).brief == "Product not available for your App Store region."


def test_billing_unavailable_matched_by_readable_code():
    error = BillingProviderError("x", code="billing_unavailable", readable_error_code="BILLING_UNAVAILABLE")

    assert interpret_purchase_error(error).brief == "Billing is unavailable on this device."


def test_unrecognised_error_keeps_its_message():
    info = interpret_purchase_error(RuntimeError("socket closed"))

    assert info.is_user_cancelled is False
    assert info.brief == "socket closed"
    assert info.debug_code == ""


def test_empty_message_falls_back_to_generic_brief():
    assert interpret_purchase_error(RuntimeError()).brief == "Purchase failed"

from __future__ import annotations

from entitlement_engine.domain.entities.purchase import CancellationInstructions
from entitlement_engine.domain.entities.subscription import Platform


APP_NAME = "Just Pray"

IOS_SETTINGS_URL = "app-settings:"
PLAY_STORE_SUBSCRIPTIONS_URL = "https://play.google.com/store/account/subscriptions"

RESTORE_SUCCEEDED_MESSAGE = (
    "Your subscription has been restored! You now have access to all premium features."
)
RESTORE_NOTHING_FOUND_MESSAGE = (
    "No active subscriptions were found to restore. "
    "If you believe this is an error, please contact support."
)
RESTORE_FAILED_MESSAGE = "Unable to restore purchases. Please try again."


def subscription_management_url(platform: Platform, *, management_url: str | None = None) -> str:
    if management_url:
        return management_url
    if platform == "ios":
        return IOS_SETTINGS_URL
    return PLAY_STORE_SUBSCRIPTIONS_URL


def get_cancellation_instructions(
    platform: Platform,
    *,
    management_url: str | None = None,
) -> CancellationInstructions:
    if platform == "ios":
        message = (
            "To cancel your subscription:\n\n"
            "1. Go to iPhone Settings\n"
            "2. Tap your name at the top\n"
            '3. Tap "Subscriptions"\n'
            f'4. Find "{APP_NAME}" and tap it\n'
            '5. Tap "Cancel Subscription"'
        )
    else:
        message = (
            "To cancel your subscription:\n\n"
            "1. Open Google Play Store\n"
            "2. Go to Account > Subscriptions\n"
            f'3. Find "{APP_NAME}"\n'
            '4. Tap "Cancel subscription"'
        )
    return CancellationInstructions(
        title="Cancel Subscription",
        message=message,
        management_url=subscription_management_url(platform, management_url=management_url),
    )


def restore_result_message(
    *,
    success: bool,
    has_active_subscription: bool,
    user_cancelled: bool = False,
) -> str | None:
    if user_cancelled:
        return None
    if not success:
        return RESTORE_FAILED_MESSAGE
    if has_active_subscription:
        return RESTORE_SUCCEEDED_MESSAGE
    return RESTORE_NOTHING_FOUND_MESSAGE

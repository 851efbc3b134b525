from __future__ import annotations

from entitlement_engine.domain.services.subscription_management import (
    IOS_SETTINGS_URL,
    PLAY_STORE_SUBSCRIPTIONS_URL,
    RESTORE_FAILED_MESSAGE,
    RESTORE_NOTHING_FOUND_MESSAGE,
    RESTORE_SUCCEEDED_MESSAGE,
    get_cancellation_instructions,
    restore_result_message,
    subscription_management_url,
)


def test_ios_instructions_point_to_settings():
    instructions = get_cancellation_instructions("ios")

    assert instructions.title == "Cancel Subscription"
    assert "iPhone Settings" in instructions.message
    assert '"Just Pray"' in instructions.message
    assert instructions.management_url == IOS_SETTINGS_URL


def test_android_instructions_point_to_play_store():
    instructions = get_cancellation_instructions("android")

    assert "Google Play Store" in instructions.message
    assert instructions.management_url == PLAY_STORE_SUBSCRIPTIONS_URL


def test_provider_management_url_wins():
    url = "https://apps.apple.com/account/subscriptions"

    assert subscription_management_url("android", management_url=url) == url


def test_restore_messages():
    assert restore_result_message(success=True, has_active_subscription=True) == RESTORE_SUCCEEDED_MESSAGE
    assert restore_result_message(success=True, has_active_subscription=False) == RESTORE_NOTHING_FOUND_MESSAGE
    assert restore_result_message(success=False, has_active_subscription=False) == RESTORE_FAILED_MESSAGE


def test_cancelled_restore_has_no_message():
    assert restore_result_message(success=False, has_active_subscription=False, user_cancelled=True) is None

"""Tests for notification settings: channel rules, the use case and the API."""

from __future__ import annotations

import pytest

from app.application.use_cases.user_settings import update_user_settings
from app.domain.entities import NOTIFICATION_TYPES, UserSettings
from app.domain.exceptions import RequestValidationFailed


def test_defaults_enable_email_and_disable_sms() -> None:
    settings = UserSettings.defaults_for("user-1")
    rule = NOTIFICATION_TYPES["customer_booking_accepted"]

    assert settings.channel_enabled("email", rule) is True
    assert settings.channel_enabled("sms", rule) is False


def test_master_toggle_overrides_type_preference() -> None:
    rule = NOTIFICATION_TYPES["provider_new_booking"]
    settings = UserSettings(
        user_id="user-1",
        email_notifications=False,
        preferences={"provider_new_booking_email": True},
    )

    assert settings.channel_enabled("email", rule) is False


def test_type_preference_applies_when_master_is_on() -> None:
    rule = NOTIFICATION_TYPES["provider_new_booking"]
    settings = UserSettings(
        user_id="user-1",
        sms_notifications=True,
        preferences={"provider_new_booking_sms": True, "customer_welcome_sms": False},
    )

    assert settings.channel_enabled("sms", rule) is True
    assert settings.channel_enabled("sms", NOTIFICATION_TYPES["customer_welcome"]) is False


def test_unknown_channel_is_never_enabled() -> None:
    rule = NOTIFICATION_TYPES["provider_new_booking"]

    assert UserSettings.defaults_for("user-1").channel_enabled("push", rule) is False


def test_update_merges_preferences_and_keeps_other_values(db_session) -> None:
    update_user_settings(
        db_session,
        user_id="user-1",
        sms_notifications=True,
        preferences={"provider_new_booking_sms": True},
    )

    updated = update_user_settings(
        db_session,
        user_id="user-1",
        preferences={"customer_welcome_email": False},
    )

    assert updated.sms_notifications is True
    assert updated.email_notifications is True
    assert updated.preferences == {
        "provider_new_booking_sms": True,
        "customer_welcome_email": False,
    }


def test_update_normalises_quiet_hours(db_session) -> None:
    updated = update_user_settings(
        db_session,
        user_id="user-1",
        quiet_hours_enabled=True,
        quiet_hours_start="7:00",
        quiet_hours_end="22:30:00",
    )

    assert updated.quiet_hours_start == "07:00"
    assert updated.quiet_hours_end == "22:30"


def test_update_rejects_invalid_quiet_hours(db_session) -> None:
    with pytest.raises(RequestValidationFailed):
        update_user_settings(db_session, user_id="user-1", quiet_hours_start="late")


def test_update_requires_window_when_quiet_hours_enabled(db_session) -> None:
    with pytest.raises(RequestValidationFailed):
        update_user_settings(db_session, user_id="user-1", quiet_hours_enabled=True)


def test_update_rejects_unknown_preferences(db_session) -> None:
    with pytest.raises(RequestValidationFailed) as excinfo:
        update_user_settings(
            db_session, user_id="user-1", preferences={"newsletter_email": True}
        )

    assert excinfo.value.details == "newsletter_email"


def test_settings_endpoints_round_trip(client) -> None:
    empty = client.get("/api/user-settings/user-9")
    assert empty.status_code == 200
    assert empty.json() == {"data": None}

    response = client.put(
        "/api/user-settings/user-9",
        json={
            "smsNotifications": True,
            "notificationPhone": "+15125550100",
            "preferences": {"provider_new_booking_sms": True},
        },
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user_id"] == "user-9"
    assert data["sms_notifications"] is True
    assert data["notification_phone"] == "+15125550100"

    again = client.put("/api/user-settings/user-9", json={"email_notifications": False})
    assert again.status_code == 200
    stored = client.get("/api/user-settings/user-9").json()["data"]
    assert stored["id"] == data["id"]
    assert stored["email_notifications"] is False
    assert stored["sms_notifications"] is True


def test_settings_endpoint_reports_validation_errors(client) -> None:
    response = client.put(
        "/api/user-settings/user-9", json={"quiet_hours_start": "99:99"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid quiet hours"

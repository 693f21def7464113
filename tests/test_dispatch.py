"""Tests for the notification dispatcher."""

from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.notifications import dispatch as dispatch_module
from app.application.use_cases.notifications import dispatch_notification
from app.domain.entities import NotificationTemplate, UserSettings
from app.domain.exceptions import RequestValidationFailed, UpstreamServiceError
from app.infrastructure.models import CustomerProfileModel, ProviderModel
from app.infrastructure.repositories import (
    NotificationLogRepository,
    NotificationTemplateRepository,
    UserSettingsRepository,
)
from app.utils import get_app_timezone

USER_ID = "user-1"


def _local(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 3, 10, hour, minute, tzinfo=get_app_timezone())


def _add_template(session, key: str = "provider_new_booking", **overrides) -> None:
    values = {
        "id": None,
        "template_key": key,
        "template_name": key.replace("_", " ").title(),
        "email_subject": "New booking: {{service_name}}",
        "email_body_html": "<p>{{customer_name}} booked {{service_name}}</p>",
        "email_body_text": "{{customer_name}} booked {{service_name}}",
        "sms_body": "New booking from {{customer_name}}",
        "variables": ["customer_name", "service_name"],
    }
    values.update(overrides)
    NotificationTemplateRepository(session).save(NotificationTemplate(**values))


def _add_customer(session, email: str | None = "jane@example.com", phone: str | None = "5125550100") -> None:
    session.add(
        CustomerProfileModel(
            id="customer-1",
            user_id=USER_ID,
            first_name="Jane",
            last_name="Doe",
            email=email,
            phone=phone,
        )
    )
    session.commit()


def _enable_sms(session, notification_type: str = "provider_new_booking", **overrides) -> None:
    settings = UserSettings(
        user_id=USER_ID,
        sms_notifications=True,
        preferences={f"{notification_type}_sms": True},
        **overrides,
    )
    UserSettingsRepository(session).upsert(settings)


VARIABLES = {"customer_name": "Jane", "service_name": "Massage"}


@pytest.fixture()
def providers(monkeypatch: pytest.MonkeyPatch) -> dict[str, list]:
    calls: dict[str, list] = {"email": [], "sms": []}

    def fake_send_email(subject, html_content, recipient, *, text_content=None):
        calls["email"].append(
            {"subject": subject, "html": html_content, "text": text_content, "to": recipient}
        )
        return "sg-message-1"

    def fake_send_sms(body, recipient):
        calls["sms"].append({"body": body, "to": recipient})
        return "SM0001"

    monkeypatch.setattr(dispatch_module, "send_email", fake_send_email)
    monkeypatch.setattr(dispatch_module, "send_sms", fake_send_sms)
    return calls


def _logs(session):
    return sorted(
        NotificationLogRepository(session).list_for_user(USER_ID), key=lambda log: log.id
    )


def test_sends_on_both_channels_when_enabled(db_session, providers) -> None:
    _add_template(db_session)
    _add_customer(db_session)
    _enable_sms(db_session)

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        metadata={"booking_id": "b-1"},
        now=_local(12),
    )

    assert [result.channel for result in results] == ["email", "sms"]
    assert all(result.success and not result.skipped for result in results)
    assert results[0].external_id == "sg-message-1"
    assert results[1].external_id == "SM0001"

    assert providers["email"] == [
        {
            "subject": "New booking: Massage",
            "html": "<p>Jane booked Massage</p>",
            "text": "Jane booked Massage",
            "to": "jane@example.com",
        }
    ]
    assert providers["sms"] == [{"body": "New booking from Jane", "to": "5125550100"}]

    logs = _logs(db_session)
    assert [(log.channel, log.status) for log in logs] == [("email", "sent"), ("sms", "sent")]
    assert logs[0].external_id == "sg-message-1"
    assert logs[0].recipient_email == "jane@example.com"
    assert logs[1].recipient_phone == "5125550100"
    assert logs[0].metadata == {"booking_id": "b-1"}
    assert logs[0].sent_at is not None


def test_disabled_channel_is_skipped_without_provider_call(db_session, providers) -> None:
    _add_template(db_session)
    _add_customer(db_session)

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        now=_local(12),
    )

    sms_result = results[1]
    assert sms_result.success is True
    assert sms_result.skipped is True
    assert sms_result.skip_reason == "channel_disabled"
    assert providers["sms"] == []
    assert len(providers["email"]) == 1

    sms_log = _logs(db_session)[1]
    assert sms_log.status == "skipped"
    assert sms_log.skip_reason == "channel_disabled"


def test_per_type_preference_disables_email(db_session, providers) -> None:
    _add_template(db_session)
    _add_customer(db_session)
    UserSettingsRepository(db_session).upsert(
        UserSettings(user_id=USER_ID, preferences={"provider_new_booking_email": False})
    )

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        channels=["email"],
        now=_local(12),
    )

    assert results[0].skip_reason == "channel_disabled"
    assert providers["email"] == []


def test_quiet_hours_skip_non_transactional_types(db_session, providers) -> None:
    _add_template(db_session, key="customer_booking_reminder")
    _add_customer(db_session)
    UserSettingsRepository(db_session).upsert(
        UserSettings(
            user_id=USER_ID,
            quiet_hours_enabled=True,
            quiet_hours_start="22:00",
            quiet_hours_end="07:00",
        )
    )

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="customer_booking_reminder",
        variables=VARIABLES,
        channels=["email"],
        now=_local(23, 30),
    )

    assert results[0].skipped is True
    assert results[0].skip_reason == "quiet_hours"
    assert providers["email"] == []
    assert _logs(db_session)[0].skip_reason == "quiet_hours"


def test_quiet_hours_do_not_apply_outside_the_window(db_session, providers) -> None:
    _add_template(db_session, key="customer_booking_reminder")
    _add_customer(db_session)
    UserSettingsRepository(db_session).upsert(
        UserSettings(
            user_id=USER_ID,
            quiet_hours_enabled=True,
            quiet_hours_start="22:00",
            quiet_hours_end="07:00",
        )
    )

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="customer_booking_reminder",
        variables=VARIABLES,
        channels=["email"],
        now=_local(7, 1),
    )

    assert results[0].skipped is False
    assert len(providers["email"]) == 1


def test_transactional_types_ignore_quiet_hours(db_session, providers) -> None:
    _add_template(db_session)
    _add_customer(db_session)
    UserSettingsRepository(db_session).upsert(
        UserSettings(
            user_id=USER_ID,
            quiet_hours_enabled=True,
            quiet_hours_start="22:00",
            quiet_hours_end="07:00",
        )
    )

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        channels=["email"],
        now=_local(2),
    )

    assert results[0].skipped is False
    assert results[0].success is True
    assert len(providers["email"]) == 1


def test_configured_exemptions_replace_catalog_flags(
    db_session, providers, monkeypatch: pytest.MonkeyPatch
) -> None:
    _add_template(db_session)
    _add_customer(db_session)
    UserSettingsRepository(db_session).upsert(
        UserSettings(
            user_id=USER_ID,
            quiet_hours_enabled=True,
            quiet_hours_start="22:00",
            quiet_hours_end="07:00",
        )
    )
    monkeypatch.setattr(
        dispatch_module,
        "get_settings",
        lambda: SimpleNamespace(exempt_notification_types=lambda: frozenset()),
    )

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        channels=["email"],
        now=_local(2),
    )

    assert results[0].skip_reason == "quiet_hours"
    assert providers["email"] == []


def test_missing_channel_body_fails_that_channel_only(db_session, providers) -> None:
    _add_template(db_session, sms_body=None)
    _add_customer(db_session)
    _enable_sms(db_session)

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        now=_local(12),
    )

    email_result, sms_result = results
    assert email_result.success is True
    assert sms_result.success is False
    assert sms_result.error_code == "TemplateIncompleteForChannel"
    assert providers["sms"] == []
    assert len(providers["email"]) == 1

    sms_log = _logs(db_session)[1]
    assert sms_log.status == "failed"
    assert "no sms body" in sms_log.error_message


def test_unknown_template_fails_every_enabled_channel(db_session, providers) -> None:
    _add_customer(db_session)
    _enable_sms(db_session, notification_type="customer_welcome")

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="customer_welcome",
        variables={},
        now=_local(12),
    )

    assert [result.error_code for result in results] == ["TemplateNotFound", "TemplateNotFound"]
    assert providers == {"email": [], "sms": []}
    assert [log.status for log in _logs(db_session)] == ["failed", "failed"]


def test_inactive_template_is_not_used(db_session, providers) -> None:
    _add_template(db_session, is_active=False)
    _add_customer(db_session)

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        channels=["email"],
        now=_local(12),
    )

    assert results[0].error_code == "TemplateNotFound"


def test_missing_variable_fails_the_channel(db_session, providers) -> None:
    _add_template(db_session)
    _add_customer(db_session)

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables={"customer_name": "Jane"},
        channels=["email"],
        now=_local(12),
    )

    assert results[0].success is False
    assert results[0].error_code == "MissingVariable"
    assert "service_name" in results[0].error
    assert providers["email"] == []


def test_none_binding_renders_as_empty_text(db_session, providers) -> None:
    _add_template(db_session)
    _add_customer(db_session)

    dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables={"customer_name": None, "service_name": "Massage"},
        channels=["email"],
        now=_local(12),
    )

    assert providers["email"][0]["text"] == " booked Massage"


def test_missing_recipient_is_skipped(db_session, providers) -> None:
    _add_template(db_session)
    _add_customer(db_session, email=None)

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        channels=["email"],
        now=_local(12),
    )

    assert results[0].skipped is True
    assert results[0].skip_reason == "no_recipient"
    assert providers["email"] == []


def test_settings_override_takes_precedence_over_profiles(db_session, providers) -> None:
    _add_template(db_session)
    _add_customer(db_session)
    _enable_sms(db_session, notification_email="alerts@example.com", notification_phone="+15125550199")

    dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        now=_local(12),
    )

    assert providers["email"][0]["to"] == "alerts@example.com"
    assert providers["sms"][0]["to"] == "+15125550199"


def test_provider_row_is_used_when_no_customer_profile(db_session, providers) -> None:
    _add_template(db_session)
    db_session.add(
        ProviderModel(
            id="provider-1",
            user_id=USER_ID,
            business_id="business-1",
            provider_role="owner",
            first_name="Sam",
            last_name="Smith",
            email="sam@example.com",
            phone="5125550111",
        )
    )
    db_session.commit()

    dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        channels=["email"],
        now=_local(12),
    )

    assert providers["email"][0]["to"] == "sam@example.com"


def test_provider_failure_does_not_block_other_channel(
    db_session, providers, monkeypatch: pytest.MonkeyPatch
) -> None:
    _add_template(db_session)
    _add_customer(db_session)
    _enable_sms(db_session)

    def failing_send_email(*args, **kwargs):
        raise UpstreamServiceError("Failed to send email", details="status 500")

    monkeypatch.setattr(dispatch_module, "send_email", failing_send_email)

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        now=_local(12),
    )

    email_result, sms_result = results
    assert email_result.success is False
    assert email_result.error == "Failed to send email: status 500"
    assert email_result.error_code == "UpstreamServiceError"
    assert sms_result.success is True
    assert len(providers["sms"]) == 1
    assert [log.status for log in _logs(db_session)] == ["failed", "sent"]


def test_unconfigured_email_provider_is_reported_as_failure(db_session, monkeypatch) -> None:
    _add_template(db_session)
    _add_customer(db_session)
    monkeypatch.setattr(dispatch_module, "send_sms", lambda body, recipient: "SM0001")

    results = dispatch_notification(
        db_session,
        user_id=USER_ID,
        notification_type="provider_new_booking",
        variables=VARIABLES,
        channels=["email"],
        now=_local(12),
    )

    assert results[0].success is False
    assert results[0].error_code == "ServiceNotConfigured"
    assert results[0].error == "Email service not configured"


def test_log_write_failure_keeps_the_result(
    db_session, providers, monkeypatch: pytest.MonkeyPatch, caplog
) -> None:
    _add_template(db_session)
    _add_customer(db_session)

    def broken_create(self, log):
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(NotificationLogRepository, "create", broken_create)

    with caplog.at_level("ERROR"):
        results = dispatch_notification(
            db_session,
            user_id=USER_ID,
            notification_type="provider_new_booking",
            variables=VARIABLES,
            channels=["email"],
            now=_local(12),
        )

    assert results[0].success is True
    assert "Failed to record email notification log" in caplog.text


def test_unknown_notification_type_is_rejected(db_session, providers) -> None:
    with pytest.raises(RequestValidationFailed) as excinfo:
        dispatch_notification(
            db_session, user_id=USER_ID, notification_type="unknown", variables={}
        )

    assert excinfo.value.message == "Invalid notification type"
    assert "provider_new_booking" in excinfo.value.details


def test_unknown_channel_is_rejected(db_session, providers) -> None:
    with pytest.raises(RequestValidationFailed):
        dispatch_notification(
            db_session,
            user_id=USER_ID,
            notification_type="provider_new_booking",
            variables=VARIABLES,
            channels=["push"],
        )

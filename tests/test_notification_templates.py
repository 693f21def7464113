"""Tests for notification template registration."""

from __future__ import annotations

import json

import pytest

from app.application.use_cases.notifications import (
    list_notification_templates,
    register_notification_template,
)
from app.domain.entities import NotificationTemplate
from app.domain.exceptions import RequestValidationFailed
from scripts.seed_notification_templates import DEFAULT_TEMPLATES, load_templates


def _template(**overrides) -> NotificationTemplate:
    data = {
        "id": None,
        "template_key": "customer_welcome",
        "template_name": "Welcome",
        "email_subject": "Hi {{customer_name}}",
        "email_body_text": "Welcome aboard, {{customer_name}}.",
        "variables": ["customer_name"],
    }
    data.update(overrides)
    return NotificationTemplate(**data)


def test_register_template_rejects_unknown_key(db_session) -> None:
    with pytest.raises(RequestValidationFailed) as excinfo:
        register_notification_template(db_session, _template(template_key="newsletter"))

    assert excinfo.value.message == "Invalid notification type"


def test_register_template_requires_a_body(db_session) -> None:
    template = _template(email_subject="Hi", email_body_text=None, variables=[])

    with pytest.raises(RequestValidationFailed) as excinfo:
        register_notification_template(db_session, template)

    assert excinfo.value.message == "Template must define an email or SMS body"


def test_register_template_rejects_undeclared_variables(db_session) -> None:
    template = _template(sms_body="{{provider_name}} is on the way", variables=["customer_name"])

    with pytest.raises(RequestValidationFailed) as excinfo:
        register_notification_template(db_session, template)

    assert excinfo.value.details == "provider_name"


def test_register_template_replaces_content_under_key(db_session) -> None:
    first = register_notification_template(db_session, _template())
    second = register_notification_template(
        db_session, _template(email_body_text="Glad you are here, {{customer_name}}.")
    )

    assert second.id == first.id
    stored = list_notification_templates(db_session)
    assert len(stored) == 1
    assert stored[0].email_body_text == "Glad you are here, {{customer_name}}."


def test_inactive_templates_are_hidden_by_default(db_session) -> None:
    register_notification_template(db_session, _template(is_active=False))

    assert list_notification_templates(db_session) == []
    assert len(list_notification_templates(db_session, include_inactive=True)) == 1


def test_default_templates_register_cleanly(db_session) -> None:
    for template in load_templates(None):
        register_notification_template(db_session, template)

    keys = {template.template_key for template in list_notification_templates(db_session)}
    assert keys == {item["template_key"] for item in DEFAULT_TEMPLATES}


def test_load_templates_from_file(tmp_path) -> None:
    path = tmp_path / "templates.json"
    path.write_text(
        json.dumps([{"template_key": "provider_new_booking", "sms_body": "New booking"}]),
        "utf-8",
    )

    (template,) = load_templates(path)

    assert template.template_name == "provider_new_booking"
    assert template.sms_body == "New booking"
    assert template.variables == []
    assert template.is_active is True

"""Utility script to register the default notification templates."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.notifications import register_notification_template
from app.domain.entities import NotificationTemplate
from app.domain.exceptions import RequestValidationFailed
from app.infrastructure.database import SessionLocal, initialize_database

DEFAULT_TEMPLATES: list[dict[str, Any]] = [
    {
        "template_key": "customer_welcome",
        "template_name": "Customer welcome",
        "email_subject": "Welcome, {{customer_name}}!",
        "email_body_html": "<p>Hi {{customer_name}}, thanks for joining us.</p>",
        "email_body_text": "Hi {{customer_name}}, thanks for joining us.",
        "variables": ["customer_name"],
    },
    {
        "template_key": "customer_booking_accepted",
        "template_name": "Booking accepted",
        "email_subject": "Your {{service_name}} booking is confirmed",
        "email_body_html": (
            "<p>Hi {{customer_name}}, {{provider_name}} accepted your booking for "
            "{{service_name}} on {{booking_date}} at {{booking_time}}.</p>"
        ),
        "sms_body": (
            "{{provider_name}} confirmed your {{service_name}} booking on "
            "{{booking_date}} at {{booking_time}}."
        ),
        "variables": [
            "customer_name",
            "provider_name",
            "service_name",
            "booking_date",
            "booking_time",
        ],
    },
    {
        "template_key": "customer_booking_completed",
        "template_name": "Booking completed",
        "email_subject": "How was your {{service_name}}?",
        "email_body_html": (
            "<p>Hi {{customer_name}}, your booking with {{provider_name}} is "
            "complete. We would love your feedback.</p>"
        ),
        "variables": ["customer_name", "provider_name", "service_name"],
    },
    {
        "template_key": "customer_booking_reminder",
        "template_name": "Booking reminder",
        "email_subject": "Reminder: {{service_name}} tomorrow",
        "email_body_html": (
            "<p>Hi {{customer_name}}, this is a reminder of your {{service_name}} "
            "booking on {{booking_date}} at {{booking_time}}.</p>"
        ),
        "sms_body": "Reminder: {{service_name}} on {{booking_date}} at {{booking_time}}.",
        "variables": ["customer_name", "service_name", "booking_date", "booking_time"],
    },
    {
        "template_key": "provider_new_booking",
        "template_name": "New booking",
        "email_subject": "New booking: {{service_name}}",
        "email_body_html": (
            "<p>Hi {{provider_name}}, {{customer_name}} booked {{service_name}} "
            "on {{booking_date}} at {{booking_time}}.</p>"
        ),
        "sms_body": (
            "New booking: {{customer_name}} booked {{service_name}} on "
            "{{booking_date}} at {{booking_time}}."
        ),
        "variables": [
            "provider_name",
            "customer_name",
            "service_name",
            "booking_date",
            "booking_time",
        ],
    },
    {
        "template_key": "provider_booking_cancelled",
        "template_name": "Booking cancelled",
        "email_subject": "Booking cancelled: {{service_name}}",
        "email_body_html": (
            "<p>Hi {{provider_name}}, {{customer_name}} cancelled the "
            "{{service_name}} booking on {{booking_date}}.</p>"
        ),
        "sms_body": "{{customer_name}} cancelled {{service_name}} on {{booking_date}}.",
        "variables": ["provider_name", "customer_name", "service_name", "booking_date"],
    },
]


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for template seeding."""

    parser = argparse.ArgumentParser(
        description="Register notification templates in the marketplace database.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="JSON file with a list of templates (defaults to the built-in set)",
    )
    return parser.parse_args()


def load_templates(path: Path | None) -> list[NotificationTemplate]:
    raw = DEFAULT_TEMPLATES if path is None else json.loads(path.read_text("utf-8"))
    return [
        NotificationTemplate(
            id=None,
            template_key=item["template_key"],
            template_name=item.get("template_name") or item["template_key"],
            description=item.get("description"),
            email_subject=item.get("email_subject"),
            email_body_html=item.get("email_body_html"),
            email_body_text=item.get("email_body_text"),
            sms_body=item.get("sms_body"),
            variables=list(item.get("variables") or []),
            is_active=item.get("is_active", True),
        )
        for item in raw
    ]


def main() -> None:
    """Register every template, replacing the content stored under its key."""

    args = parse_args()
    templates = load_templates(args.file)

    initialize_database()

    session = SessionLocal()
    try:
        for template in templates:
            saved = register_notification_template(session, template)
            print(f"Registered template {saved.template_key}")
    except RequestValidationFailed as exc:
        session.rollback()
        raise SystemExit(f"Invalid template: {exc.message} ({exc.details})") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Failed to store templates: {exc}") from exc
    finally:
        session.close()


if __name__ == "__main__":
    main()

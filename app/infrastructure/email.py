"""Utility helpers for sending transactional email notifications via SendGrid."""

from __future__ import annotations

import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.config import get_settings
from app.domain.exceptions import ServiceNotConfiguredError, UpstreamServiceError

logger = logging.getLogger(__name__)


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                help_link = item.get("help")
                if message and help_link:
                    messages.append(f"{message} (help: {help_link})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        # Fall back to a JSON string for unrecognised payloads
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        try:
            return "; ".join(str(item) for item in parsed)
        except TypeError:
            return None

    return None


def _describe_sendgrid_exception(exc: Exception) -> str:
    """Log a SendGrid API error and return a message suitable for the delivery log."""

    status_code = getattr(exc, "status_code", None)
    body = getattr(exc, "body", None)
    details = _extract_sendgrid_error_details(body)

    if status_code and details:
        logger.error(
            "SendGrid API request failed with status %s: %s", status_code, details
        )
        return f"SendGrid request failed with status {status_code}: {details}"
    if status_code:
        logger.error("SendGrid API request failed with status %s", status_code)
        return f"SendGrid request failed with status {status_code}"
    if details:
        logger.error("SendGrid API request failed: %s", details)
        return f"SendGrid request failed: {details}"
    logger.exception("Error sending email via SendGrid: %s", exc)
    return str(exc) or exc.__class__.__name__


def _describe_unsuccessful_response(response: Any) -> str:
    """Log details from an unsuccessful SendGrid response object."""

    status_code = getattr(response, "status_code", None)
    body = getattr(response, "body", None)
    details = _extract_sendgrid_error_details(body)

    if details:
        logger.error(
            "SendGrid API responded with status %s: %s", status_code, details
        )
        return f"SendGrid responded with status {status_code}: {details}"
    logger.error("SendGrid API responded with status %s", status_code)
    return f"SendGrid responded with status {status_code}"


def _extract_message_id(response: Any) -> str | None:
    headers = getattr(response, "headers", None)
    if not headers:
        return None
    getter = getattr(headers, "get", None)
    if getter is None:
        return None
    return getter("X-Message-Id") or getter("x-message-id")


def send_email(
    subject: str,
    html_content: str | None,
    recipient: str,
    *,
    text_content: str | None = None,
) -> str | None:
    """Send an email using the configured SendGrid credentials.

    Returns the SendGrid message id when the API reports one. Raises
    :class:`ServiceNotConfiguredError` when credentials are missing and
    :class:`UpstreamServiceError` when SendGrid rejects the request.
    """

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        raise ServiceNotConfiguredError("Email service not configured")

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content or None,
        plain_text_content=text_content or None,
    )

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        response = client.send(message)
    except Exception as exc:
        details = _describe_sendgrid_exception(exc)
        raise UpstreamServiceError("Failed to send email", details=details) from exc

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        details = _describe_unsuccessful_response(response)
        raise UpstreamServiceError("Failed to send email", details=details)

    return _extract_message_id(response)


__all__ = ["send_email"]

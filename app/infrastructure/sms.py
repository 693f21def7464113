"""Utility helpers for sending SMS notifications via Twilio."""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from twilio.base.exceptions import TwilioRestException
from twilio.rest import Client

from app.config import get_settings
from app.domain.exceptions import ServiceNotConfiguredError, UpstreamServiceError

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")


def format_phone_number(phone: str) -> str:
    """Normalise ``phone`` to E.164, assuming US numbers when no prefix is given."""

    if not phone:
        return phone
    cleaned = _NON_DIGITS.sub("", phone)
    if len(cleaned) == 10:
        return f"+1{cleaned}"
    if len(cleaned) == 11 and cleaned.startswith("1"):
        return f"+{cleaned}"
    if phone.strip().startswith("+"):
        return phone.strip()
    return f"+{cleaned}"


def mask_phone_number(phone: str | None) -> str:
    if not phone:
        return "none"
    return f"***{phone[-4:]}"


@lru_cache(maxsize=4)
def _get_client(account_sid: str, auth_token: str) -> Client:
    return Client(account_sid, auth_token)


def send_sms(body: str, recipient: str) -> str:
    """Send ``body`` to ``recipient`` and return the Twilio message SID.

    Raises :class:`ServiceNotConfiguredError` when the Twilio credentials are
    incomplete and :class:`UpstreamServiceError` when Twilio rejects the message.
    """

    settings = get_settings()
    account_sid = settings.twilio_account_sid
    auth_token = settings.twilio_auth_token
    from_number = settings.twilio_phone_number
    if not (account_sid and auth_token and from_number):
        logger.warning(
            "Twilio is not configured; SMS cannot be sent (sid=%s, token=%s, from=%s)",
            bool(account_sid),
            bool(auth_token),
            bool(from_number),
        )
        raise ServiceNotConfiguredError("SMS service not configured")

    formatted_to = format_phone_number(recipient)
    formatted_from = format_phone_number(from_number)
    logger.debug(
        "Sending SMS to %s (%d characters)", mask_phone_number(formatted_to), len(body)
    )

    try:
        message = _get_client(account_sid, auth_token).messages.create(
            body=body,
            from_=formatted_from,
            to=formatted_to,
        )
    except TwilioRestException as exc:
        logger.error(
            "Twilio API request failed with status %s (code %s): %s",
            exc.status,
            exc.code,
            exc.msg,
        )
        raise UpstreamServiceError(
            "Failed to send SMS", details=f"Twilio error {exc.code}: {exc.msg}"
        ) from exc
    except Exception as exc:
        logger.exception("Error sending SMS via Twilio: %s", exc)
        raise UpstreamServiceError("Failed to send SMS", details=str(exc)) from exc

    return message.sid


__all__ = ["format_phone_number", "mask_phone_number", "send_sms"]

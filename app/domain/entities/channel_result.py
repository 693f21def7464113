"""Outcome of dispatching a notification on one channel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ChannelResult:
    """Per-channel result returned by the notification dispatcher.

    Skipped attempts are reported as successful: nothing went wrong, the user's
    preferences simply ruled the send out.
    """

    success: bool
    channel: str
    recipient: str | None = None
    external_id: str | None = None
    error: str | None = None
    error_code: str | None = None
    skipped: bool = False
    skip_reason: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "success": self.success,
            "channel": self.channel,
            "recipient": self.recipient,
        }
        if self.external_id is not None:
            payload["externalId"] = self.external_id
        if self.error is not None:
            payload["error"] = self.error
        if self.error_code is not None:
            payload["errorCode"] = self.error_code
        if self.skipped:
            payload["skipped"] = True
            payload["skipReason"] = self.skip_reason
        return payload


__all__ = ["ChannelResult"]

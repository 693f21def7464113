"""Notification dispatch, template registration and delivery log access."""

from .dispatch import (
    dispatch_notification,
    is_quiet_hours,
    normalize_channels,
    resolve_notification_type,
)
from .logs import count_notification_logs, list_notification_logs
from .rendering import referenced_variables, render_template
from .templates import list_notification_templates, register_notification_template

__all__ = [
    "dispatch_notification",
    "is_quiet_hours",
    "normalize_channels",
    "resolve_notification_type",
    "count_notification_logs",
    "list_notification_logs",
    "referenced_variables",
    "render_template",
    "list_notification_templates",
    "register_notification_template",
]

"""Notification adapters."""

from .console_notifier import ConsoleNotifier
from .sendgrid_notifier import SendGridNotifier

__all__ = ["ConsoleNotifier", "SendGridNotifier"]

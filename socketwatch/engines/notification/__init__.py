"""Notification engine — Slack webhook delivery."""

from socketwatch.engines.notification.notifier import NotifyOutcome, SlackNotifier
from socketwatch.engines.notification.template import render_alert

__all__ = ["NotifyOutcome", "SlackNotifier", "render_alert"]

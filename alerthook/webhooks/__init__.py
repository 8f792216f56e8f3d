"""Webhook notification system."""

from alerthook.webhooks.models import Event, WebhookPayload
from alerthook.webhooks.notifier import WebhookNotifier

__all__ = ["Event", "WebhookNotifier", "WebhookPayload"]

"""Coordenação do webhook Slack."""

from app.coordinators.slack.dispatcher import WebhookDispatcher, WebhookResponse

__all__ = [
    "WebhookDispatcher",
    "WebhookResponse",
]

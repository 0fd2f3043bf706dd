"""Handlers de eventos de domínio (implementações de EventHandlerProtocol)."""

from app.handlers.mention_reply import MentionReplyHandler
from app.handlers.noop import NoopHandler

__all__ = [
    "MentionReplyHandler",
    "NoopHandler",
]

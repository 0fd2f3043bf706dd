"""Protocolo do handler de eventos de domínio."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.events import AppMention, Message

    from .message_client import MessageClientProtocol


class EventHandlerProtocol(Protocol):
    """Capacidade de reagir a eventos de mensagem.

    Lançar exceção significa falha. O dispatcher registra a falha e
    responde 200 ao Slack mesmo assim.
    """

    async def handle_event(
        self,
        event: AppMention | Message,
        client: MessageClientProtocol,
    ) -> None: ...

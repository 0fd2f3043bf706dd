"""Handler padrão: não faz nada."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.events import AppMention, Message
    from app.protocols.message_client import MessageClientProtocol

logger = logging.getLogger(__name__)


class NoopHandler:
    """Aceita qualquer evento e só registra o tipo."""

    async def handle_event(
        self,
        event: AppMention | Message,
        client: MessageClientProtocol,
    ) -> None:
        logger.debug("noop_handler_event", extra={"event_kind": event.kind})

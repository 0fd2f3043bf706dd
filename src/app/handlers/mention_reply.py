"""Handler que responde menções ao bot na thread da menção.

Mensagens comuns são apenas registradas (sem texto, só metadados).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.events import AppMention

if TYPE_CHECKING:
    from app.domain.events import Message
    from app.protocols.message_client import MessageClientProtocol

logger = logging.getLogger(__name__)


class MentionReplyHandler:
    """Responde `reply_text` na thread de cada app_mention."""

    def __init__(self, reply_text: str) -> None:
        if not reply_text:
            raise ValueError("reply_text é obrigatório")
        self._reply_text = reply_text

    async def handle_event(
        self,
        event: AppMention | Message,
        client: MessageClientProtocol,
    ) -> None:
        if not isinstance(event, AppMention):
            logger.info(
                "message_event_received",
                extra={"channel": event.channel, "team_id": event.team_id},
            )
            return

        # Resposta fica na thread existente ou abre uma nova a partir da menção
        thread_ts = event.thread_ts or event.ts
        reply_ts = await client.reply_in_thread(event.channel, thread_ts, self._reply_text)
        logger.info(
            "mention_replied",
            extra={
                "channel": event.channel,
                "team_id": event.team_id,
                "thread_ts": thread_ts,
                "reply_ts": reply_ts,
            },
        )

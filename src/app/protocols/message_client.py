"""Protocolo do cliente de mensagens entregue aos handlers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.credentials import BotToken


class BlockProtocol(Protocol):
    """Bloco Block Kit serializável."""

    def to_dict(self) -> dict[str, Any]: ...


class MessageClientProtocol(Protocol):
    """Operações de mensagem disponíveis para um handler.

    Cada instância já está autenticada para um único workspace.
    """

    async def send(self, channel: str, text: str) -> str: ...

    async def reply_in_thread(self, channel: str, thread_ts: str, text: str) -> str: ...

    async def send_blocks(self, channel: str, blocks: Sequence[BlockProtocol]) -> str: ...

    async def reply_in_thread_with_blocks(
        self,
        channel: str,
        thread_ts: str,
        blocks: Sequence[BlockProtocol],
    ) -> str: ...

    async def update_message(self, channel: str, ts: str, text: str) -> str: ...

    async def delete_message(self, channel: str, ts: str) -> None: ...

    async def upload_file(
        self,
        channels: Sequence[str],
        content: bytes,
        filename: str,
    ) -> str: ...


MessageClientFactory = Callable[["BotToken"], MessageClientProtocol]

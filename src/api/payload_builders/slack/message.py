"""Builders de payload para métodos chat.* da Web API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .blocks import build_blocks

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .blocks import Block


def build_text_payload(
    channel: str,
    text: str,
    thread_ts: str | None = None,
) -> dict[str, Any]:
    """Payload de chat.postMessage com texto.

    Args:
        channel: ID do canal
        text: Texto da mensagem
        thread_ts: Timestamp da mensagem raiz (resposta em thread)

    Returns:
        Payload JSON
    """
    _require_channel(channel)
    if not text:
        raise ValueError("text é obrigatório")
    payload: dict[str, Any] = {"channel": channel, "text": text}
    if thread_ts:
        payload["thread_ts"] = thread_ts
    return payload


def build_blocks_payload(
    channel: str,
    blocks: Sequence[Block],
    thread_ts: str | None = None,
    fallback_text: str | None = None,
) -> dict[str, Any]:
    """Payload de chat.postMessage com blocos.

    `text` é usado pelo Slack em notificações quando há blocos.
    """
    _require_channel(channel)
    if not blocks:
        raise ValueError("blocks não pode ser vazio")
    payload: dict[str, Any] = {"channel": channel, "blocks": build_blocks(blocks)}
    if fallback_text:
        payload["text"] = fallback_text
    if thread_ts:
        payload["thread_ts"] = thread_ts
    return payload


def build_update_payload(channel: str, ts: str, text: str) -> dict[str, Any]:
    """Payload de chat.update."""
    _require_channel(channel)
    if not ts:
        raise ValueError("ts é obrigatório")
    return {"channel": channel, "ts": ts, "text": text}


def build_delete_payload(channel: str, ts: str) -> dict[str, Any]:
    """Payload de chat.delete."""
    _require_channel(channel)
    if not ts:
        raise ValueError("ts é obrigatório")
    return {"channel": channel, "ts": ts}


def _require_channel(channel: str) -> None:
    if not channel or not channel.strip():
        raise ValueError("channel é obrigatório")

"""Adapters concretos para Slack (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.slack.http_base import HttpError
from api.connectors.slack.slack_errors import SlackApiError
from api.connectors.slack.webhook import authenticate_webhook_request
from api.normalizers.slack import normalize
from api.payload_builders.slack.message import (
    build_blocks_payload,
    build_delete_payload,
    build_text_payload,
    build_update_payload,
)
from app.domain.credentials import TokenResponse
from app.protocols.message_client import MessageClientProtocol
from app.protocols.normalizer import EventNormalizerProtocol, RequestAuthenticatorProtocol
from app.protocols.oauth import OAuthExchangeProtocol
from utils.errors import OAuthExchangeError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from app.domain.credentials import BotToken, SigningSecret
    from app.domain.events import DomainEvent
    from app.protocols.http_client import SlackHttpClientProtocol
    from app.protocols.message_client import BlockProtocol

logger = logging.getLogger(__name__)


class SlackRequestAuthenticator(RequestAuthenticatorProtocol):
    """Verificação HMAC v0 com o signing secret do app."""

    def __init__(self, signing_secret: SigningSecret) -> None:
        self._secret = signing_secret

    def authenticate(
        self,
        raw_body: bytes,
        headers: Mapping[str, str],
        now: int | float,
    ) -> None:
        authenticate_webhook_request(raw_body, headers, self._secret, now)


class SlackEventNormalizer(EventNormalizerProtocol):
    """Normalizador de envelopes da Events API."""

    def normalize(self, raw_json: bytes | str) -> DomainEvent:
        return normalize(raw_json)


class SlackMessageClient(MessageClientProtocol):
    """Cliente de mensagens da Web API autenticado para um workspace.

    Métodos de envio devolvem o `ts` da mensagem criada/alterada;
    upload_file devolve o ID do arquivo.

    Raises (em todos os métodos):
        SlackApiError: Resposta com ok=false
        HttpError: Erro de transporte após retries
    """

    def __init__(self, token: BotToken, http_client: SlackHttpClientProtocol) -> None:
        self._token = token
        self._http = http_client

    async def send(self, channel: str, text: str) -> str:
        payload = build_text_payload(channel, text)
        return await self._post_message("chat.postMessage", payload)

    async def reply_in_thread(self, channel: str, thread_ts: str, text: str) -> str:
        payload = build_text_payload(channel, text, thread_ts=thread_ts)
        return await self._post_message("chat.postMessage", payload)

    async def send_blocks(self, channel: str, blocks: Sequence[BlockProtocol]) -> str:
        payload = build_blocks_payload(channel, blocks)
        return await self._post_message("chat.postMessage", payload)

    async def reply_in_thread_with_blocks(
        self,
        channel: str,
        thread_ts: str,
        blocks: Sequence[BlockProtocol],
    ) -> str:
        payload = build_blocks_payload(channel, blocks, thread_ts=thread_ts)
        return await self._post_message("chat.postMessage", payload)

    async def update_message(self, channel: str, ts: str, text: str) -> str:
        payload = build_update_payload(channel, ts, text)
        return await self._post_message("chat.update", payload)

    async def delete_message(self, channel: str, ts: str) -> None:
        payload = build_delete_payload(channel, ts)
        await self._post_message("chat.delete", payload)

    async def upload_file(
        self,
        channels: Sequence[str],
        content: bytes,
        filename: str,
    ) -> str:
        """Upload externo em três passos.

        files.getUploadURLExternal -> POST dos bytes -> files.completeUploadExternal
        """
        if not filename:
            raise ValueError("filename é obrigatório")

        ticket = await self._http.call_form(
            "files.getUploadURLExternal",
            {"filename": filename, "length": str(len(content))},
            access_token=self._token.value,
        )
        upload_url = ticket.get("upload_url")
        file_id = ticket.get("file_id")
        if not upload_url or not file_id:
            raise HttpError("slack_upload_ticket_invalid")

        await self._http.upload_bytes(upload_url, content)

        complete: dict[str, Any] = {"files": [{"id": file_id, "title": filename}]}
        if channels:
            complete["channels"] = ",".join(channels)
        await self._http.call_json(
            "files.completeUploadExternal",
            self._token.value,
            complete,
        )
        logger.info(
            "slack_file_uploaded",
            extra={"file_id": file_id, "channel_count": len(channels), "size": len(content)},
        )
        return str(file_id)

    async def _post_message(self, method: str, payload: dict[str, Any]) -> str:
        try:
            data = await self._http.call_json(method, self._token.value, payload)
        except (SlackApiError, HttpError):
            logger.warning(
                "slack_message_call_failed",
                extra={"method": method, "channel": payload.get("channel")},
            )
            raise
        logger.info(
            "slack_message_call_ok",
            extra={"method": method, "channel": payload.get("channel")},
        )
        return str(data.get("ts", payload.get("ts", "")))


class SlackOAuthClient(OAuthExchangeProtocol):
    """Troca o código OAuth por token via oauth.v2.access."""

    def __init__(
        self,
        http_client: SlackHttpClientProtocol,
        client_id: str,
        client_secret: str,
        redirect_uri: str = "",
    ) -> None:
        self._http = http_client
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_uri = redirect_uri

    async def exchange_code(self, code: str) -> tuple[str, TokenResponse]:
        """Troca `code` por (team_id, TokenResponse).

        Raises:
            OAuthExchangeError: Falha HTTP, ok=false ou resposta sem token/team
        """
        data = {
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "code": code,
        }
        if self._redirect_uri:
            data["redirect_uri"] = self._redirect_uri

        try:
            response = await self._http.call_form("oauth.v2.access", data)
        except SlackApiError as exc:
            raise OAuthExchangeError(exc.error_code) from exc
        except HttpError as exc:
            raise OAuthExchangeError("oauth_http_error") from exc

        team = response.get("team") or {}
        team_id = team.get("id") if isinstance(team, dict) else None
        access_token = response.get("access_token")
        if not team_id or not access_token:
            raise OAuthExchangeError("oauth_response_incomplete")

        credential = TokenResponse(
            access_token=access_token,
            team_id=team_id,
            team_name=team.get("name"),
            bot_user_id=response.get("bot_user_id"),
            scope=response.get("scope"),
        )
        return team_id, credential

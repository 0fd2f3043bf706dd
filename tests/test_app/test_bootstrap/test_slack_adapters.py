"""Testes dos adapters Slack (MessageClient, OAuth, autenticação)."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from api.connectors.slack.http_base import HttpError
from api.connectors.slack.signature import compute_signature
from api.connectors.slack.slack_errors import SlackApiError
from api.payload_builders.slack import DividerBlock, SectionBlock
from app.bootstrap.slack_adapters import (
    SlackEventNormalizer,
    SlackMessageClient,
    SlackOAuthClient,
    SlackRequestAuthenticator,
)
from app.domain.credentials import BotToken, SigningSecret, TokenResponse
from app.domain.events import UrlVerification
from utils.errors import BadSignatureError, OAuthExchangeError


@pytest.fixture
def http_client() -> AsyncMock:
    client = AsyncMock()
    client.call_json.return_value = {"ok": True, "ts": "1700000000.000200"}
    return client


@pytest.fixture
def message_client(http_client: AsyncMock) -> SlackMessageClient:
    return SlackMessageClient(BotToken("xoxb-test"), http_client)


class TestSlackMessageClient:
    @pytest.mark.asyncio
    async def test_send_posts_text(
        self,
        message_client: SlackMessageClient,
        http_client: AsyncMock,
    ) -> None:
        ts = await message_client.send("C1", "oi")

        assert ts == "1700000000.000200"
        http_client.call_json.assert_awaited_once_with(
            "chat.postMessage",
            "xoxb-test",
            {"channel": "C1", "text": "oi"},
        )

    @pytest.mark.asyncio
    async def test_reply_in_thread_sets_thread_ts(
        self,
        message_client: SlackMessageClient,
        http_client: AsyncMock,
    ) -> None:
        await message_client.reply_in_thread("C1", "1.0", "resposta")

        _, _, payload = http_client.call_json.await_args.args
        assert payload == {"channel": "C1", "text": "resposta", "thread_ts": "1.0"}

    @pytest.mark.asyncio
    async def test_send_blocks(
        self,
        message_client: SlackMessageClient,
        http_client: AsyncMock,
    ) -> None:
        await message_client.send_blocks("C1", [SectionBlock("a"), DividerBlock()])

        _, _, payload = http_client.call_json.await_args.args
        assert payload["blocks"] == [
            {"type": "section", "text": {"type": "plain_text", "text": "a"}},
            {"type": "divider"},
        ]
        assert "thread_ts" not in payload

    @pytest.mark.asyncio
    async def test_reply_in_thread_with_blocks(
        self,
        message_client: SlackMessageClient,
        http_client: AsyncMock,
    ) -> None:
        await message_client.reply_in_thread_with_blocks("C1", "1.0", [SectionBlock("a")])

        _, _, payload = http_client.call_json.await_args.args
        assert payload["thread_ts"] == "1.0"

    @pytest.mark.asyncio
    async def test_update_and_delete(
        self,
        message_client: SlackMessageClient,
        http_client: AsyncMock,
    ) -> None:
        await message_client.update_message("C1", "1.0", "editado")
        await message_client.delete_message("C1", "1.0")

        methods = [call.args[0] for call in http_client.call_json.await_args_list]
        assert methods == ["chat.update", "chat.delete"]

    @pytest.mark.asyncio
    async def test_propagates_slack_api_error(
        self,
        message_client: SlackMessageClient,
        http_client: AsyncMock,
    ) -> None:
        http_client.call_json.side_effect = SlackApiError(
            "chat.postMessage", "not_in_channel", True
        )

        with pytest.raises(SlackApiError):
            await message_client.send("C1", "oi")

    @pytest.mark.asyncio
    async def test_upload_file_uses_external_upload_flow(
        self,
        message_client: SlackMessageClient,
        http_client: AsyncMock,
    ) -> None:
        http_client.call_form.return_value = {
            "ok": True,
            "upload_url": "https://files.slack.test/upload/v1/abc",
            "file_id": "F123",
        }

        file_id = await message_client.upload_file(["C1", "C2"], b"conteudo", "test.txt")

        assert file_id == "F123"
        http_client.call_form.assert_awaited_once_with(
            "files.getUploadURLExternal",
            {"filename": "test.txt", "length": "8"},
            access_token="xoxb-test",
        )
        http_client.upload_bytes.assert_awaited_once_with(
            "https://files.slack.test/upload/v1/abc",
            b"conteudo",
        )
        method, token, payload = http_client.call_json.await_args.args
        assert method == "files.completeUploadExternal"
        assert token == "xoxb-test"
        assert payload == {
            "files": [{"id": "F123", "title": "test.txt"}],
            "channels": "C1,C2",
        }

    @pytest.mark.asyncio
    async def test_upload_file_rejects_incomplete_ticket(
        self,
        message_client: SlackMessageClient,
        http_client: AsyncMock,
    ) -> None:
        http_client.call_form.return_value = {"ok": True}

        with pytest.raises(HttpError):
            await message_client.upload_file(["C1"], b"x", "a.txt")

        http_client.upload_bytes.assert_not_awaited()


class TestSlackOAuthClient:
    @pytest.mark.asyncio
    async def test_exchange_code_returns_team_and_credential(self) -> None:
        http_client = AsyncMock()
        http_client.call_form.return_value = {
            "ok": True,
            "access_token": "xoxb-new",
            "scope": "chat:write",
            "bot_user_id": "U0BOT",
            "team": {"id": "T1", "name": "Acme"},
        }
        client = SlackOAuthClient(http_client, "cid", "csecret", "https://x.test/oauth/callback")

        team_id, credential = await client.exchange_code("code-1")

        assert team_id == "T1"
        assert credential == TokenResponse(
            access_token="xoxb-new",
            team_id="T1",
            team_name="Acme",
            bot_user_id="U0BOT",
            scope="chat:write",
        )
        method, data = http_client.call_form.await_args.args
        assert method == "oauth.v2.access"
        assert data == {
            "client_id": "cid",
            "client_secret": "csecret",
            "code": "code-1",
            "redirect_uri": "https://x.test/oauth/callback",
        }

    @pytest.mark.asyncio
    async def test_exchange_code_maps_slack_error(self) -> None:
        http_client = AsyncMock()
        http_client.call_form.side_effect = SlackApiError("oauth.v2.access", "invalid_code", True)
        client = SlackOAuthClient(http_client, "cid", "csecret")

        with pytest.raises(OAuthExchangeError) as exc_info:
            await client.exchange_code("bad")

        assert str(exc_info.value) == "invalid_code"

    @pytest.mark.asyncio
    async def test_exchange_code_maps_http_error(self) -> None:
        http_client = AsyncMock()
        http_client.call_form.side_effect = HttpError("http_connection_error", is_retryable=True)
        client = SlackOAuthClient(http_client, "cid", "csecret")

        with pytest.raises(OAuthExchangeError):
            await client.exchange_code("code")

    @pytest.mark.asyncio
    async def test_exchange_code_rejects_incomplete_response(self) -> None:
        http_client = AsyncMock()
        http_client.call_form.return_value = {"ok": True, "access_token": "xoxb-new"}
        client = SlackOAuthClient(http_client, "cid", "csecret")

        with pytest.raises(OAuthExchangeError):
            await client.exchange_code("code")


def test_request_authenticator_delegates_to_signature_check() -> None:
    secret = SigningSecret("s")
    body = b"{}"
    headers = {
        "X-Slack-Signature": compute_signature(secret, 100, body),
        "X-Slack-Request-Timestamp": "100",
    }
    authenticator = SlackRequestAuthenticator(secret)

    authenticator.authenticate(body, headers, 100)
    with pytest.raises(BadSignatureError):
        SlackRequestAuthenticator(SigningSecret("outro")).authenticate(body, headers, 100)


def test_event_normalizer_adapter() -> None:
    event = SlackEventNormalizer().normalize(b'{"type":"url_verification","challenge":"c"}')

    assert event == UrlVerification(challenge="c")

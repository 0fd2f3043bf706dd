"""Testes de integração do app FastAPI montado por create_app."""

from __future__ import annotations

import json
import time
from typing import Any

import pytest
from fastapi.testclient import TestClient

from api.connectors.slack.signature import compute_signature
from app.app import create_app
from app.domain.credentials import BotToken, SigningSecret, TokenResponse
from app.protocols.credential_store import CredentialStoreProtocol
from config.settings import SlackSettings

SECRET = SigningSecret("integration-secret")


class RecordingHandler:
    def __init__(self) -> None:
        self.events: list[Any] = []

    async def handle_event(self, event: Any, client: Any) -> None:
        self.events.append(event)


class DictCredentialStore(CredentialStoreProtocol):
    def __init__(self) -> None:
        self.items: dict[str, TokenResponse] = {}

    async def get(self, team_id: str) -> TokenResponse | None:
        return self.items.get(team_id)

    async def put(self, team_id: str, credential: TokenResponse) -> None:
        self.items[team_id] = credential


class FakeOAuthClient:
    async def exchange_code(self, code: str) -> tuple[str, TokenResponse]:
        return "T9", TokenResponse(access_token="xoxb-new", team_id="T9")


def _signed(body: dict[str, Any]) -> tuple[bytes, dict[str, str]]:
    raw = json.dumps(body).encode("utf-8")
    timestamp = int(time.time())
    headers = {
        "X-Slack-Signature": compute_signature(SECRET, timestamp, raw),
        "X-Slack-Request-Timestamp": str(timestamp),
        "Content-Type": "application/json",
    }
    return raw, headers


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def store() -> DictCredentialStore:
    return DictCredentialStore()


@pytest.fixture
def client(handler: RecordingHandler, store: DictCredentialStore):
    settings = SlackSettings(
        signing_secret=SECRET,
        bot_token=BotToken("xoxb-single"),
        multi_tenant=False,
        webhook_processing_mode="inline",
        client_id="123.456",
        client_secret="shh",
    )
    app = create_app(
        settings,
        handler=handler,
        credential_store=store,
        oauth_client=FakeOAuthClient(),
    )
    with TestClient(app) as test_client:
        yield test_client


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "slack_gateway"


def test_url_verification_round_trip(client: TestClient) -> None:
    raw, headers = _signed({"type": "url_verification", "challenge": "abc123"})

    response = client.post("/push", content=raw, headers=headers)

    assert response.status_code == 200
    assert response.text == "abc123"


def test_app_mention_reaches_handler(client: TestClient, handler: RecordingHandler) -> None:
    raw, headers = _signed(
        {
            "type": "event_callback",
            "team_id": "T1",
            "event": {"type": "app_mention", "channel": "C1", "ts": "1.0", "text": "<@U1> oi"},
        }
    )

    response = client.post("/push", content=raw, headers=headers)

    assert response.status_code == 200
    assert len(handler.events) == 1
    assert handler.events[0].channel == "C1"


def test_correlation_id_header_is_accepted(client: TestClient) -> None:
    raw, headers = _signed({"type": "url_verification", "challenge": "x"})
    headers["X-Correlation-Id"] = "corr-1"

    assert client.post("/push", content=raw, headers=headers).status_code == 200


def test_bad_signature_is_rejected(client: TestClient, handler: RecordingHandler) -> None:
    raw, headers = _signed({"type": "url_verification", "challenge": "abc"})
    headers["X-Slack-Signature"] = "v0=" + "0" * 64

    response = client.post("/push", content=raw, headers=headers)

    assert response.status_code == 401
    assert response.text == "Invalid signature"
    assert handler.events == []


def test_missing_headers_are_rejected(client: TestClient) -> None:
    response = client.post("/push", content=b"{}")

    assert response.status_code == 401


def test_oauth_start_redirects_to_slack(client: TestClient) -> None:
    response = client.get("/oauth/start", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"].startswith("https://slack.com/oauth/v2/authorize")


def test_oauth_callback_stores_credential(client: TestClient, store: DictCredentialStore) -> None:
    response = client.get("/oauth/callback", params={"code": "c-1"})

    assert response.status_code == 200
    assert store.items["T9"].access_token == "xoxb-new"


def test_custom_webhook_path(handler: RecordingHandler, store: DictCredentialStore) -> None:
    settings = SlackSettings(signing_secret=SECRET, webhook_path="/slack/events")
    app = create_app(settings, handler=handler, credential_store=store)
    raw, headers = _signed({"type": "url_verification", "challenge": "p"})

    with TestClient(app) as test_client:
        assert test_client.post("/slack/events", content=raw, headers=headers).text == "p"
        assert test_client.post("/push", content=raw, headers=headers).status_code == 404

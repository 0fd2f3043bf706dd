"""Despacho do webhook Slack: autentica, classifica e aciona o handler.

Máquina de estados por request:
    Received -> Authenticated -> Classified -> Responded

Falhas de autenticação encerram com 401 e de parsing com 400. Falhas do
handler nunca alteram o 200 devolvido ao Slack (o Slack reenvia
agressivamente respostas != 200); são registradas em log e métrica.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

from app.domain.events import CALLBACK_EVENT_TYPES, UrlVerification
from app.observability import (
    get_correlation_id,
    record_handler_failure,
    record_latency,
    record_webhook_outcome,
)
from utils.errors import (
    AuthError,
    HandlerFailedError,
    MalformedHeadersError,
    MissingChallengeError,
    MissingFieldError,
    ParseError,
    StaleTimestampError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.credentials import BotToken
    from app.domain.events import AppMention, Message
    from app.protocols.credential_store import CredentialStoreProtocol
    from app.protocols.event_handler import EventHandlerProtocol
    from app.protocols.message_client import MessageClientFactory, MessageClientProtocol
    from app.protocols.normalizer import (
        EventNormalizerProtocol,
        RequestAuthenticatorProtocol,
    )

logger = logging.getLogger(__name__)

PROCESSING_MODES = ("inline", "async")
DEFAULT_HANDLER_TIMEOUT_SECONDS = 10.0

TaskScheduler = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class WebhookResponse:
    """Resposta HTTP produzida pelo dispatcher (independente de framework)."""

    status_code: int
    content: bytes = b""
    media_type: str = "text/plain"


def _auth_error_text(exc: AuthError) -> str:
    if isinstance(exc, StaleTimestampError):
        return "Request timestamp is too old"
    if isinstance(exc, MalformedHeadersError):
        return "Missing signature headers"
    return "Invalid signature"


def _parse_error_text(exc: ParseError) -> str:
    if isinstance(exc, MissingChallengeError):
        return "Challenge value is missing"
    if isinstance(exc, MissingFieldError):
        return f"Missing field: {exc.field_name}"
    return "Invalid JSON"


class WebhookDispatcher:
    """Coordena um request de webhook do início ao fim.

    Resolução de credencial:
    - multi_tenant=True: token do CredentialStore pelo team_id do evento;
      sem team_id ou sem credencial o evento é ignorado (200).
    - multi_tenant=False: usa o bot_token configurado; sem token, ignora.

    Em processing_mode="async" o handler roda numa task agendada por
    `scheduler(coroutine=..., correlation_id=...)` e o 200 sai antes dele.
    """

    def __init__(
        self,
        *,
        authenticator: RequestAuthenticatorProtocol,
        normalizer: EventNormalizerProtocol,
        credential_store: CredentialStoreProtocol,
        handler: EventHandlerProtocol,
        message_client_factory: MessageClientFactory,
        multi_tenant: bool = True,
        bot_token: BotToken | None = None,
        handler_timeout_seconds: float = DEFAULT_HANDLER_TIMEOUT_SECONDS,
        processing_mode: str = "inline",
        scheduler: TaskScheduler | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        mode = processing_mode.lower()
        if mode not in PROCESSING_MODES:
            raise ValueError(f"processing_mode inválido: {processing_mode}")
        if mode == "async" and scheduler is None:
            raise ValueError("processing_mode=async requer scheduler")
        if handler_timeout_seconds <= 0:
            raise ValueError("handler_timeout_seconds deve ser > 0")

        self._authenticator = authenticator
        self._normalizer = normalizer
        self._store = credential_store
        self._handler = handler
        self._client_factory = message_client_factory
        self._multi_tenant = multi_tenant
        self._bot_token = bot_token
        self._handler_timeout = handler_timeout_seconds
        self._mode = mode
        self._scheduler = scheduler
        self._clock = clock

    @property
    def processing_mode(self) -> str:
        return self._mode

    async def dispatch(
        self,
        raw_body: bytes,
        headers: Mapping[str, str],
        now: float | None = None,
    ) -> WebhookResponse:
        """Processa um request bruto e devolve a resposta para o Slack.

        Args:
            raw_body: Corpo exatamente como recebido (base da assinatura)
            headers: Headers do request
            now: Epoch em segundos; se None, usa o relógio injetado

        Returns:
            WebhookResponse (200, 400 ou 401)
        """
        started = time.perf_counter()
        response, outcome, kind = await self._run(raw_body, headers, now)
        record_latency(
            "webhook",
            "dispatch",
            (time.perf_counter() - started) * 1000,
            correlation_id=get_correlation_id() or None,
        )
        record_webhook_outcome(response.status_code, outcome, event_kind=kind)
        return response

    async def _run(
        self,
        raw_body: bytes,
        headers: Mapping[str, str],
        now: float | None,
    ) -> tuple[WebhookResponse, str, str | None]:
        current = self._clock() if now is None else now

        try:
            self._authenticator.authenticate(raw_body, headers, current)
        except AuthError as exc:
            logger.warning("webhook_signature_invalid", extra={"reason": exc.reason})
            return WebhookResponse(401, _auth_error_text(exc).encode()), exc.reason, None

        try:
            event = self._normalizer.normalize(raw_body)
        except ParseError as exc:
            logger.warning("webhook_payload_invalid", extra={"reason": exc.reason})
            return WebhookResponse(400, _parse_error_text(exc).encode()), exc.reason, None

        logger.info("webhook_event_classified", extra={"event_kind": event.kind})

        if isinstance(event, UrlVerification):
            if not event.challenge:
                return (
                    WebhookResponse(400, b"Challenge value is missing"),
                    MissingChallengeError.reason,
                    event.kind,
                )
            return WebhookResponse(200, event.challenge.encode()), "challenge", event.kind

        if not isinstance(event, CALLBACK_EVENT_TYPES):
            return WebhookResponse(200), "ignored", event.kind

        token = await self._resolve_token(event.team_id)
        if token is None:
            return WebhookResponse(200), "no_credential", event.kind

        client = self._client_factory(token)
        if self._mode == "async":
            scheduler = cast("TaskScheduler", self._scheduler)
            scheduler(
                coroutine=self._run_handler(event, client),
                correlation_id=get_correlation_id(),
            )
            return WebhookResponse(200), "scheduled", event.kind

        handled = await self._run_handler(event, client)
        return WebhookResponse(200), "handled" if handled else "handler_failed", event.kind

    async def _resolve_token(self, team_id: str | None) -> BotToken | None:
        if not self._multi_tenant:
            if not self._bot_token:
                logger.warning("webhook_bot_token_missing")
                return None
            return self._bot_token

        if not team_id:
            logger.info("webhook_team_id_missing")
            return None

        credential = await self._store.get(team_id)
        if credential is None:
            logger.info("webhook_credential_not_found", extra={"team_id": team_id})
            return None
        return credential.bot_token()

    async def _run_handler(
        self,
        event: AppMention | Message,
        client: MessageClientProtocol,
    ) -> bool:
        """Executa o handler; a falha fica registrada e nunca propaga."""
        started = time.perf_counter()
        try:
            await self._call_handler(event, client)
        except HandlerFailedError as exc:
            reason = str(exc)
            cause = exc.__cause__
            logger.error(
                "handler_failed",
                exc_info=cause if reason == "exception" else None,
                extra={
                    "reason": reason,
                    "event_kind": event.kind,
                    "team_id": event.team_id,
                    "error_type": type(cause).__name__,
                },
            )
            record_handler_failure(reason, event.kind, event.team_id)
            return False

        record_latency(
            "handler",
            "handle_event",
            (time.perf_counter() - started) * 1000,
            correlation_id=get_correlation_id() or None,
        )
        return True

    async def _call_handler(
        self,
        event: AppMention | Message,
        client: MessageClientProtocol,
    ) -> None:
        try:
            await asyncio.wait_for(
                self._handler.handle_event(event, client),
                timeout=self._handler_timeout,
            )
        except TimeoutError as exc:
            raise HandlerFailedError("timeout") from exc
        except Exception as exc:
            raise HandlerFailedError("exception") from exc

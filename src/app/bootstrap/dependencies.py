"""Factories de dependências: criação de implementações concretas.

Este módulo centraliza o wiring do webhook Slack a partir das settings:
store de credenciais, cliente HTTP, handler, OAuth e dispatcher.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.slack.http_client import create_slack_http_client
from app.bootstrap.slack_adapters import (
    SlackEventNormalizer,
    SlackMessageClient,
    SlackOAuthClient,
    SlackRequestAuthenticator,
)
from app.coordinators.slack.dispatcher import WebhookDispatcher
from app.handlers import MentionReplyHandler, NoopHandler
from app.infra.stores import MemoryCredentialStore

if TYPE_CHECKING:
    from api.routes.slack.webhook_runtime_tasks import ProcessingTaskRunner
    from app.domain.credentials import BotToken
    from app.protocols.credential_store import CredentialStoreProtocol
    from app.protocols.event_handler import EventHandlerProtocol
    from app.protocols.http_client import SlackHttpClientProtocol
    from app.protocols.message_client import MessageClientFactory
    from app.protocols.oauth import OAuthExchangeProtocol
    from config.settings import SlackSettings

logger = logging.getLogger(__name__)


def create_credential_store() -> CredentialStoreProtocol:
    """Cria o store de credenciais (somente memória)."""
    store = MemoryCredentialStore()
    logger.info("credential_store_created", extra={"backend": "memory"})
    return store


def create_event_handler(settings: SlackSettings) -> EventHandlerProtocol:
    """Cria o handler configurado em SLACK_EVENT_HANDLER.

    Raises:
        ValueError: Nome de handler desconhecido
    """
    name = settings.event_handler
    if name == "noop":
        return NoopHandler()
    if name == "mention_reply":
        return MentionReplyHandler(settings.mention_reply_text)
    msg = f"SLACK_EVENT_HANDLER inválido: {name}"
    raise ValueError(msg)


def create_message_client_factory(
    http_client: SlackHttpClientProtocol,
) -> MessageClientFactory:
    """Factory de MessageClient por token (um cliente por evento)."""

    def factory(token: BotToken) -> SlackMessageClient:
        return SlackMessageClient(token, http_client)

    return factory


def create_oauth_client(
    settings: SlackSettings,
    http_client: SlackHttpClientProtocol,
) -> OAuthExchangeProtocol | None:
    """Cria cliente OAuth; None se client_id/client_secret ausentes."""
    if not settings.oauth_enabled:
        logger.info("oauth_disabled", extra={"reason": "missing_client_credentials"})
        return None
    return SlackOAuthClient(
        http_client,
        client_id=settings.client_id,
        client_secret=settings.client_secret,
        redirect_uri=settings.oauth_redirect_uri,
    )


def create_webhook_dispatcher(
    settings: SlackSettings,
    *,
    credential_store: CredentialStoreProtocol,
    handler: EventHandlerProtocol,
    task_runner: ProcessingTaskRunner | None = None,
    http_client: SlackHttpClientProtocol | None = None,
) -> WebhookDispatcher:
    """Monta o dispatcher com as implementações concretas do Slack.

    Args:
        settings: SlackSettings carregadas
        credential_store: Store compartilhado com o callback OAuth
        handler: Handler de eventos
        task_runner: Runner de tasks (obrigatório em modo async)
        http_client: Cliente da Web API; se None, cria a partir das settings
    """
    client = http_client or create_slack_http_client(settings)
    scheduler = task_runner.schedule if task_runner is not None else None
    dispatcher = WebhookDispatcher(
        authenticator=SlackRequestAuthenticator(settings.signing_secret),
        normalizer=SlackEventNormalizer(),
        credential_store=credential_store,
        handler=handler,
        message_client_factory=create_message_client_factory(client),
        multi_tenant=settings.multi_tenant,
        bot_token=settings.bot_token,
        handler_timeout_seconds=settings.handler_timeout_seconds,
        processing_mode=settings.webhook_processing_mode,
        scheduler=scheduler,
    )
    logger.info(
        "webhook_dispatcher_created",
        extra={
            "multi_tenant": settings.multi_tenant,
            "processing_mode": dispatcher.processing_mode,
            "handler": type(handler).__name__,
        },
    )
    return dispatcher

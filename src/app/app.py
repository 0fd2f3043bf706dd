"""Entrypoint do gateway de webhooks do Slack.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.connectors.slack.http_client import create_slack_http_client
from api.routes import create_api_router
from api.routes.slack.webhook_runtime_tasks import ProcessingTaskRunner
from app.bootstrap import SERVICE_NAME, initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import (
    create_credential_store,
    create_event_handler,
    create_oauth_client,
    create_webhook_dispatcher,
)
from config.logging import get_logger
from config.settings import get_slack_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.protocols.credential_store import CredentialStoreProtocol
    from app.protocols.event_handler import EventHandlerProtocol
    from app.protocols.http_client import SlackHttpClientProtocol
    from app.protocols.oauth import OAuthExchangeProtocol
    from config.settings import SlackSettings

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

SHUTDOWN_DRAIN_TIMEOUT_SECONDS = 30.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida configurações (falha rápido em staging/production).
    Shutdown: aguarda handlers agendados em modo async.
    """
    logger.info("app_starting", extra={"service": SERVICE_NAME})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": SERVICE_NAME})
    await app.state.task_runner.drain(timeout_seconds=SHUTDOWN_DRAIN_TIMEOUT_SECONDS)


def create_app(
    settings: SlackSettings | None = None,
    *,
    handler: EventHandlerProtocol | None = None,
    credential_store: CredentialStoreProtocol | None = None,
    oauth_client: OAuthExchangeProtocol | None = None,
    http_client: SlackHttpClientProtocol | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        settings: SlackSettings; se None, carrega do ambiente
        handler: Handler de eventos; se None, usa SLACK_EVENT_HANDLER
        credential_store: Store de credenciais; se None, cria em memória
        oauth_client: Troca OAuth; se None, cria quando OAuth está configurado
        http_client: Cliente da Web API compartilhado

    Returns:
        Aplicação FastAPI configurada.
    """
    slack = settings or get_slack_settings()
    store = credential_store or create_credential_store()
    event_handler = handler or create_event_handler(slack)
    client = http_client or create_slack_http_client(slack)
    task_runner = ProcessingTaskRunner()

    fastapi_app = FastAPI(
        title="Slack Gateway",
        description="Recebimento e despacho de webhooks do Slack",
        version="0.1.0",
        lifespan=lifespan,
    )

    fastapi_app.state.service_name = SERVICE_NAME
    fastapi_app.state.slack_settings = slack
    fastapi_app.state.credential_store = store
    fastapi_app.state.task_runner = task_runner
    fastapi_app.state.slack_oauth_client = oauth_client or create_oauth_client(slack, client)
    fastapi_app.state.slack_dispatcher = create_webhook_dispatcher(
        slack,
        credential_store=store,
        handler=event_handler,
        task_runner=task_runner,
        http_client=client,
    )

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router(webhook_path=slack.webhook_path))

    logger.info(
        "app_configured",
        extra={"service": SERVICE_NAME, "webhook_path": slack.webhook_path},
    )

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting slack-gateway in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()

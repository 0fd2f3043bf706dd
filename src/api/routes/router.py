"""Agregador de rotas: registra todos os routers do serviço.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(webhook_path="/push"))
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.slack.router import create_slack_router
from config.settings import DEFAULT_WEBHOOK_PATH


def create_api_router(webhook_path: str = DEFAULT_WEBHOOK_PATH) -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Args:
        webhook_path: Caminho do POST de eventos do Slack

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health check na raiz
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(create_slack_router(webhook_path), tags=["slack"])

    return api_router

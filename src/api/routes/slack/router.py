"""Router principal do Slack: agrega todos os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.slack.oauth import router as oauth_router
from api.routes.slack.webhook import create_webhook_router
from config.settings import DEFAULT_WEBHOOK_PATH


def create_slack_router(webhook_path: str = DEFAULT_WEBHOOK_PATH) -> APIRouter:
    """Webhook no caminho configurado + rotas OAuth."""
    router = APIRouter()
    router.include_router(create_webhook_router(webhook_path))
    router.include_router(oauth_router)
    return router

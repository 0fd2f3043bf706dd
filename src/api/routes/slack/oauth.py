"""Endpoints do fluxo OAuth v2 (instalação do app por workspace).

Endpoints:
- GET /oauth/start: redireciona para a tela de autorização do Slack
- GET /oauth/callback: troca o code por token e grava no CredentialStore

A troca HTTP termina antes do put(); o lock de escrita do store só cobre
a mutação do mapa.
"""

from __future__ import annotations

import logging
from urllib.parse import urlencode

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import RedirectResponse

from config.settings import SLACK_AUTHORIZE_URL, SlackSettings
from utils.errors import OAuthExchangeError

logger = logging.getLogger(__name__)

router = APIRouter()


def build_authorize_url(settings: SlackSettings) -> str:
    """URL de autorização com client_id, escopos e redirect_uri (se houver)."""
    params = {
        "client_id": settings.client_id,
        "scope": ",".join(settings.oauth_scopes),
    }
    if settings.oauth_redirect_uri:
        params["redirect_uri"] = settings.oauth_redirect_uri
    return f"{SLACK_AUTHORIZE_URL}?{urlencode(params, safe=',:')}"


def _text(content: str, status_code: int) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


@router.get("/oauth/start", response_model=None)
async def oauth_start(request: Request) -> Response:
    """Inicia a instalação do app redirecionando para o Slack."""
    settings: SlackSettings = request.app.state.slack_settings
    if not settings.oauth_enabled:
        logger.warning("oauth_not_configured", extra={"endpoint": "start"})
        return _text("OAuth is not configured", status.HTTP_503_SERVICE_UNAVAILABLE)

    return RedirectResponse(
        build_authorize_url(settings),
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    )


@router.get("/oauth/callback", response_model=None)
async def oauth_callback(
    request: Request,
    code: str | None = None,
    error: str | None = None,
) -> Response:
    """Recebe o redirect do Slack e registra a credencial do workspace."""
    if error:
        logger.warning("oauth_authorization_denied", extra={"error": error})
        return _text("Authorization was denied", status.HTTP_400_BAD_REQUEST)

    if not code:
        return _text("Missing code parameter", status.HTTP_400_BAD_REQUEST)

    oauth_client = getattr(request.app.state, "slack_oauth_client", None)
    if oauth_client is None:
        logger.warning("oauth_not_configured", extra={"endpoint": "callback"})
        return _text("OAuth is not configured", status.HTTP_503_SERVICE_UNAVAILABLE)

    try:
        team_id, credential = await oauth_client.exchange_code(code)
    except OAuthExchangeError as exc:
        logger.warning("oauth_exchange_failed", extra={"reason": str(exc)})
        return _text("OAuth exchange failed", status.HTTP_502_BAD_GATEWAY)

    await request.app.state.credential_store.put(team_id, credential)
    logger.info("oauth_installation_completed", extra={"team_id": team_id})
    return _text("Installation completed", status.HTTP_200_OK)

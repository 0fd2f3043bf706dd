"""Cliente HTTP especializado para a Web API do Slack.

Estende HttpClient genérico com comportamentos específicos do Slack:
- Endpoint por método (https://slack.com/api/<method>)
- Bearer token por chamada (credencial resolvida por tenant)
- Envelope de resposta `{"ok": bool, "error": str}` tratado como erro
- Logging estruturado sem tokens nem texto de mensagens
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from .http_base import HttpClient, HttpClientConfig, HttpError
from .slack_errors import parse_slack_error
from .slack_logging import log_slack_error, log_success

if TYPE_CHECKING:
    import httpx

    from config.settings import SlackSettings

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://slack.com/api"


class SlackHttpClient(HttpClient):
    """Cliente HTTP para métodos da Web API do Slack."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        api_base_url: str = DEFAULT_API_BASE_URL,
    ) -> None:
        super().__init__(config)
        self.api_base_url = api_base_url.rstrip("/")

    def method_url(self, method: str) -> str:
        """URL completa de um método (ex: chat.postMessage)."""
        return f"{self.api_base_url}/{method}"

    async def call_json(
        self,
        method: str,
        access_token: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """Chama método com corpo JSON autenticado por bearer token.

        Raises:
            ValueError: Se access_token está vazio
            HttpError: Erro HTTP/transporte
            SlackApiError: Resposta com ok=false
        """
        headers = self._auth_headers(access_token)
        headers["Content-Type"] = "application/json; charset=utf-8"
        response = await self.post(self.method_url(method), json=payload, headers=headers)
        return self._process_slack_response(method, response)

    async def call_form(
        self,
        method: str,
        data: dict[str, Any],
        access_token: str | None = None,
    ) -> dict[str, Any]:
        """Chama método com corpo form-urlencoded.

        Usado por métodos que não aceitam JSON (oauth.v2.access,
        files.getUploadURLExternal). Token é opcional no fluxo OAuth.
        """
        headers = self._auth_headers(access_token) if access_token is not None else {}
        response = await self.post_form(self.method_url(method), data=data, headers=headers)
        return self._process_slack_response(method, response)

    async def upload_bytes(self, upload_url: str, content: bytes) -> None:
        """Envia bytes para a URL pré-assinada do upload externo."""
        response = await self.post_content(
            upload_url,
            content=content,
            headers={"Content-Type": "application/octet-stream"},
        )
        if response.status_code >= 400:
            raise HttpError("slack_upload_failed", status_code=response.status_code)

    def _auth_headers(self, access_token: str) -> dict[str, str]:
        if not access_token or not access_token.strip():
            logger.error("slack_access_token_missing")
            raise ValueError("access_token é obrigatório para chamadas à Web API")
        return {"Authorization": f"Bearer {access_token}"}

    def _process_slack_response(
        self,
        method: str,
        response: httpx.Response,
    ) -> dict[str, Any]:
        """Processa response da Web API."""
        try:
            response_data = response.json()
        except json.JSONDecodeError as e:
            logger.error("slack_response_invalid_json", extra={"method": method})
            raise HttpError("Response JSON inválido", status_code=response.status_code) from e

        if not isinstance(response_data, dict):
            raise HttpError("Response JSON inválido", status_code=response.status_code)

        slack_error = parse_slack_error(method, response_data)
        if slack_error is not None:
            log_slack_error(slack_error, response.status_code)
            raise slack_error

        log_success(method, response.status_code)
        return response_data


def create_slack_http_client(
    settings: SlackSettings | None = None,
) -> SlackHttpClient:
    """Factory para criar cliente Slack com config padrão.

    Args:
        settings: SlackSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente HTTP configurado para a Web API.
    """
    # Import local para evitar dependência circular
    from config.settings import get_slack_settings

    slack = settings or get_slack_settings()
    config = HttpClientConfig(
        timeout_seconds=slack.request_timeout_seconds,
        max_retries=slack.max_retries,
    )
    return SlackHttpClient(config=config, api_base_url=slack.api_base_url)

"""Settings específicas do Slack.

Configurações do webhook (Events API), da Web API e do fluxo OAuth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

from app.domain.credentials import BotToken, SigningSecret

SLACK_API_BASE_URL: str = "https://slack.com/api"
SLACK_AUTHORIZE_URL: str = "https://slack.com/oauth/v2/authorize"
DEFAULT_WEBHOOK_PATH: str = "/push"
DEFAULT_OAUTH_SCOPES: tuple[str, ...] = ("channels:history", "chat:write", "commands")
DEFAULT_MENTION_REPLY_TEXT: str = "Oi! Recebi sua menção."
EVENT_HANDLERS: tuple[str, ...] = ("noop", "mention_reply")


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do canal Slack.

    Attributes:
        signing_secret: Secret para validação HMAC dos webhooks (obrigatório)
        bot_token: Token de bot para modo single-tenant (opcional)
        webhook_path: Caminho do endpoint de webhook
        multi_tenant: Resolve credenciais por team_id no CredentialStore
        client_id: Client ID do app (OAuth)
        client_secret: Client secret do app (OAuth)
        oauth_redirect_uri: Redirect URI registrado no app (OAuth)
        oauth_scopes: Escopos solicitados no /oauth/start
        api_base_url: URL base da Web API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em caso de erro transitório
        handler_timeout_seconds: Timeout de execução do handler por evento
        max_body_bytes: Tamanho máximo aceito para o corpo do webhook
        webhook_processing_mode: Modo de execução do handler (async|inline)
        event_handler: Handler padrão dos eventos (noop|mention_reply)
        mention_reply_text: Texto usado pelo MentionReplyHandler
    """

    # Credenciais (carregadas de env)
    signing_secret: SigningSecret = field(default_factory=lambda: SigningSecret(""))
    bot_token: BotToken = field(default_factory=lambda: BotToken(""))

    # Webhook
    webhook_path: str = DEFAULT_WEBHOOK_PATH
    multi_tenant: bool = True
    max_body_bytes: int = 1024 * 1024  # 1MB
    webhook_processing_mode: str = "async"
    handler_timeout_seconds: float = 10.0

    # OAuth
    client_id: str = ""
    client_secret: str = field(default="", repr=False)
    oauth_redirect_uri: str = ""
    oauth_scopes: tuple[str, ...] = DEFAULT_OAUTH_SCOPES

    # Web API
    api_base_url: str = SLACK_API_BASE_URL
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    # Handler padrão
    event_handler: str = "noop"
    mention_reply_text: str = DEFAULT_MENTION_REPLY_TEXT

    @property
    def oauth_enabled(self) -> bool:
        """True se client_id e client_secret estão configurados."""
        return bool(self.client_id and self.client_secret)

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Slack.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.signing_secret:
            errors.append("SLACK_SIGNING_SECRET não configurado")

        if not self.multi_tenant and not self.bot_token:
            errors.append("SLACK_BOT_TOKEN obrigatório quando SLACK_MULTI_TENANT=false")

        if not self.webhook_path.startswith("/"):
            errors.append("SLACK_WEBHOOK_PATH deve começar com '/'")

        if bool(self.client_id) != bool(self.client_secret):
            errors.append("SLACK_CLIENT_ID e SLACK_CLIENT_SECRET devem ser definidos juntos")

        if self.request_timeout_seconds <= 0:
            errors.append("SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.handler_timeout_seconds <= 0:
            errors.append("SLACK_HANDLER_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("SLACK_MAX_RETRIES deve ser >= 0")

        if self.max_body_bytes <= 0:
            errors.append("SLACK_MAX_BODY_BYTES deve ser > 0")

        if self.webhook_processing_mode not in ("async", "inline"):
            errors.append("SLACK_WEBHOOK_PROCESSING_MODE deve ser 'async' ou 'inline'")

        if self.event_handler not in EVENT_HANDLERS:
            errors.append("SLACK_EVENT_HANDLER deve ser 'noop' ou 'mention_reply'")

        return errors


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _parse_scopes(value: str) -> tuple[str, ...]:
    scopes = tuple(scope.strip() for scope in value.split(",") if scope.strip())
    return scopes or DEFAULT_OAUTH_SCOPES


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "").lower()
    default_processing_mode = (
        "inline" if environment in ("development", "dev", "test", "") else "async"
    )
    bot_token = os.getenv("SLACK_BOT_TOKEN", "")
    # Sem bot token, o único modo possível é multi-tenant
    default_multi_tenant = "false" if bot_token else "true"
    return SlackSettings(
        signing_secret=SigningSecret(os.getenv("SLACK_SIGNING_SECRET", "")),
        bot_token=BotToken(bot_token),
        webhook_path=os.getenv("SLACK_WEBHOOK_PATH", DEFAULT_WEBHOOK_PATH),
        multi_tenant=_parse_bool(os.getenv("SLACK_MULTI_TENANT", default_multi_tenant)),
        max_body_bytes=int(os.getenv("SLACK_MAX_BODY_BYTES", str(1024 * 1024))),
        webhook_processing_mode=os.getenv(
            "SLACK_WEBHOOK_PROCESSING_MODE", default_processing_mode
        ).lower(),
        handler_timeout_seconds=float(os.getenv("SLACK_HANDLER_TIMEOUT_SECONDS", "10")),
        client_id=os.getenv("SLACK_CLIENT_ID", ""),
        client_secret=os.getenv("SLACK_CLIENT_SECRET", ""),
        oauth_redirect_uri=os.getenv("SLACK_OAUTH_REDIRECT_URI", ""),
        oauth_scopes=_parse_scopes(os.getenv("SLACK_OAUTH_SCOPES", "")),
        api_base_url=os.getenv("SLACK_API_BASE_URL", SLACK_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("SLACK_MAX_RETRIES", "3")),
        event_handler=os.getenv("SLACK_EVENT_HANDLER", "noop").strip().lower(),
        mention_reply_text=os.getenv("SLACK_MENTION_REPLY_TEXT", DEFAULT_MENTION_REPLY_TEXT),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()

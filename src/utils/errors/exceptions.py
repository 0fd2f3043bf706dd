"""Exceções de domínio do gateway Slack.

Taxonomia:
- AuthError: falhas de autenticação do webhook (sempre 401)
- ParseError: envelope inválido ou incompleto (sempre 400)
- DispatchError: falhas do handler (nunca alteram a resposta HTTP)

Cada exceção carrega um `reason` estável para logs (sem PII, sem segredos).
"""

from __future__ import annotations


class SlackGatewayError(Exception):
    """Base para erros do gateway."""

    reason: str = "gateway_error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.reason)


class AuthError(SlackGatewayError):
    """Base para falhas de autenticação do webhook."""

    reason = "auth_failed"


class BadSignatureError(AuthError):
    """Assinatura HMAC não confere (ou signing secret ausente)."""

    reason = "bad_signature"


class StaleTimestampError(AuthError):
    """Timestamp fora da janela de replay."""

    reason = "stale_timestamp"


class MalformedHeadersError(AuthError):
    """Headers de assinatura ausentes ou timestamp não numérico."""

    reason = "malformed_headers"


class ParseError(SlackGatewayError):
    """Base para falhas de parsing do envelope."""

    reason = "parse_failed"


class InvalidEnvelopeError(ParseError):
    """Corpo não é JSON ou não tem o formato de envelope esperado."""

    reason = "invalid_envelope"


class MissingChallengeError(ParseError):
    """Evento url_verification sem challenge."""

    reason = "missing_challenge"


class MissingFieldError(ParseError):
    """Campo obrigatório ausente no evento interno."""

    reason = "missing_field"

    def __init__(self, field_name: str) -> None:
        super().__init__(f"missing_field:{field_name}")
        self.field_name = field_name


class DispatchError(SlackGatewayError):
    """Base para falhas de despacho (não fatais para o request)."""

    reason = "dispatch_failed"


class HandlerFailedError(DispatchError):
    """Handler levantou exceção ou excedeu o timeout."""

    reason = "handler_failed"


class OAuthExchangeError(SlackGatewayError):
    """Falha na troca do authorization code por token."""

    reason = "oauth_exchange_failed"

"""Erros e helpers de parsing para a Web API do Slack."""

from __future__ import annotations

from typing import Any

# Erros que não se resolvem com retry
PERMANENT_ERRORS = frozenset(
    {
        "invalid_auth",
        "not_authed",
        "account_inactive",
        "token_revoked",
        "token_expired",
        "missing_scope",
        "channel_not_found",
        "not_in_channel",
        "is_archived",
        "msg_too_long",
        "no_text",
        "invalid_blocks",
        "message_not_found",
        "cant_update_message",
        "cant_delete_message",
        "invalid_code",
        "bad_redirect_uri",
        "invalid_client_id",
        "bad_client_secret",
    }
)


class SlackApiError(Exception):
    """Erro retornado pela Web API (`{"ok": false, "error": ...}`)."""

    def __init__(self, method: str, error_code: str, is_permanent: bool) -> None:
        super().__init__(f"Slack API error: {method} ({error_code})")
        self.method = method
        self.error_code = error_code
        self.is_permanent = is_permanent  # True se erro não é retentável


def is_permanent_error(error_code: str) -> bool:
    """Classifica erro como permanente ou transitório.

    Permanentes: autenticação, escopo, canal/mensagem inexistente, payload inválido.
    Transitórios: ratelimited, internal_error, fatal_error e desconhecidos.
    """
    return error_code in PERMANENT_ERRORS


def parse_slack_error(method: str, response_data: dict[str, Any]) -> SlackApiError | None:
    """Extrai erro do response da Web API.

    Args:
        method: Método chamado (ex: "chat.postMessage")
        response_data: Dict do response JSON

    Returns:
        SlackApiError se `ok` for falso, None se sucesso
    """
    if response_data.get("ok") is True:
        return None

    error_code = response_data.get("error")
    if not isinstance(error_code, str) or not error_code:
        error_code = "unknown_error"

    return SlackApiError(
        method=method,
        error_code=error_code,
        is_permanent=is_permanent_error(error_code),
    )

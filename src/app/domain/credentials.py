"""Tipos opacos para segredos e credenciais do Slack.

SigningSecret e BotToken existem para impedir troca acidental
(ex: passar bot token onde se espera signing secret) e para concentrar
o único ponto de conversão para o valor bruto.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SigningSecret:
    """Signing secret usado para autenticar webhooks via HMAC."""

    _value: str = field(repr=False)

    def __repr__(self) -> str:
        return "SigningSecret(***)"

    def __bool__(self) -> bool:
        return bool(self._value)

    def as_key(self) -> bytes:
        """Chave HMAC em bytes (único ponto de conversão)."""
        return self._value.encode("utf-8")


@dataclass(frozen=True, slots=True)
class BotToken:
    """Token de bot (xoxb-...) para chamadas à Web API."""

    _value: str = field(repr=False)

    def __repr__(self) -> str:
        return "BotToken(***)"

    def __bool__(self) -> bool:
        return bool(self._value.strip())

    @property
    def value(self) -> str:
        """Valor bruto, usado apenas no header Authorization."""
        return self._value


@dataclass(frozen=True, slots=True)
class TokenResponse:
    """Credencial de um tenant, obtida no fluxo OAuth.

    Imutável: reautorização substitui a credencial inteira no store.

    Atributos:
        access_token: Token de acesso do bot no workspace
        team_id: ID do workspace
        team_name: Nome do workspace
        bot_user_id: ID do usuário bot instalado
        scope: Escopos concedidos (separados por vírgula)
    """

    access_token: str = field(repr=False)
    team_id: str | None = None
    team_name: str | None = None
    bot_user_id: str | None = None
    scope: str | None = None

    def bot_token(self) -> BotToken:
        """Converte a credencial em BotToken para o MessageClient."""
        return BotToken(self.access_token)

"""Eventos de domínio derivados dos webhooks do Slack.

Conjunto fechado de variantes. Todo envelope parseado com sucesso vira
exatamente um destes eventos; subtipos desconhecidos viram OtherEvent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class UrlVerification:
    """Verificação de endpoint: o challenge deve ser ecoado como texto puro."""

    challenge: str

    kind: Literal["url_verification"] = "url_verification"


@dataclass(frozen=True, slots=True)
class AppMention:
    """Menção ao app em um canal.

    Atributos:
        channel: ID do canal
        ts: Timestamp da mensagem (usado como thread_ts na resposta)
        text: Texto da menção (vazio se ausente)
        team_id: ID do workspace (tenant), quando informado
        user: ID do autor, quando informado
        thread_ts: Thread de origem, quando a menção ocorreu em thread
        event_id: ID do callback (apenas para correlação de logs)
    """

    channel: str
    ts: str
    text: str = ""
    team_id: str | None = None
    user: str | None = None
    thread_ts: str | None = None
    event_id: str | None = None

    kind: Literal["app_mention"] = "app_mention"


@dataclass(frozen=True, slots=True)
class Message:
    """Mensagem postada em canal ou DM visível ao app."""

    channel: str
    text: str = ""
    team_id: str | None = None
    user: str | None = None
    ts: str | None = None
    thread_ts: str | None = None
    event_id: str | None = None

    kind: Literal["message"] = "message"


@dataclass(frozen=True, slots=True)
class OtherEvent:
    """Catch-all para tipos ainda não suportados (forward-compatible)."""

    event_type: str | None = None

    kind: Literal["other"] = "other"


# Alias para o nome usado na documentação de integração
Other = OtherEvent

DomainEvent = UrlVerification | AppMention | Message | OtherEvent

# Eventos que resultam em invocação de handler
CALLBACK_EVENT_TYPES: tuple[type, ...] = (AppMention, Message)

"""Protocolos de autenticação e normalização inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.events import DomainEvent


class RequestAuthenticatorProtocol(Protocol):
    """Autentica o request bruto do webhook.

    Lança AuthError (utils.errors) quando headers, janela de replay ou
    assinatura forem inválidos.
    """

    def authenticate(
        self,
        raw_body: bytes,
        headers: Mapping[str, str],
        now: int | float,
    ) -> None: ...


class EventNormalizerProtocol(Protocol):
    """Classifica o envelope JSON em um DomainEvent (ou lança ParseError)."""

    def normalize(self, raw_json: bytes | str) -> DomainEvent: ...

"""Protocolo da troca de código OAuth por token."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.credentials import TokenResponse


class OAuthExchangeProtocol(Protocol):
    """Troca o `code` do redirect OAuth por (team_id, TokenResponse)."""

    async def exchange_code(self, code: str) -> tuple[str, TokenResponse]: ...

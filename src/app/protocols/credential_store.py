"""Protocolo do store de credenciais por workspace.

Interface leve (ABC) dependida pelo dispatcher e pelo callback OAuth.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.credentials import TokenResponse


class CredentialStoreProtocol(ABC):
    """Contrato assíncrono para credenciais OAuth indexadas por team_id.

    Métodos canônicos:
    - get(tenant_id) -> TokenResponse | None
    - put(tenant_id, credential) -> None (substitui a entrada inteira)
    """

    @abstractmethod
    async def get(self, tenant_id: str) -> TokenResponse | None:
        """Busca a credencial do tenant.

        Args:
            tenant_id: team_id do workspace Slack

        Returns:
            TokenResponse gravado ou None se o workspace não instalou o app.
        """

    @abstractmethod
    async def put(self, tenant_id: str, credential: TokenResponse) -> None:
        """Grava a credencial do tenant, substituindo a anterior."""

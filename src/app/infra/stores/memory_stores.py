"""Store de credenciais em memória.

Mapa team_id -> TokenResponse protegido por um único lock leitor-escritor.
Sem persistência entre reinícios e sem remoção de entradas.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.stores.rwlock import AsyncReadWriteLock
from app.protocols.credential_store import CredentialStoreProtocol

if TYPE_CHECKING:
    from app.domain.credentials import TokenResponse

logger = logging.getLogger(__name__)


class MemoryCredentialStore(CredentialStoreProtocol):
    """Credenciais OAuth por workspace, em memória."""

    def __init__(self) -> None:
        self._credentials: dict[str, TokenResponse] = {}
        self._lock = AsyncReadWriteLock()

    async def get(self, tenant_id: str) -> TokenResponse | None:
        """Retorna a credencial do tenant (ou None)."""
        async with self._lock.read():
            return self._credentials.get(tenant_id)

    async def put(self, tenant_id: str, credential: TokenResponse) -> None:
        """Grava (ou substitui) a credencial do tenant."""
        async with self._lock.write():
            replaced = tenant_id in self._credentials
            self._credentials[tenant_id] = credential
        logger.info(
            "credential_stored",
            extra={"team_id": tenant_id, "replaced": replaced},
        )

    async def tenant_ids(self) -> list[str]:
        """Snapshot ordenado dos tenants com credencial."""
        async with self._lock.read():
            return sorted(self._credentials)

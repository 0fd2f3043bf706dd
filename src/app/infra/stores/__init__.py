"""Stores: implementações concretas de armazenamento.

Módulos disponíveis:
    - memory_stores: CredentialStore em memória (OAuth por workspace)
    - rwlock: lock leitor-escritor para asyncio
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryCredentialStore
from app.infra.stores.rwlock import AsyncReadWriteLock

__all__ = [
    "AsyncReadWriteLock",
    "MemoryCredentialStore",
]

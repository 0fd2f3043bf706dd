"""Lock leitor-escritor cooperativo para asyncio.

Vários leitores simultâneos; escritor exclusivo. Escritores têm
preferência: um escritor aguardando bloqueia novos leitores, evitando
starvation quando há leitura contínua (um get por evento de webhook).
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class AsyncReadWriteLock:
    """Reader-writer lock baseado em asyncio.Condition."""

    def __init__(self) -> None:
        self._condition: asyncio.Condition | None = None
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    @property
    def _cond(self) -> asyncio.Condition:
        """Cria a Condition no primeiro uso (dentro do event loop ativo)."""
        if self._condition is None:
            self._condition = asyncio.Condition()
        return self._condition

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Adquire o lock em modo leitura."""
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer_active and self._writers_waiting == 0
            )
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Adquire o lock em modo escrita (exclusivo)."""
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer_active and self._readers == 0
                )
            finally:
                self._writers_waiting -= 1
            self._writer_active = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer_active = False
                self._cond.notify_all()

    @property
    def readers(self) -> int:
        """Quantidade de leitores ativos (para testes e diagnóstico)."""
        return self._readers

    @property
    def writer_active(self) -> bool:
        return self._writer_active

"""Controle de tasks assíncronas para o handler do webhook Slack."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENT_TASKS = 100


class ProcessingTaskRunner:
    """Agenda handlers em background com limite de concorrência.

    Uma instância por app; o lifespan chama drain() no shutdown.
    """

    def __init__(self, max_concurrent: int = DEFAULT_MAX_CONCURRENT_TASKS) -> None:
        if max_concurrent <= 0:
            raise ValueError("max_concurrent deve ser > 0")
        self._max_concurrent = max_concurrent
        self._semaphore: asyncio.Semaphore | None = None
        self._active_tasks: set[asyncio.Task[Any]] = set()

    @property
    def active_count(self) -> int:
        return len(self._active_tasks)

    def schedule(self, *, coroutine: Awaitable[Any], correlation_id: str = "") -> int:
        """Agenda a coroutine; o contexto (correlation_id) é herdado pela task."""
        task = asyncio.create_task(self._run_with_limit(coroutine))
        self._active_tasks.add(task)
        task.add_done_callback(self._on_task_done)
        logger.info(
            "webhook_processing_scheduled",
            extra={
                "channel": "slack",
                "correlation_id": correlation_id,
                "mode": "async",
                "active_tasks": len(self._active_tasks),
            },
        )
        return len(self._active_tasks)

    async def _run_with_limit(self, coroutine: Awaitable[Any]) -> None:
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self._max_concurrent)
        async with self._semaphore:
            await coroutine

    def _on_task_done(self, task: asyncio.Task[Any]) -> None:
        self._active_tasks.discard(task)
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
            if exc is not None:
                logger.error(
                    "webhook_processing_task_failed",
                    extra={
                        "channel": "slack",
                        "error_type": type(exc).__name__,
                        "active_tasks": len(self._active_tasks),
                    },
                )

    async def drain(self, timeout_seconds: float = 30.0) -> int:
        """Aguarda tasks pendentes no shutdown; cancela o que passar do timeout.

        Returns:
            Quantidade de tasks canceladas.
        """
        if not self._active_tasks:
            return 0

        pending_now = list(self._active_tasks)
        logger.info(
            "webhook_processing_shutdown_wait",
            extra={
                "channel": "slack",
                "pending_tasks": len(pending_now),
                "timeout_seconds": timeout_seconds,
            },
        )
        _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
        if not pending:
            return 0

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning(
            "webhook_processing_shutdown_cancelled",
            extra={"channel": "slack", "cancelled_tasks": len(pending)},
        )
        return len(pending)

"""Testes para o runner de tasks assíncronas do webhook."""

from __future__ import annotations

import asyncio
import logging

import pytest

from api.routes.slack.webhook_runtime_tasks import ProcessingTaskRunner


async def _wait_until_empty(runner: ProcessingTaskRunner, timeout: float = 1.0) -> None:
    start = asyncio.get_running_loop().time()
    while runner.active_count:
        if asyncio.get_running_loop().time() - start > timeout:
            break
        await asyncio.sleep(0.01)


@pytest.mark.asyncio
async def test_schedule_runs_coroutine_and_cleans_active_set() -> None:
    runner = ProcessingTaskRunner()
    event = asyncio.Event()

    async def _work() -> None:
        event.set()

    active = runner.schedule(correlation_id="corr-1", coroutine=_work())

    assert active == 1
    await asyncio.wait_for(event.wait(), timeout=1.0)
    await _wait_until_empty(runner)
    assert runner.active_count == 0


@pytest.mark.asyncio
async def test_schedule_logs_failure(caplog: pytest.LogCaptureFixture) -> None:
    runner = ProcessingTaskRunner()

    async def _boom() -> None:
        raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR):
        runner.schedule(correlation_id="corr-2", coroutine=_boom())
        await _wait_until_empty(runner)

    assert any(r.getMessage() == "webhook_processing_task_failed" for r in caplog.records)


@pytest.mark.asyncio
async def test_concurrency_is_bounded() -> None:
    runner = ProcessingTaskRunner(max_concurrent=2)
    running = 0
    peak = 0
    release = asyncio.Event()

    async def _work() -> None:
        nonlocal running, peak
        running += 1
        peak = max(peak, running)
        await release.wait()
        running -= 1

    for _ in range(5):
        runner.schedule(coroutine=_work())
    await asyncio.sleep(0.01)

    assert peak == 2
    release.set()
    await runner.drain(timeout_seconds=1.0)
    assert runner.active_count == 0


@pytest.mark.asyncio
async def test_drain_cancels_tasks_after_timeout() -> None:
    runner = ProcessingTaskRunner()

    async def _forever() -> None:
        await asyncio.sleep(10)

    runner.schedule(coroutine=_forever())

    cancelled = await runner.drain(timeout_seconds=0.01)

    assert cancelled == 1


@pytest.mark.asyncio
async def test_drain_without_tasks_is_noop() -> None:
    assert await ProcessingTaskRunner().drain() == 0


def test_rejects_invalid_limit() -> None:
    with pytest.raises(ValueError):
        ProcessingTaskRunner(max_concurrent=0)

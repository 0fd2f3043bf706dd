"""Testes do lock leitor-escritor para asyncio."""

from __future__ import annotations

import asyncio

import pytest

from app.infra.stores.rwlock import AsyncReadWriteLock


@pytest.mark.asyncio
async def test_multiple_readers_hold_lock_together() -> None:
    lock = AsyncReadWriteLock()
    both_inside = asyncio.Event()
    inside = 0

    async def reader() -> None:
        nonlocal inside
        async with lock.read():
            inside += 1
            if inside == 2:
                both_inside.set()
            await asyncio.wait_for(both_inside.wait(), timeout=1.0)

    await asyncio.gather(reader(), reader())

    assert lock.readers == 0


@pytest.mark.asyncio
async def test_writer_waits_for_active_reader() -> None:
    lock = AsyncReadWriteLock()
    order: list[str] = []
    release_reader = asyncio.Event()

    async def reader() -> None:
        async with lock.read():
            order.append("read_start")
            await release_reader.wait()
            order.append("read_end")

    async def writer() -> None:
        async with lock.write():
            order.append("write")

    reader_task = asyncio.create_task(reader())
    await asyncio.sleep(0)
    writer_task = asyncio.create_task(writer())
    await asyncio.sleep(0.01)

    assert order == ["read_start"]
    release_reader.set()
    await asyncio.gather(reader_task, writer_task)

    assert order == ["read_start", "read_end", "write"]


@pytest.mark.asyncio
async def test_waiting_writer_blocks_new_readers() -> None:
    lock = AsyncReadWriteLock()
    order: list[str] = []
    release_first = asyncio.Event()

    async def first_reader() -> None:
        async with lock.read():
            await release_first.wait()
            order.append("first_read")

    async def writer() -> None:
        async with lock.write():
            order.append("write")

    async def late_reader() -> None:
        async with lock.read():
            order.append("late_read")

    tasks = [asyncio.create_task(first_reader())]
    await asyncio.sleep(0)
    tasks.append(asyncio.create_task(writer()))
    await asyncio.sleep(0)
    tasks.append(asyncio.create_task(late_reader()))
    await asyncio.sleep(0.01)

    release_first.set()
    await asyncio.gather(*tasks)

    assert order == ["first_read", "write", "late_read"]


@pytest.mark.asyncio
async def test_writer_releases_on_exception() -> None:
    lock = AsyncReadWriteLock()

    with pytest.raises(RuntimeError):
        async with lock.write():
            raise RuntimeError("falha")

    assert lock.writer_active is False
    async with lock.read():
        assert lock.readers == 1

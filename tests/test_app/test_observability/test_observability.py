"""Testes de correlation_id e métricas via log."""

from __future__ import annotations

import asyncio
import logging

import pytest

from app.observability import (
    get_correlation_id,
    record_handler_failure,
    record_latency,
    record_webhook_outcome,
    reset_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    def test_set_and_reset(self) -> None:
        previous = get_correlation_id()

        token = set_correlation_id("abc")
        assert get_correlation_id() == "abc"

        reset_correlation_id(token)
        assert get_correlation_id() == previous

    def test_generates_uuid_when_empty(self) -> None:
        token = set_correlation_id(None)
        try:
            assert len(get_correlation_id()) == 36
        finally:
            reset_correlation_id(token)

    async def test_tasks_inherit_context(self) -> None:
        token = set_correlation_id("parent")
        try:
            child = asyncio.create_task(self._read())
            assert await child == "parent"
        finally:
            reset_correlation_id(token)

    @staticmethod
    async def _read() -> str:
        return get_correlation_id()


class TestMetrics:
    def test_record_latency(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_latency("webhook", "dispatch", 12.3456, correlation_id="c-1")

        record = caplog.records[-1]
        assert record.getMessage() == "metric_latency"
        assert record.latency_ms == 12.35
        assert record.correlation_id == "c-1"

    def test_record_webhook_outcome(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_webhook_outcome(401, "bad_signature")

        record = caplog.records[-1]
        assert record.status_code == 401
        assert record.outcome == "bad_signature"
        assert record.event_kind is None

    def test_record_handler_failure_is_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_handler_failure("timeout", "app_mention", team_id="T1")

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.reason == "timeout"
        assert record.team_id == "T1"

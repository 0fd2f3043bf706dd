"""Testes do endpoint de health."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/health",
        "raw_path": b"/health",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_reports_service_name() -> None:
    request = _build_request_with_state(SimpleNamespace(service_name="slack_gateway"))

    response = await health_check(request)

    assert response.status == "healthy"
    assert response.service == "slack_gateway"
    assert response.timestamp
    assert response.processing_mode is None
    assert response.active_tasks == 0


@pytest.mark.asyncio
async def test_health_reports_runtime_state() -> None:
    state = SimpleNamespace(
        service_name="slack_gateway",
        slack_dispatcher=SimpleNamespace(processing_mode="async"),
        task_runner=SimpleNamespace(active_count=3),
    )

    response = await health_check(_build_request_with_state(state))

    assert response.processing_mode == "async"
    assert response.active_tasks == 3

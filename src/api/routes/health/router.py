"""Liveness do gateway (GET /health)."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Estado do processo; não consulta o Slack."""

    status: str
    service: str
    timestamp: str
    version: str = "0.1.0"
    processing_mode: str | None = None
    active_tasks: int = 0


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    state = request.app.state
    dispatcher = getattr(state, "slack_dispatcher", None)
    task_runner = getattr(state, "task_runner", None)
    return HealthResponse(
        status="healthy",
        service=getattr(state, "service_name", "slack-gateway"),
        timestamp=datetime.now(UTC).isoformat(),
        processing_mode=getattr(dispatcher, "processing_mode", None),
        active_tasks=task_runner.active_count if task_runner is not None else 0,
    )

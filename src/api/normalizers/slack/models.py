"""Schemas do envelope de webhook do Slack (Events API).

Apenas os campos consumidos são declarados; o resto é ignorado para
não quebrar quando o Slack adiciona campos novos.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SlackEnvelopeHeader(BaseModel):
    """Discriminador de topo do envelope."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(..., description="url_verification | event_callback | ...")


class UrlVerificationEnvelope(BaseModel):
    """Envelope de verificação de endpoint."""

    model_config = ConfigDict(extra="ignore")

    type: str
    challenge: str | None = None


class EventCallbackEnvelope(BaseModel):
    """Envelope de callback; o evento interno é validado por tipo."""

    model_config = ConfigDict(extra="ignore")

    type: str
    team_id: str | None = None
    api_app_id: str | None = None
    event_id: str | None = None
    event_time: float | None = None
    event: dict[str, Any]


class SlackMessageEvent(BaseModel):
    """Campos comuns a app_mention e message."""

    model_config = ConfigDict(extra="ignore")

    type: str
    channel: str | None = None
    ts: str | None = None
    text: str | None = None
    user: str | None = None
    team: str | None = None
    thread_ts: str | None = None

"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class SlackHttpClientProtocol(Protocol):
    """Contrato mínimo para cliente HTTP da Slack Web API."""

    async def call_json(
        self,
        method: str,
        access_token: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]: ...

    async def call_form(
        self,
        method: str,
        data: dict[str, Any],
        access_token: str | None = None,
    ) -> dict[str, Any]: ...

    async def upload_bytes(self, upload_url: str, content: bytes) -> None: ...

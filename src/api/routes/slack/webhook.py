"""Endpoint de webhook do Slack (Events API).

Endpoint:
- POST <SLACK_WEBHOOK_PATH> (padrão /push)

Fluxo:
1. Limite de tamanho do corpo (413 antes de qualquer outro trabalho)
2. Assinatura v0 + janela de replay (401)
3. Classificação do envelope (400 se inválido)
4. url_verification ecoa o challenge; eventos de mensagem vão ao handler

Falhas do handler não alteram o 200, para evitar retry do Slack.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status

from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from app.observability.correlation import CORRELATION_ID_HEADER
from config.settings import DEFAULT_WEBHOOK_PATH

logger = logging.getLogger(__name__)


def create_webhook_router(path: str = DEFAULT_WEBHOOK_PATH) -> APIRouter:
    """Cria router com o POST do webhook no caminho configurado."""
    router = APIRouter()
    router.add_api_route(
        path,
        receive_webhook,
        methods=["POST"],
        response_model=None,
        name="slack_webhook",
    )
    return router


async def receive_webhook(request: Request) -> Response:
    """Recebimento de eventos do Slack.

    O dispatcher (app.state.slack_dispatcher) decide o status; aqui só
    há leitura do corpo, limite de tamanho e correlation_id.
    """
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        max_body_bytes = request.app.state.slack_settings.max_body_bytes
        raw_body = await _read_body_limited(request, max_body_bytes)
        if raw_body is None:
            logger.warning(
                "webhook_body_too_large",
                extra={
                    "channel": "slack",
                    "correlation_id": get_correlation_id(),
                    "max_body_bytes": max_body_bytes,
                },
            )
            return Response(
                content="Payload too large",
                media_type="text/plain",
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            )

        logger.info(
            "webhook_received",
            extra={
                "channel": "slack",
                "correlation_id": get_correlation_id(),
                "payload_size": len(raw_body),
            },
        )

        dispatcher = request.app.state.slack_dispatcher
        result = await dispatcher.dispatch(raw_body, request.headers)
        return Response(
            content=result.content,
            media_type=result.media_type,
            status_code=result.status_code,
        )
    finally:
        reset_correlation_id(token)


async def _read_body_limited(request: Request, max_bytes: int) -> bytes | None:
    """Lê o corpo em streaming; None se exceder max_bytes."""
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > max_bytes:
        return None

    chunks: list[bytes] = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > max_bytes:
            return None
        chunks.append(chunk)
    return b"".join(chunks)

"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas depois
(Cloud Logging, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de processamento do webhook por resultado
- Outcome: contador de respostas do webhook por status/motivo
- Handler failure: contador de falhas de handler (respondidas com 200)

Uso:
    from app.observability.metrics import record_latency, record_webhook_outcome

    start = time.perf_counter()
    # ... despacho ...
    record_latency("webhook", "dispatch", (time.perf_counter() - start) * 1000)
    record_webhook_outcome(200, "handled", event_kind="app_mention")
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "webhook", "handler")
        operation: Nome da operação (ex: "dispatch", "handle_event")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_webhook_outcome(
    status_code: int,
    outcome: str,
    event_kind: str | None = None,
) -> None:
    """Registra o resultado de um request de webhook.

    Args:
        status_code: Status HTTP devolvido ao Slack
        outcome: Motivo estável (ex: "bad_signature", "handled", "no_credential")
        event_kind: Tipo do evento de domínio, quando classificado
    """
    logger.info(
        "metric_webhook_outcome",
        extra={
            "metric_type": "counter",
            "component": "webhook",
            "status_code": status_code,
            "outcome": outcome,
            "event_kind": event_kind,
        },
    )


def record_handler_failure(
    reason: str,
    event_kind: str,
    team_id: str | None = None,
) -> None:
    """Registra falha de handler.

    O webhook continua respondendo 200 para evitar retries do Slack;
    este contador é o sinal de observabilidade dessas falhas.

    Args:
        reason: "exception" ou "timeout"
        event_kind: Tipo do evento (app_mention, message)
        team_id: Tenant afetado
    """
    logger.warning(
        "metric_handler_failure",
        extra={
            "metric_type": "counter",
            "component": "handler",
            "reason": reason,
            "event_kind": event_kind,
            "team_id": team_id,
        },
    )

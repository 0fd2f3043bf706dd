"""Observabilidade: logs estruturados e métricas.

Re-exporta funções de correlation_id e métricas para uso em toda a aplicação.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_webhook_outcome
"""

from app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_handler_failure,
    record_latency,
    record_webhook_outcome,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "record_handler_failure",
    "record_latency",
    "record_webhook_outcome",
    "reset_correlation_id",
    "set_correlation_id",
]

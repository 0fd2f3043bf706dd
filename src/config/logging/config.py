"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="slack_gateway")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("webhook_received", extra={"payload_size": 42})

Formato: JSON por padrão; `LOG_FORMAT=text` (ou json_output=False)
troca para linhas legíveis no desenvolvimento local.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SlackTokenRedactionFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "slack_gateway"

# httpx loga cada request em INFO/DEBUG (URL inclui o método da Web API)
_QUIET_LOGGERS = ("httpx", "httpcore")


def _wants_json(json_output: bool | None) -> bool:
    if json_output is not None:
        return json_output
    return os.getenv("LOG_FORMAT", "json").strip().lower() != "text"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    json_output: bool | None = True,
) -> logging.Handler:
    """Instala um único handler de stream no root logger.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço injetado em cada record.
        correlation_id_getter: Retorna o correlation_id do contexto atual.
        json_output: True/False força o formato; None consulta LOG_FORMAT.

    Returns:
        O handler instalado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(
        create_json_formatter() if _wants_json(json_output) else create_text_formatter()
    )
    # Contexto antes da redação
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SlackTokenRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    quiet_level = max(logging.WARNING, root.level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
    return handler


def get_logger(name: str) -> logging.Logger:
    """Retorna logger do módulo (service e correlation_id vêm do handler)."""
    return logging.getLogger(name)

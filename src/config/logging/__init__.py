"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="slack_gateway")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("webhook_received", extra={"payload_size": 42})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Nunca logar signing secret, tokens, corpo do webhook ou texto de mensagens.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, SlackTokenRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "SlackTokenRedactionFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
]

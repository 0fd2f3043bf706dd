"""Filters de logging para injeção de contexto e redação de segredos.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: slack_gateway)

Tokens do Slack (xoxb-, xoxp-, xoxa-, xapp-) nunca devem chegar ao output.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

SLACK_TOKEN_PATTERN = re.compile(r"\b(xox[abposr]|xapp)-[A-Za-z0-9-]+")
REDACTED = "[REDACTED]"

# Atributos nativos de LogRecord (nunca reescritos pela redação de extras)
_STANDARD_RECORD_FIELDS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None))
) | {"message", "asctime"}

_TRACEBACK_FORMATTER = logging.Formatter()


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SlackTokenRedactionFilter(logging.Filter):
    """Substitui tokens do Slack por [REDACTED].

    Cobre a mensagem formatada, os campos string passados via `extra`
    (ex: `error` com o texto de uma exceção de terceiros) e o traceback
    de `exc_info`.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = SLACK_TOKEN_PATTERN.sub(REDACTED, message)
        if redacted != message:
            record.msg = redacted
            record.args = None

        self._redact_traceback(record)

        for key, value in list(vars(record).items()):
            if key in _STANDARD_RECORD_FIELDS or not isinstance(value, str):
                continue
            if SLACK_TOKEN_PATTERN.search(value):
                setattr(record, key, SLACK_TOKEN_PATTERN.sub(REDACTED, value))
        return True

    @staticmethod
    def _redact_traceback(record: logging.LogRecord) -> None:
        """Pré-renderiza o traceback em exc_text quando ele contém token.

        exc_info é descartado nesse caso: formatters (texto e JSON) usam
        exc_text e não voltam a formatar a exceção original.
        """
        if record.exc_info and not record.exc_text:
            record.exc_text = _TRACEBACK_FORMATTER.formatException(record.exc_info)
        if record.exc_text and SLACK_TOKEN_PATTERN.search(record.exc_text):
            record.exc_text = SLACK_TOKEN_PATTERN.sub(REDACTED, record.exc_text)
            record.exc_info = None

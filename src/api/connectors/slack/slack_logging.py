"""Helpers de logging para a Web API do Slack (sem tokens nem texto)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .slack_errors import SlackApiError

logger = logging.getLogger(__name__)


def log_slack_error(slack_error: SlackApiError, status_code: int) -> None:
    """Loga erro da Slack sem expor dados sensíveis."""
    logger.warning(
        "slack_api_error",
        extra={
            "method": slack_error.method,
            "status_code": status_code,
            "error_code": slack_error.error_code,
            "is_permanent": slack_error.is_permanent,
        },
    )


def log_success(method: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "slack_api_call_succeeded",
        extra={
            "method": method,
            "status_code": status_code,
        },
    )

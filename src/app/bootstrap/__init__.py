"""Bootstrap da aplicação: logging, validação de settings e wiring.

Composition root do gateway. Único pacote (junto de app.app) que conhece
implementações concretas de `api`; o resto de `app` depende só de protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
import os

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_slack_settings

SERVICE_NAME = "slack_gateway"
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = frozenset({"staging", "production"})

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging do serviço (nível via LOG_LEVEL, formato via LOG_FORMAT)."""
    configure_logging(
        level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        json_output=None,
    )


def initialize_test_app() -> None:
    """Logging para testes: DEBUG, texto."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
        json_output=False,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em staging/production um erro impede o boot (RuntimeError); em
    development apenas registra o alerta, permitindo rodar sem secrets.
    """
    base = get_base_settings()
    slack = get_slack_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors += [f"slack: {error}" for error in slack.validate()]

    context = {
        "component": "bootstrap",
        "environment": base.environment,
        "multi_tenant": slack.multi_tenant,
        "oauth_enabled": slack.oauth_enabled,
        "processing_mode": slack.webhook_processing_mode,
    }
    if not errors:
        logger.info("settings_validated", extra={**context, "result": "ok"})
        return

    logger.warning(
        "settings_validation_failed",
        extra={**context, "result": "failed", "error_count": len(errors), "errors": errors},
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")

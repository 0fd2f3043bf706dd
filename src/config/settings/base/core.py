"""Settings comuns do serviço (ambiente, nome, logging)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENV_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}
LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base.

    Attributes:
        environment: development|staging|production
        service_name: Nome exposto no /health
        debug: Modo debug
        log_level: Nível de log
        log_format: json (padrão) ou text
    """

    environment: Environment = "development"
    service_name: str = "slack-gateway"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Lista de erros (vazia = OK)."""
        errors: list[str] = []
        if self.environment not in ("development", "staging", "production"):
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_format not in LOG_FORMATS:
            errors.append("LOG_FORMAT deve ser 'json' ou 'text'")
        if self.is_production and self.debug:
            errors.append("DEBUG não pode estar ativo em production")
        return errors


def parse_environment(env_str: str) -> Environment:
    """Normaliza o valor de ENVIRONMENT; desconhecido vira development."""
    return _ENV_ALIASES.get(env_str.strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "slack-gateway"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_format=os.getenv("LOG_FORMAT", "json").strip().lower(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()

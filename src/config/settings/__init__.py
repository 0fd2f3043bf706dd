"""Agregador de settings do gateway Slack.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
    parse_environment,
)

# Channel-specific settings
from config.settings.slack import (
    DEFAULT_OAUTH_SCOPES,
    DEFAULT_WEBHOOK_PATH,
    SLACK_API_BASE_URL,
    SLACK_AUTHORIZE_URL,
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    # Constants
    "DEFAULT_OAUTH_SCOPES",
    "DEFAULT_WEBHOOK_PATH",
    "SLACK_API_BASE_URL",
    "SLACK_AUTHORIZE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "SlackSettings",
    "get_base_settings",
    "get_slack_settings",
    "parse_environment",
]

"""Conector Slack - adapter de borda para a Web API e webhooks.

Este módulo é o único ponto de IO para o canal Slack.
Responsabilidades:
- Webhook (assinatura v0, janela de replay)
- HTTP client para a Web API
- Erros e logging da Web API
"""

from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import SlackHttpClient, create_slack_http_client
from .signature import SignedRequest, compute_signature, verify
from .slack_errors import SlackApiError, is_permanent_error, parse_slack_error

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "SignedRequest",
    "SlackApiError",
    "SlackHttpClient",
    "compute_signature",
    "create_slack_http_client",
    "is_permanent_error",
    "parse_slack_error",
    "verify",
]

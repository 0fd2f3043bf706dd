"""Webhook Slack: assinatura, janela de replay e leitura de headers."""

from ..signature import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    SignedRequest,
    compute_signature,
    verify,
)
from .receive import authenticate_webhook_request, get_header

__all__ = [
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
    "SignedRequest",
    "authenticate_webhook_request",
    "compute_signature",
    "get_header",
    "verify",
]

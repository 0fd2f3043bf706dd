"""Normalizers por canal: conversão de payloads externos para eventos internos.

Estrutura:
- slack/: envelopes da Slack Events API

Cada canal tem seu próprio normalizer, mantendo SRP.
"""

from .slack import normalize, normalize_payload

__all__ = [
    "normalize",
    "normalize_payload",
]

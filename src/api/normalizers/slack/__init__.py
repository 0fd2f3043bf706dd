"""Normalizer Slack: classificação de envelopes da Events API.

Tipos suportados: url_verification, event_callback (app_mention, message).
Demais tipos viram OtherEvent.
"""

from .normalizer import normalize, normalize_payload

__all__ = [
    "normalize",
    "normalize_payload",
]

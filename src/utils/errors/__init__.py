"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthError,
    BadSignatureError,
    DispatchError,
    HandlerFailedError,
    InvalidEnvelopeError,
    MalformedHeadersError,
    MissingChallengeError,
    MissingFieldError,
    OAuthExchangeError,
    ParseError,
    SlackGatewayError,
    StaleTimestampError,
)

__all__ = [
    "AuthError",
    "BadSignatureError",
    "DispatchError",
    "HandlerFailedError",
    "InvalidEnvelopeError",
    "MalformedHeadersError",
    "MissingChallengeError",
    "MissingFieldError",
    "OAuthExchangeError",
    "ParseError",
    "SlackGatewayError",
    "StaleTimestampError",
]

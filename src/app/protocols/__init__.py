"""Protocolos e contratos do core da aplicação."""

from .credential_store import CredentialStoreProtocol
from .event_handler import EventHandlerProtocol
from .http_client import SlackHttpClientProtocol
from .message_client import BlockProtocol, MessageClientFactory, MessageClientProtocol
from .normalizer import EventNormalizerProtocol, RequestAuthenticatorProtocol
from .oauth import OAuthExchangeProtocol

__all__ = [
    "BlockProtocol",
    "CredentialStoreProtocol",
    "EventHandlerProtocol",
    "EventNormalizerProtocol",
    "MessageClientFactory",
    "MessageClientProtocol",
    "OAuthExchangeProtocol",
    "RequestAuthenticatorProtocol",
    "SlackHttpClientProtocol",
]

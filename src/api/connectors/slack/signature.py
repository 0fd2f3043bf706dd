"""Validação de assinatura HMAC-SHA256 dos webhooks do Slack.

Esquema v0:
    base = "v0:" + timestamp + ":" + corpo bruto
    assinatura = "v0=" + hex(HMAC-SHA256(signing_secret, base))

Função pura: o relógio (`now`) é sempre informado pelo chamador.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

from utils.errors import BadSignatureError, MalformedHeadersError, StaleTimestampError

if TYPE_CHECKING:
    from app.domain.credentials import SigningSecret

SIGNATURE_HEADER = "X-Slack-Signature"
TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"
SIGNATURE_VERSION = "v0"

# Janela de replay em segundos (5 minutos)
REPLAY_WINDOW_SECONDS = 300

# Epoch em segundos cabe folgado em 20 dígitos
MAX_TIMESTAMP_DIGITS = 20


@dataclass(frozen=True, slots=True)
class SignedRequest:
    """Request assinado, derivado dos headers (efêmero)."""

    raw_body: bytes
    timestamp: int
    signature: str


def compute_signature(secret: SigningSecret, timestamp: str | int, raw_body: bytes) -> str:
    """Calcula a assinatura v0 esperada para o corpo e timestamp."""
    base = f"{SIGNATURE_VERSION}:{timestamp}:".encode() + raw_body
    digest = hmac.new(secret.as_key(), base, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_VERSION}={digest}"


def parse_signed_request(
    signature_header: str | None,
    timestamp_header: str | None,
    raw_body: bytes,
) -> SignedRequest:
    """Valida presença/formato dos headers e monta o SignedRequest.

    Raises:
        MalformedHeadersError: Header ausente, vazio ou timestamp não numérico
    """
    if not signature_header or not timestamp_header:
        raise MalformedHeadersError("missing_signature_headers")

    timestamp_str = timestamp_header.strip()
    if (
        len(timestamp_str) > MAX_TIMESTAMP_DIGITS
        or not timestamp_str.isascii()
        or not timestamp_str.isdigit()
    ):
        raise MalformedHeadersError("timestamp_not_numeric")

    return SignedRequest(
        raw_body=raw_body,
        timestamp=int(timestamp_str),
        signature=signature_header.strip(),
    )


def verify(
    secret: SigningSecret,
    signature_header: str | None,
    timestamp_header: str | None,
    raw_body: bytes,
    now: int | float,
) -> SignedRequest:
    """Verifica assinatura e janela de replay de um webhook.

    Args:
        secret: Signing secret do app
        signature_header: Valor de X-Slack-Signature
        timestamp_header: Valor de X-Slack-Request-Timestamp
        raw_body: Corpo bruto exatamente como recebido
        now: Epoch atual em segundos (fornecido pelo chamador)

    Raises:
        MalformedHeadersError: Headers ausentes ou timestamp inválido
        StaleTimestampError: |now - timestamp| > 300s
        BadSignatureError: Assinatura não confere ou secret vazio

    Returns:
        SignedRequest validado
    """
    signed = parse_signed_request(signature_header, timestamp_header, raw_body)

    if abs(int(now) - signed.timestamp) > REPLAY_WINDOW_SECONDS:
        raise StaleTimestampError("timestamp_outside_replay_window")

    if not secret:
        raise BadSignatureError("missing_signing_secret")

    # Base string usa o header exatamente como recebido
    expected = compute_signature(secret, timestamp_header.strip(), signed.raw_body)
    if not hmac.compare_digest(expected.encode(), signed.signature.encode()):
        raise BadSignatureError("signature_mismatch")

    return signed

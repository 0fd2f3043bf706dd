"""Autenticação inicial do webhook a partir dos headers (sem PII)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..signature import SIGNATURE_HEADER, TIMESTAMP_HEADER, SignedRequest, verify

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.credentials import SigningSecret


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Lê header de forma case-insensitive (dict simples ou Headers do Starlette)."""
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    return value


def authenticate_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: SigningSecret,
    now: int | float,
) -> SignedRequest:
    """Extrai headers de assinatura e verifica o request.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Signing secret do app
        now: Epoch atual em segundos

    Raises:
        AuthError: Se headers, janela de replay ou assinatura forem inválidos

    Returns:
        SignedRequest autenticado
    """
    return verify(
        secret,
        get_header(headers, SIGNATURE_HEADER),
        get_header(headers, TIMESTAMP_HEADER),
        raw_body,
        now,
    )

"""Normalizer Slack: envelope JSON → DomainEvent.

Regras:
- url_verification → UrlVerification (challenge obrigatório)
- event_callback/app_mention → AppMention (channel e ts obrigatórios)
- event_callback/message → Message (channel obrigatório)
- qualquer outro tipo (topo ou interno) → OtherEvent, nunca erro

Texto ausente vira string vazia.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from app.domain.events import AppMention, DomainEvent, Message, OtherEvent, UrlVerification
from utils.errors import InvalidEnvelopeError, MissingChallengeError, MissingFieldError

from .models import (
    EventCallbackEnvelope,
    SlackEnvelopeHeader,
    SlackMessageEvent,
    UrlVerificationEnvelope,
)

logger = logging.getLogger(__name__)

URL_VERIFICATION = "url_verification"
EVENT_CALLBACK = "event_callback"
APP_MENTION = "app_mention"
MESSAGE = "message"


def normalize(raw_json: bytes | str) -> DomainEvent:
    """Converte o corpo bruto do webhook em evento de domínio.

    Raises:
        InvalidEnvelopeError: JSON inválido ou fora do formato de envelope
        MissingChallengeError: url_verification sem challenge
        MissingFieldError: Campo obrigatório ausente no evento interno
    """
    try:
        payload = json.loads(raw_json)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise InvalidEnvelopeError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidEnvelopeError("payload_not_object")

    return normalize_payload(payload)


def normalize_payload(payload: dict[str, object]) -> DomainEvent:
    """Classifica um envelope já decodificado."""
    try:
        header = SlackEnvelopeHeader.model_validate(payload)
    except ValidationError as exc:
        raise InvalidEnvelopeError("missing_envelope_type") from exc

    if header.type == URL_VERIFICATION:
        return _normalize_url_verification(payload)
    if header.type == EVENT_CALLBACK:
        return _normalize_event_callback(payload)

    logger.debug("slack_envelope_type_unsupported", extra={"envelope_type": header.type})
    return OtherEvent(event_type=header.type)


def _normalize_url_verification(payload: dict[str, object]) -> UrlVerification:
    try:
        envelope = UrlVerificationEnvelope.model_validate(payload)
    except ValidationError as exc:
        raise MissingChallengeError("challenge_not_string") from exc

    if not envelope.challenge:
        raise MissingChallengeError("missing_challenge")
    return UrlVerification(challenge=envelope.challenge)


def _normalize_event_callback(payload: dict[str, object]) -> DomainEvent:
    try:
        envelope = EventCallbackEnvelope.model_validate(payload)
    except ValidationError as exc:
        raise InvalidEnvelopeError("invalid_event_callback") from exc

    inner_type = envelope.event.get("type")
    if inner_type not in (APP_MENTION, MESSAGE):
        logger.debug(
            "slack_event_type_unsupported",
            extra={"event_type": inner_type if isinstance(inner_type, str) else None},
        )
        return OtherEvent(event_type=inner_type if isinstance(inner_type, str) else None)

    try:
        inner = SlackMessageEvent.model_validate(envelope.event)
    except ValidationError as exc:
        raise InvalidEnvelopeError("invalid_inner_event") from exc

    team_id = envelope.team_id or inner.team

    if inner_type == APP_MENTION:
        channel = _require(inner.channel, "channel")
        ts = _require(inner.ts, "ts")
        return AppMention(
            channel=channel,
            ts=ts,
            text=inner.text or "",
            team_id=team_id,
            user=inner.user,
            thread_ts=inner.thread_ts,
            event_id=envelope.event_id,
        )

    return Message(
        channel=_require(inner.channel, "channel"),
        text=inner.text or "",
        team_id=team_id,
        user=inner.user,
        ts=inner.ts,
        thread_ts=inner.thread_ts,
        event_id=envelope.event_id,
    )


def _require(value: str | None, field_name: str) -> str:
    if not value:
        raise MissingFieldError(field_name)
    return value

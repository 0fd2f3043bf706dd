"""Testes do normalizer de envelopes do Slack."""

from __future__ import annotations

import json

import pytest

from api.normalizers.slack import normalize, normalize_payload
from app.domain.events import AppMention, Message, Other, OtherEvent, UrlVerification
from utils.errors import InvalidEnvelopeError, MissingChallengeError, MissingFieldError, ParseError


def _callback(event: dict, **envelope: object) -> bytes:
    body = {"type": "event_callback", "event": event, **envelope}
    return json.dumps(body).encode("utf-8")


class TestUrlVerification:
    """Verificação de endpoint."""

    def test_returns_challenge(self) -> None:
        event = normalize(b'{"type":"url_verification","challenge":"abc"}')

        assert event == UrlVerification(challenge="abc")

    def test_ignores_unknown_fields(self) -> None:
        event = normalize(
            b'{"type":"url_verification","challenge":"abc","token":"x","extra":{"a":1}}'
        )

        assert isinstance(event, UrlVerification)

    @pytest.mark.parametrize(
        "body",
        [
            b'{"type":"url_verification"}',
            b'{"type":"url_verification","challenge":""}',
            b'{"type":"url_verification","challenge":null}',
            b'{"type":"url_verification","challenge":123}',
        ],
    )
    def test_missing_challenge(self, body: bytes) -> None:
        with pytest.raises(MissingChallengeError):
            normalize(body)


class TestAppMention:
    """event_callback com app_mention."""

    def test_decodes_fields(self) -> None:
        event = normalize(
            _callback(
                {
                    "type": "app_mention",
                    "channel": "C1",
                    "ts": "1700000000.000100",
                    "text": "<@U0BOT> oi",
                    "user": "U1",
                },
                team_id="T1",
                event_id="Ev1",
            )
        )

        assert event == AppMention(
            channel="C1",
            ts="1700000000.000100",
            text="<@U0BOT> oi",
            team_id="T1",
            user="U1",
            event_id="Ev1",
        )

    def test_missing_text_defaults_to_empty(self) -> None:
        event = normalize(_callback({"type": "app_mention", "channel": "C1", "ts": "1.0"}))

        assert isinstance(event, AppMention)
        assert event.text == ""
        assert event.team_id is None

    def test_team_id_falls_back_to_inner_team(self) -> None:
        event = normalize(
            _callback({"type": "app_mention", "channel": "C1", "ts": "1.0", "team": "T9"})
        )

        assert event.team_id == "T9"

    def test_envelope_team_id_wins_over_inner_team(self) -> None:
        event = normalize(
            _callback(
                {"type": "app_mention", "channel": "C1", "ts": "1.0", "team": "T9"},
                team_id="T1",
            )
        )

        assert event.team_id == "T1"

    def test_keeps_thread_ts(self) -> None:
        event = normalize(
            _callback(
                {"type": "app_mention", "channel": "C1", "ts": "2.0", "thread_ts": "1.0"}
            )
        )

        assert event.thread_ts == "1.0"

    @pytest.mark.parametrize(
        ("inner", "missing"),
        [
            ({"type": "app_mention", "ts": "1.0"}, "channel"),
            ({"type": "app_mention", "channel": "C1"}, "ts"),
        ],
    )
    def test_missing_required_field(self, inner: dict, missing: str) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            normalize(_callback(inner))

        assert exc_info.value.field_name == missing


class TestMessage:
    """event_callback com message."""

    def test_decodes_message(self) -> None:
        event = normalize(
            _callback({"type": "message", "channel": "C2", "text": "olá"}, team_id="T1")
        )

        assert isinstance(event, Message)
        assert event.channel == "C2"
        assert event.text == "olá"
        assert event.team_id == "T1"

    def test_missing_text_defaults_to_empty(self) -> None:
        event = normalize(_callback({"type": "message", "channel": "C2"}))

        assert event == Message(channel="C2", text="")

    def test_missing_channel(self) -> None:
        with pytest.raises(MissingFieldError):
            normalize(_callback({"type": "message", "text": "x"}))


class TestForwardCompatibility:
    """Tipos desconhecidos viram OtherEvent, nunca erro."""

    def test_unknown_inner_event(self) -> None:
        event = normalize(b'{"type":"event_callback","event":{"type":"reaction_added"}}')

        assert event == OtherEvent(event_type="reaction_added")
        assert Other is OtherEvent

    def test_unknown_inner_event_with_odd_fields(self) -> None:
        event = normalize(_callback({"type": "team_join", "user": {"id": "U1"}}))

        assert isinstance(event, OtherEvent)

    @pytest.mark.parametrize("envelope_type", ["app_rate_limited", "block_actions", "future_type"])
    def test_unknown_top_level_type(self, envelope_type: str) -> None:
        event = normalize_payload({"type": envelope_type, "minute_rate_limited": 1})

        assert event == OtherEvent(event_type=envelope_type)


class TestInvalidEnvelope:
    """Erros de parsing."""

    @pytest.mark.parametrize(
        "body",
        [
            b"",
            b"{invalid}",
            b"\x80abc",
            b"[]",
            b'"texto"',
            b"{}",
            b'{"type": 5}',
            b'{"type":"event_callback"}',
            b'{"type":"event_callback","event":"nope"}',
            b"[" * 200_000,
        ],
    )
    def test_rejects(self, body: bytes) -> None:
        with pytest.raises(InvalidEnvelopeError):
            normalize(body)

    def test_all_errors_are_parse_errors(self) -> None:
        assert issubclass(InvalidEnvelopeError, ParseError)
        assert issubclass(MissingChallengeError, ParseError)
        assert issubclass(MissingFieldError, ParseError)

    def test_accepts_str_input(self) -> None:
        event = normalize('{"type":"url_verification","challenge":"x"}')

        assert event == UrlVerification(challenge="x")

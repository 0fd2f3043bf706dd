"""Transporte HTTP com retry para a Web API do Slack.

Retry em 429, 5xx, timeout e falha de conexão. Em 429 o Slack informa
o intervalo em `Retry-After` (segundos); sem o header, backoff exponencial.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "slack-gateway/0.1.0"


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do transporte HTTP.

    Attributes:
        timeout_seconds: Timeout total por tentativa
        max_retries: Tentativas extras após a primeira
        backoff_base_seconds: Base do backoff exponencial
        backoff_max_seconds: Teto de espera entre tentativas
        default_headers: Headers enviados em todas as chamadas
    """

    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(
        default_factory=lambda: {"User-Agent": USER_AGENT}
    )


class HttpError(Exception):
    """Falha de transporte ou status HTTP inesperado (sem dados sensíveis)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable
        self.retry_after = retry_after


def _retry_after_seconds(response: httpx.Response) -> float | None:
    raw = response.headers.get("retry-after", "")
    try:
        return max(float(raw), 0.0)
    except ValueError:
        return None


def _check_status(response: httpx.Response) -> httpx.Response:
    if response.status_code == 429:
        raise HttpError(
            "slack_rate_limited",
            status_code=429,
            is_retryable=True,
            retry_after=_retry_after_seconds(response),
        )
    if response.status_code >= 500:
        raise HttpError(
            "slack_server_error",
            status_code=response.status_code,
            is_retryable=True,
        )
    return response


class HttpClient:
    """POST com retry; um AsyncClient por tentativa."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self._send(url, headers, json=json)

    async def post_form(
        self,
        url: str,
        data: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self._send(url, headers, data=data)

    async def post_content(
        self,
        url: str,
        content: bytes,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self._send(url, headers, content=content)

    async def _send(
        self,
        url: str,
        headers: dict[str, str] | None,
        **body: Any,
    ) -> httpx.Response:
        cfg = self._config
        merged_headers = {**cfg.default_headers, **(headers or {})}
        attempt = 0
        while True:
            try:
                async with httpx.AsyncClient(timeout=cfg.timeout_seconds) as client:
                    response = await client.post(url, headers=merged_headers, **body)
                return _check_status(response)
            except HttpError as exc:
                error = exc
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                error = HttpError("slack_connection_error", is_retryable=True)
                error.__cause__ = exc

            if not error.is_retryable or attempt >= cfg.max_retries:
                raise error

            await _backoff_sleep(self._delay_for(attempt, error.retry_after))
            attempt += 1

    def _delay_for(self, attempt: int, retry_after: float | None) -> float:
        cfg = self._config
        if retry_after is not None:
            return min(retry_after, cfg.backoff_max_seconds)
        return min((2**attempt) * cfg.backoff_base_seconds, cfg.backoff_max_seconds)


async def _backoff_sleep(seconds: float) -> None:
    logger.info("slack_http_backoff", extra={"backoff_seconds": seconds})
    await asyncio.sleep(seconds)

"""Fakes de transporte para testes dos resource clients."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx

from intercom_sdk.api.connectors import ApiRequest, Authentication

Responder = Callable[[httpx.Request], httpx.Response]


def json_response(status_code: int = 200, payload: Any = None) -> Responder:
    """Responder fixo com corpo JSON."""

    def _respond(request: httpx.Request) -> httpx.Response:
        _ = request
        return httpx.Response(status_code, json=payload if payload is not None else {})

    return _respond


class RecordingHandler:
    """Handler para httpx.MockTransport que registra cada requisição."""

    def __init__(self, responder: Responder | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = responder or json_response(200, {"type": "user", "id": "1"})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


class SpyTransport:
    """Transporte que apenas registra chamadas (sync e async)."""

    def __init__(self) -> None:
        self.calls: list[ApiRequest] = []

    def execute(self, request: ApiRequest) -> httpx.Response:
        self.calls.append(request)
        return httpx.Response(200, json={})

    def close(self) -> None:
        return None


class AsyncSpyTransport(SpyTransport):
    async def execute(self, request: ApiRequest) -> httpx.Response:  # type: ignore[override]
        self.calls.append(request)
        return httpx.Response(200, json={})

    async def aclose(self) -> None:
        return None


def token_auth() -> Authentication:
    return Authentication.with_token("test-token")

"""Adapter de transporte HTTP sobre httpx.

Executa uma ApiRequest e devolve o httpx.Response cru. Falhas de
conectividade viram TransportFailure; status de erro NÃO são tratados aqui
(ficam para o envelope de resposta). Sem retry e sem backoff.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from intercom_sdk.api.connectors.api_logging import log_transport_error
from intercom_sdk.config.settings import DEFAULT_USER_AGENT, INTERCOM_API_BASE_URL
from intercom_sdk.utils.errors import TransportFailure

if TYPE_CHECKING:
    from intercom_sdk.api.connectors.auth import Authentication
    from intercom_sdk.api.connectors.models import ApiRequest
    from intercom_sdk.config.settings import IntercomSettings


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str = INTERCOM_API_BASE_URL
    timeout_seconds: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True

    @classmethod
    def from_settings(cls, settings: IntercomSettings) -> HttpClientConfig:
        return cls(
            base_url=settings.resolved_base_url,
            timeout_seconds=settings.request_timeout_seconds,
            user_agent=settings.user_agent,
        )

    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
            **self.default_headers,
        }


def _client_kwargs(
    config: HttpClientConfig,
    auth: Authentication | None,
) -> dict[str, Any]:
    return {
        "base_url": config.base_url or INTERCOM_API_BASE_URL,
        "headers": config.headers(),
        "timeout": config.timeout_seconds,
        "verify": config.verify_ssl,
        "auth": auth,
    }


def _request_kwargs(request: ApiRequest) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    if request.params:
        kwargs["params"] = request.params
    if request.json is not None:
        kwargs["json"] = request.json
    return kwargs


def _transport_failure(exc: httpx.TransportError, request: ApiRequest) -> TransportFailure:
    log_transport_error(request.method, request.path, type(exc).__name__)
    return TransportFailure(
        f"falha de transporte em {request.method} {request.path}: {type(exc).__name__}",
        method=request.method,
        path=request.path,
    )


class HttpTransport:
    """Transporte síncrono (httpx.Client)."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        auth: Authentication | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = httpx.Client(transport=transport, **_client_kwargs(self._config, auth))

    def execute(self, request: ApiRequest) -> httpx.Response:
        try:
            return self._client.request(request.method, request.path, **_request_kwargs(request))
        except httpx.TransportError as exc:
            raise _transport_failure(exc, request) from exc

    def close(self) -> None:
        self._client.close()


class AsyncHttpTransport:
    """Transporte assíncrono (httpx.AsyncClient).

    O AsyncClient só é criado na primeira execução; um client usado apenas
    de forma síncrona nunca abre conexões async.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        auth: Authentication | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._auth = auth
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                transport=self._transport, **_client_kwargs(self._config, self._auth)
            )
        return self._client

    async def execute(self, request: ApiRequest) -> httpx.Response:
        client = self._get_client()
        try:
            return await client.request(request.method, request.path, **_request_kwargs(request))
        except httpx.TransportError as exc:
            raise _transport_failure(exc, request) from exc

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

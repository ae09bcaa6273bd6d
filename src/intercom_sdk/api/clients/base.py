"""Base dos resource clients.

Cada operação pública segue o mesmo roteiro:
1. `_build_<op>` valida argumentos e monta a ApiRequest (sem IO)
2. `_send` / `_send_async` executa no transporte e desembrulha o envelope

A validação e a montagem são escritas uma única vez; as variantes sync e
async diferem apenas no transporte usado. Nenhum estado mutável é
compartilhado entre chamadas.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any, ClassVar, NoReturn, Self, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from intercom_sdk.api.connectors.http_base import (
    AsyncHttpTransport,
    HttpClientConfig,
    HttpTransport,
)
from intercom_sdk.api.connectors.models import ApiRequest, HttpMethod
from intercom_sdk.api.connectors.response import ClientResponse, build_client_response
from intercom_sdk.api.validators import IdentifierScheme, resolve_lookup
from intercom_sdk.config.settings import INTERCOM_API_BASE_URL, get_intercom_settings
from intercom_sdk.utils.errors import PaginationNotSupported

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from intercom_sdk.api.connectors.auth import Authentication
    from intercom_sdk.config.settings import IntercomSettings
    from intercom_sdk.protocols import AsyncTransportProtocol, TransportProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ResourceClient:
    """Client de um recurso exposto em endpoint fixo (ex: "users")."""

    resource: ClassVar[str]
    identifiers: ClassVar[IdentifierScheme]

    def __init__(
        self,
        authentication: Authentication,
        base_url: str | None = None,
        *,
        config: HttpClientConfig | None = None,
        transport: TransportProtocol | None = None,
        async_transport: AsyncTransportProtocol | None = None,
        http_transport: httpx.MockTransport | None = None,
    ) -> None:
        """Inicializa o client.

        Args:
            authentication: Credenciais anexadas a toda requisição
            base_url: URL base; None ou vazio usa o endpoint padrão
            config: Configuração HTTP (timeout, headers)
            transport: Transporte síncrono customizado
            async_transport: Transporte assíncrono customizado
            http_transport: Transporte httpx de baixo nível (ex: MockTransport
                em testes), repassado aos clients httpx criados aqui
        """
        http_config = config or HttpClientConfig()
        http_config = replace(
            http_config, base_url=base_url or http_config.base_url or INTERCOM_API_BASE_URL
        )

        self._base_url = http_config.base_url
        self._transport: TransportProtocol = transport or HttpTransport(
            http_config, authentication, transport=http_transport
        )
        self._async_transport: AsyncTransportProtocol = async_transport or AsyncHttpTransport(
            http_config, authentication, transport=http_transport
        )

    @classmethod
    def from_settings(cls, settings: IntercomSettings | None = None, **kwargs: Any) -> Self:
        """Cria o client a partir de IntercomSettings (default: ambiente)."""
        resolved = settings or get_intercom_settings()
        return cls(
            resolved.build_authentication(),
            resolved.resolved_base_url,
            config=HttpClientConfig.from_settings(resolved),
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    # Montagem de requisições

    def _resource_path(self, resource_id: str) -> str:
        return f"{self.resource}/{quote(resource_id, safe='')}"

    def _build_lookup(self, method: HttpMethod, target: object) -> ApiRequest:
        """Lookup por caminho (id primário) ou por query (demais campos)."""
        resolved = resolve_lookup(target, self.identifiers)
        if resolved.path_id is not None:
            return ApiRequest(method, self._resource_path(resolved.path_id))
        return ApiRequest(method, self.resource, params=resolved.parameters)

    def _build_list(self, parameters: Mapping[str, str] | None) -> ApiRequest:
        params = {str(k): str(v) for k, v in parameters.items()} if parameters else None
        return ApiRequest("GET", self.resource, params=params)

    # Execução

    def _execute(self, request: ApiRequest, model: type[T]) -> ClientResponse[T]:
        response = self._transport.execute(request)
        return build_client_response(response, model, request)

    async def _execute_async(self, request: ApiRequest, model: type[T]) -> ClientResponse[T]:
        response = await self._async_transport.execute(request)
        return build_client_response(response, model, request)

    def _send(self, request: ApiRequest, model: type[T]) -> T:
        return self._execute(request, model).unwrap()

    async def _send_async(self, request: ApiRequest, model: type[T]) -> T:
        return (await self._execute_async(request, model)).unwrap()

    # Paginação

    def next_page(self, collection: BaseModel) -> NoReturn:
        """Navegação para a próxima página (não suportada).

        Raises:
            PaginationNotSupported: Sempre.
        """
        pages = getattr(collection, "pages", None)
        logger.debug(
            "intercom_pagination_not_supported",
            extra={"resource": self.resource, "has_next": bool(getattr(pages, "next", None))},
        )
        raise PaginationNotSupported(
            f"paginação de '{self.resource}' não é suportada; use filtros em list()"
        )

    async def next_page_async(self, collection: BaseModel) -> NoReturn:
        self.next_page(collection)

    # Ciclo de vida

    def close(self) -> None:
        """Fecha o transporte síncrono.

        O AsyncClient só existe após a primeira chamada `_async`; nesse caso
        use `aclose()` (ou `async with`), que fecha os dois transportes.
        """
        self._transport.close()

    async def aclose(self) -> None:
        """Fecha os transportes síncrono e assíncrono."""
        await self._async_transport.aclose()
        self._transport.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

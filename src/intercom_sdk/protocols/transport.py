"""Protocolos do adapter de transporte HTTP.

Os resource clients dependem apenas destes contratos; qualquer objeto com
`execute` compatível pode substituir o transporte httpx (ex: spies em testes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import httpx

    from intercom_sdk.api.connectors.models import ApiRequest


class TransportProtocol(Protocol):
    """Contrato mínimo de transporte síncrono."""

    def execute(self, request: ApiRequest) -> httpx.Response: ...

    def close(self) -> None: ...


class AsyncTransportProtocol(Protocol):
    """Contrato mínimo de transporte assíncrono."""

    async def execute(self, request: ApiRequest) -> httpx.Response: ...

    async def aclose(self) -> None: ...

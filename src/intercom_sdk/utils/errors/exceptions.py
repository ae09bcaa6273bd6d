"""Taxonomia de erros do SDK.

- InvalidArgument: validação local, antes de qualquer chamada de rede
- TransportFailure: conexão/timeout vindos do httpx
- ApiError: a API respondeu com status de erro e payload estruturado
- DecodeFailure: resposta de sucesso com corpo fora do formato esperado

Nenhum desses erros é retentado ou engolido pelo SDK.
"""

from __future__ import annotations

from dataclasses import dataclass


class IntercomError(Exception):
    """Base para todos os erros levantados pelo SDK."""


class InvalidArgument(IntercomError, ValueError):
    """Argumento ausente ou inválido detectado antes do envio."""


class TransportFailure(IntercomError):
    """Falha de conectividade ou timeout no transporte HTTP."""

    def __init__(self, message: str, *, method: str = "", path: str = "") -> None:
        super().__init__(message)
        self.method = method
        self.path = path


@dataclass(frozen=True)
class ApiErrorDetail:
    """Item da lista de erros retornada pela API (error.list)."""

    code: str
    message: str


class ApiError(IntercomError):
    """Erro de aplicação retornado pela API, preservando código e mensagem."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        errors: tuple[ApiErrorDetail, ...] = (),
        request_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors
        self.request_id = request_id

    @property
    def codes(self) -> list[str]:
        """Códigos de erro informados pelo servidor."""
        return [detail.code for detail in self.errors]


class NotFoundError(ApiError):
    """Recurso inexistente (HTTP 404)."""


class DecodeFailure(IntercomError):
    """Resposta de sucesso cujo corpo não corresponde ao formato esperado."""

    def __init__(self, message: str, *, status_code: int, raw_body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.raw_body = raw_body


class PaginationNotSupported(IntercomError, NotImplementedError):
    """Navegação entre páginas ainda não suportada pelo SDK."""

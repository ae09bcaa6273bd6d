"""Envelope de resposta: payload tipado OU erro tipado, nunca ambos.

Os resource clients nunca inspecionam o httpx.Response diretamente; tudo
passa por `build_client_response`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar, cast

from pydantic import BaseModel, ValidationError

from intercom_sdk.api.connectors.api_errors import build_api_error
from intercom_sdk.api.connectors.api_logging import (
    log_api_error,
    log_decode_failure,
    log_success,
)
from intercom_sdk.utils.errors import ApiError, DecodeFailure

if TYPE_CHECKING:
    import httpx

    from intercom_sdk.api.connectors.models import ApiRequest

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class ClientResponse(Generic[T]):
    """Resultado de um ciclo requisição/resposta."""

    status_code: int
    raw_body: str
    result: T | None = None
    error: ApiError | DecodeFailure | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("ClientResponse exige exatamente um entre result e error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Retorna o payload ou levanta o erro tipado."""
        if self.error is not None:
            raise self.error
        return cast(T, self.result)


def build_client_response(
    response: httpx.Response,
    model: type[T],
    request: ApiRequest,
) -> ClientResponse[T]:
    """Converte o httpx.Response em envelope tipado.

    - 2xx + corpo válido para `model` → result
    - 2xx + corpo inválido → DecodeFailure
    - demais status → ApiError (NotFoundError para 404)
    """
    status_code = response.status_code
    raw_body = response.text

    try:
        data = json.loads(raw_body) if raw_body.strip() else None
    except json.JSONDecodeError:
        data = None
        decoded = False
    else:
        decoded = data is not None

    if not response.is_success:
        error = build_api_error(status_code, data, raw_body)
        log_api_error(error, request.method, request.path)
        return ClientResponse(status_code=status_code, raw_body=raw_body, error=error)

    if not decoded:
        log_decode_failure(request.method, request.path, status_code)
        return ClientResponse(
            status_code=status_code,
            raw_body=raw_body,
            error=DecodeFailure(
                f"corpo de resposta não é JSON válido ({request.method} {request.path})",
                status_code=status_code,
                raw_body=raw_body,
            ),
        )

    try:
        result = model.model_validate(data)
    except ValidationError as exc:
        log_decode_failure(request.method, request.path, status_code)
        return ClientResponse(
            status_code=status_code,
            raw_body=raw_body,
            error=DecodeFailure(
                f"resposta não corresponde a {model.__name__}: {exc.error_count()} erro(s)",
                status_code=status_code,
                raw_body=raw_body,
            ),
        )

    log_success(request.method, request.path, status_code)
    return ClientResponse(status_code=status_code, raw_body=raw_body, result=result)

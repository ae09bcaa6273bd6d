"""Modelo da requisição montada pelos resource clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


@dataclass(frozen=True, slots=True)
class ApiRequest:
    """Requisição pronta para o transporte.

    Attributes:
        method: Verbo HTTP
        path: Caminho relativo à URL base (ex: "users/42")
        params: Query string (lookup/listagem)
        json: Corpo JSON (create/update/mutações)
    """

    method: HttpMethod
    path: str
    params: dict[str, str] | None = None
    json: dict[str, Any] | None = None

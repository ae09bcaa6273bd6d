"""Autenticação das requisições à API.

Suporta auth básica (app_id + api_key) e personal access token (bearer).
Implementado como httpx.Auth: o httpx invoca `auth_flow` uma vez por
requisição, que delega para `attach`.
"""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING, Literal

import httpx

from intercom_sdk.utils.errors import InvalidArgument

if TYPE_CHECKING:
    from collections.abc import Generator

AuthScheme = Literal["basic", "bearer"]


class Authentication(httpx.Auth):
    """Credenciais anexadas a toda requisição."""

    def __init__(
        self,
        *,
        personal_access_token: str | None = None,
        app_id: str | None = None,
        api_key: str | None = None,
    ) -> None:
        if personal_access_token:
            self._scheme: AuthScheme = "bearer"
            self._credentials = personal_access_token
        elif app_id and api_key:
            self._scheme = "basic"
            raw = f"{app_id}:{api_key}".encode()
            self._credentials = base64.b64encode(raw).decode("ascii")
        else:
            raise InvalidArgument(
                "informe 'personal_access_token' ou 'app_id' e 'api_key'"
            )

    @classmethod
    def with_token(cls, personal_access_token: str) -> Authentication:
        return cls(personal_access_token=personal_access_token)

    @classmethod
    def with_api_key(cls, app_id: str, api_key: str) -> Authentication:
        return cls(app_id=app_id, api_key=api_key)

    @property
    def scheme(self) -> AuthScheme:
        return self._scheme

    @property
    def authorization_header(self) -> str:
        prefix = "Bearer" if self._scheme == "bearer" else "Basic"
        return f"{prefix} {self._credentials}"

    def attach(self, request: httpx.Request) -> httpx.Request:
        """Anexa o header Authorization à requisição."""
        request.headers["Authorization"] = self.authorization_header
        return request

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield self.attach(request)

    def __repr__(self) -> str:
        # Nunca expor credenciais em repr/logs
        return f"Authentication(scheme={self._scheme!r})"

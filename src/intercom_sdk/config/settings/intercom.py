"""Settings da API Intercom.

Credenciais, URL base e timeout do transporte HTTP.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from intercom_sdk.api.connectors.auth import Authentication

INTERCOM_API_BASE_URL: str = "https://api.intercom.io/"
DEFAULT_USER_AGENT: str = "intercom-sdk-python"


@dataclass(frozen=True)
class IntercomSettings:
    """Configurações de acesso à API.

    Attributes:
        api_base_url: URL base da API (sobrescrever muda apenas o host)
        access_token: Personal access token (auth bearer)
        app_id: App id para auth básica
        api_key: API key para auth básica
        request_timeout_seconds: Timeout para requisições HTTP
        user_agent: User-Agent enviado em todas as requisições
    """

    # API
    api_base_url: str = INTERCOM_API_BASE_URL

    # Credenciais
    access_token: str = ""
    app_id: str = ""
    api_key: str = ""

    # Transporte
    request_timeout_seconds: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def resolved_base_url(self) -> str:
        """URL base efetiva; string vazia cai no endpoint padrão."""
        return self.api_base_url or INTERCOM_API_BASE_URL

    @property
    def has_token_auth(self) -> bool:
        return bool(self.access_token)

    @property
    def has_basic_auth(self) -> bool:
        return bool(self.app_id and self.api_key)

    def build_authentication(self) -> Authentication:
        """Cria Authentication a partir das credenciais configuradas.

        Token tem prioridade sobre app_id/api_key.

        Raises:
            InvalidArgument: Se nenhuma credencial estiver configurada.
        """
        from intercom_sdk.api.connectors.auth import Authentication

        if self.has_token_auth:
            return Authentication.with_token(self.access_token)
        return Authentication.with_api_key(self.app_id, self.api_key)

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.has_token_auth and not self.has_basic_auth:
            errors.append(
                "INTERCOM_ACCESS_TOKEN ou INTERCOM_APP_ID/INTERCOM_API_KEY não configurados"
            )

        if self.request_timeout_seconds <= 0:
            errors.append("INTERCOM_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if not self.resolved_base_url.startswith(("http://", "https://")):
            errors.append(f"INTERCOM_API_BASE_URL inválida: {self.api_base_url}")

        return errors


def _load_from_env() -> IntercomSettings:
    """Carrega IntercomSettings a partir de variáveis de ambiente."""
    return IntercomSettings(
        api_base_url=os.getenv("INTERCOM_API_BASE_URL", INTERCOM_API_BASE_URL),
        access_token=os.getenv("INTERCOM_ACCESS_TOKEN", ""),
        app_id=os.getenv("INTERCOM_APP_ID", ""),
        api_key=os.getenv("INTERCOM_API_KEY", ""),
        request_timeout_seconds=float(
            os.getenv("INTERCOM_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        user_agent=os.getenv("INTERCOM_USER_AGENT", DEFAULT_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_intercom_settings() -> IntercomSettings:
    """Retorna instância cacheada de IntercomSettings."""
    return _load_from_env()

"""Conector Intercom - adapter de borda para a API REST.

Único ponto de IO do SDK:
- Transporte HTTP (sync/async) sobre httpx
- Autenticação (basic ou bearer)
- Envelope de resposta e parsing de erros da API
- Logging sem PII
"""

from .api_errors import build_api_error, parse_error_details
from .auth import Authentication
from .http_base import AsyncHttpTransport, HttpClientConfig, HttpTransport
from .models import ApiRequest
from .response import ClientResponse, build_client_response

__all__ = [
    "ApiRequest",
    "AsyncHttpTransport",
    "Authentication",
    "ClientResponse",
    "HttpClientConfig",
    "HttpTransport",
    "build_api_error",
    "build_client_response",
    "parse_error_details",
]

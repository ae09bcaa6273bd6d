"""Configuração de logging JSON para o logger do SDK.

Diferente de um serviço, o SDK não toca no root logger: configure_logging
atua apenas sobre o logger "intercom_sdk" e seus filhos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pythonjsonlogger.json import JsonFormatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

SDK_LOGGER_NAME = "intercom_sdk"
DEFAULT_SERVICE_NAME = "intercom_sdk"

# Campos do record sempre presentes na saída; os eventos dos conectores
# acrescentam method, path, status_code e error_codes via `extra`.
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


class CorrelationIdFilter(logging.Filter):
    """Preenche correlation_id e service nos records do SDK.

    O correlation_id vem do `extra` da chamada quando presente; senão do
    getter da aplicação consumidora (ex: ContextVar da requisição).
    """

    def __init__(
        self,
        service_name: str = DEFAULT_SERVICE_NAME,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__(SDK_LOGGER_NAME)
        self._service_name = service_name or DEFAULT_SERVICE_NAME
        self._get_correlation_id = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not super().filter(record):
            return False
        if not getattr(record, "correlation_id", None):
            getter = self._get_correlation_id
            record.correlation_id = getter() if getter else ""
        record.service = self._service_name
        return True


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON dos eventos do SDK.

    Exemplo de output:
        {"asctime": "...", "level": "DEBUG", "logger": "intercom_sdk.api...",
         "message": "intercom_request_success", "correlation_id": "",
         "service": "intercom_sdk", "method": "GET", "path": "users/42",
         "status_code": 200}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> logging.Logger:
    """Configura saída JSON estruturada para o logger do SDK.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço consumidor, injetado em cada record.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar da aplicação).

    Returns:
        O logger "intercom_sdk" configurado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    sdk_logger.handlers = [handler]
    sdk_logger.propagate = False
    return sdk_logger


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)

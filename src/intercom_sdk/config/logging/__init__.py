"""Logging estruturado do SDK.

Uso:
    from intercom_sdk.config.logging import configure_logging

    # Opcional, na aplicação que consome o SDK
    configure_logging(level="DEBUG")

Sem configure_logging o SDK apenas emite records no logger "intercom_sdk"
(com NullHandler), deixando a configuração para a aplicação.

Campos em todo log: correlation_id, service, level, logger, message, asctime.
Nunca logar tokens, emails ou corpos de requisição.
"""

from intercom_sdk.config.logging.config import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    SDK_LOGGER_NAME,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "SDK_LOGGER_NAME",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]

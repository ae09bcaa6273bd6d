"""Helpers de logging para a API Intercom (sem PII).

Apenas método, caminho, status e códigos de erro. Caminhos de lookup por id
contêm apenas ids do servidor; emails só trafegam em query string, que não é
logada.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from intercom_sdk.utils.errors import ApiError

logger = logging.getLogger(__name__)


def log_api_error(error: ApiError, method: str, path: str) -> None:
    """Loga erro retornado pela API."""
    logger.warning(
        "intercom_api_error",
        extra={
            "method": method,
            "path": path,
            "status_code": error.status_code,
            "error_codes": error.codes,
            "request_id": error.request_id,
        },
    )


def log_decode_failure(method: str, path: str, status_code: int) -> None:
    logger.warning(
        "intercom_decode_failure",
        extra={"method": method, "path": path, "status_code": status_code},
    )


def log_transport_error(method: str, path: str, error_type: str) -> None:
    logger.warning(
        "intercom_transport_error",
        extra={"method": method, "path": path, "error_type": error_type},
    )


def log_success(method: str, path: str, status_code: int) -> None:
    logger.debug(
        "intercom_request_success",
        extra={"method": method, "path": path, "status_code": status_code},
    )

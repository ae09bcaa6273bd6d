"""Parsing do payload de erro da API (type: error.list)."""

from __future__ import annotations

from typing import Any

from intercom_sdk.utils.errors import ApiError, ApiErrorDetail, NotFoundError


def parse_error_details(response_data: Any) -> tuple[ApiErrorDetail, ...]:
    """Extrai a lista de erros do corpo de resposta.

    Aceita tanto `{"errors": [...]}` quanto um único `{"error": {...}}`.
    """
    if not isinstance(response_data, dict):
        return ()

    raw_errors = response_data.get("errors")
    if raw_errors is None and isinstance(response_data.get("error"), dict):
        raw_errors = [response_data["error"]]
    if not isinstance(raw_errors, list):
        return ()

    return tuple(
        ApiErrorDetail(
            code=str(item.get("code", "unknown")),
            message=str(item.get("message", "")),
        )
        for item in raw_errors
        if isinstance(item, dict)
    )


def build_api_error(status_code: int, response_data: Any, raw_body: str = "") -> ApiError:
    """Cria ApiError (ou NotFoundError para 404) preservando código e mensagem.

    Args:
        status_code: Status HTTP da resposta
        response_data: Corpo JSON já decodificado (ou None se não for JSON)
        raw_body: Corpo bruto, usado como mensagem quando não há error.list
    """
    details = parse_error_details(response_data)
    request_id = response_data.get("request_id") if isinstance(response_data, dict) else None

    if details:
        message = "; ".join(f"{d.code}: {d.message}" for d in details)
    else:
        message = raw_body[:200] or f"HTTP {status_code}"

    error_cls = NotFoundError if status_code == 404 else ApiError
    return error_cls(
        f"Intercom API error ({status_code}): {message}",
        status_code=status_code,
        errors=details,
        request_id=request_id,
    )

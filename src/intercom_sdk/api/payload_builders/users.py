"""Corpos das mutações específicas de usuário (POST users)."""

from __future__ import annotations

from typing import Any


def build_last_seen_body(user_id: str, timestamp: int | None = None) -> dict[str, Any]:
    """Corpo de atualização do último acesso.

    Sem timestamp, pede ao servidor que use o horário atual.
    """
    if timestamp is None:
        return {"user_id": user_id, "update_last_request_at": True}
    return {"user_id": user_id, "last_request_at": timestamp}


def build_new_session_body(user_id: str) -> dict[str, Any]:
    return {"id": user_id, "new_session": True}


def build_remove_companies_body(user_id: str, company_ids: list[str]) -> dict[str, Any]:
    return {
        "id": user_id,
        "companies": [{"id": company_id, "remove": True} for company_id in company_ids],
    }

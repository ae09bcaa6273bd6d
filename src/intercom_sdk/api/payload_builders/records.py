"""Corpo de create/update a partir do record completo."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from intercom_sdk.domain.common import Record


def build_record_body(record: Record) -> dict[str, Any]:
    """Serializa o record sem campos None.

    Um usuário só com `user_id` gera `{"user_id": ...}`, sem `email`.
    """
    return record.to_request_body()

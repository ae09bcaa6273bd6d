"""Corpos de reply e leitura de conversas."""

from __future__ import annotations

from typing import Any

# Tipos aceitos pela API por autor do reply
ADMIN_MESSAGE_TYPES = frozenset({"comment", "note", "open", "close", "assignment"})
USER_MESSAGE_TYPES = frozenset({"comment"})


def build_admin_reply_body(
    admin_id: str,
    message_type: str,
    body: str | None = None,
    assignee_id: str | None = None,
    attachment_urls: list[str] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "type": "admin",
        "admin_id": admin_id,
        "message_type": message_type,
    }
    if body:
        payload["body"] = body
    if assignee_id:
        payload["assignee_id"] = assignee_id
    if attachment_urls:
        payload["attachment_urls"] = list(attachment_urls)
    return payload


def build_user_reply_body(
    identifier: dict[str, str],
    body: str,
    attachment_urls: list[str] | None = None,
) -> dict[str, Any]:
    """Reply em nome de um usuário.

    Args:
        identifier: Um único identificador já resolvido, ex: {"user_id": "abc"}
        body: Texto do comentário
        attachment_urls: URLs de anexos (opcional)
    """
    payload: dict[str, Any] = {
        "type": "user",
        "message_type": "comment",
        "body": body,
        **identifier,
    }
    if attachment_urls:
        payload["attachment_urls"] = list(attachment_urls)
    return payload


def build_mark_read_body() -> dict[str, Any]:
    return {"read": True}

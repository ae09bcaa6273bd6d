"""Builders de corpo JSON para as requisições da API.

Mutações específicas (last seen, sessão, remoção de empresa, reply) usam
corpos pequenos e fixos, nunca o record completo.
"""

from intercom_sdk.api.payload_builders.conversations import (
    ADMIN_MESSAGE_TYPES,
    USER_MESSAGE_TYPES,
    build_admin_reply_body,
    build_mark_read_body,
    build_user_reply_body,
)
from intercom_sdk.api.payload_builders.records import build_record_body
from intercom_sdk.api.payload_builders.users import (
    build_last_seen_body,
    build_new_session_body,
    build_remove_companies_body,
)

__all__ = [
    "ADMIN_MESSAGE_TYPES",
    "USER_MESSAGE_TYPES",
    "build_admin_reply_body",
    "build_last_seen_body",
    "build_mark_read_body",
    "build_new_session_body",
    "build_record_body",
    "build_remove_companies_body",
    "build_user_reply_body",
]

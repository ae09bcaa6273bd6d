"""Client de conversas (endpoint `conversations`).

Referência: https://developers.intercom.io/reference#conversations
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from intercom_sdk.api.clients.base import ResourceClient
from intercom_sdk.api.connectors.models import ApiRequest
from intercom_sdk.api.payload_builders import (
    ADMIN_MESSAGE_TYPES,
    USER_MESSAGE_TYPES,
    build_admin_reply_body,
    build_mark_read_body,
    build_user_reply_body,
)
from intercom_sdk.api.validators import (
    IdentifierScheme,
    has_value,
    require_id,
)
from intercom_sdk.domain import Conversation, Conversations
from intercom_sdk.utils.errors import InvalidArgument

if TYPE_CHECKING:
    from collections.abc import Mapping

    from intercom_sdk.api.validators import LookupTarget

    ConversationLookup = str | Conversation | Mapping[str, str] | LookupTarget

# Autor de reply do tipo usuário, em ordem de precedência
_REPLY_AUTHOR_FIELDS = ("intercom_user_id", "user_id", "email")


def _reply_author(**candidates: str | None) -> dict[str, str]:
    for field in _REPLY_AUTHOR_FIELDS:
        value = candidates.get(field)
        if has_value(value):
            return {field: str(value)}
    raise InvalidArgument("informe 'admin_id' ou um entre 'intercom_user_id', 'user_id', 'email'")


class ConversationsClient(ResourceClient):
    """Leitura e resposta de conversas.

    Conversas são criadas pelos contatos; o SDK só consulta, lista,
    responde e marca como lidas.
    """

    resource = "conversations"
    identifiers = IdentifierScheme(primary="id", alternates=())

    def _build_reply(
        self,
        conversation_id: str,
        body: str | None,
        *,
        admin_id: str | None,
        intercom_user_id: str | None,
        user_id: str | None,
        email: str | None,
        message_type: str,
        assignee_id: str | None,
        attachment_urls: list[str] | None,
    ) -> ApiRequest:
        conversation_id = require_id(conversation_id, "conversation_id")
        path = f"{self._resource_path(conversation_id)}/reply"

        if has_value(admin_id):
            if message_type not in ADMIN_MESSAGE_TYPES:
                raise InvalidArgument(f"message_type inválido para admin: {message_type}")
            if message_type in ("comment", "note") and not has_value(body):
                raise InvalidArgument("'body' é obrigatório para comment/note")
            if message_type == "assignment" and not has_value(assignee_id):
                raise InvalidArgument("'assignee_id' é obrigatório para assignment")
            payload = build_admin_reply_body(
                str(admin_id), message_type, body, assignee_id, attachment_urls
            )
            return ApiRequest("POST", path, json=payload)

        if message_type not in USER_MESSAGE_TYPES:
            raise InvalidArgument(f"message_type inválido para usuário: {message_type}")
        if not has_value(body):
            raise InvalidArgument("'body' é obrigatório")

        author = _reply_author(intercom_user_id=intercom_user_id, user_id=user_id, email=email)
        return ApiRequest("POST", path, json=build_user_reply_body(author, str(body), attachment_urls))

    def _build_mark_read(self, conversation_id: str) -> ApiRequest:
        conversation_id = require_id(conversation_id, "conversation_id")
        return ApiRequest("PUT", self._resource_path(conversation_id), json=build_mark_read_body())

    # Sync

    def view(self, target: ConversationLookup) -> Conversation:
        """Busca uma conversa por id, record ou parâmetros (ex: display_as)."""
        return self._send(self._build_lookup("GET", target), Conversation)

    def list(self, parameters: Mapping[str, str] | None = None) -> Conversations:
        """Lista conversas (primeira página).

        Filtros usuais: type=user + user_id/intercom_user_id/email,
        type=admin + admin_id, open, unread.
        """
        return self._send(self._build_list(parameters), Conversations)

    def reply(
        self,
        conversation_id: str,
        body: str | None = None,
        *,
        admin_id: str | None = None,
        intercom_user_id: str | None = None,
        user_id: str | None = None,
        email: str | None = None,
        message_type: str = "comment",
        assignee_id: str | None = None,
        attachment_urls: list[str] | None = None,
    ) -> Conversation:
        """Responde a conversa como admin (admin_id) ou como usuário."""
        request = self._build_reply(
            conversation_id,
            body,
            admin_id=admin_id,
            intercom_user_id=intercom_user_id,
            user_id=user_id,
            email=email,
            message_type=message_type,
            assignee_id=assignee_id,
            attachment_urls=attachment_urls,
        )
        return self._send(request, Conversation)

    def mark_as_read(self, conversation_id: str) -> Conversation:
        return self._send(self._build_mark_read(conversation_id), Conversation)

    # Async

    async def view_async(self, target: ConversationLookup) -> Conversation:
        return await self._send_async(self._build_lookup("GET", target), Conversation)

    async def list_async(self, parameters: Mapping[str, str] | None = None) -> Conversations:
        return await self._send_async(self._build_list(parameters), Conversations)

    async def reply_async(
        self,
        conversation_id: str,
        body: str | None = None,
        *,
        admin_id: str | None = None,
        intercom_user_id: str | None = None,
        user_id: str | None = None,
        email: str | None = None,
        message_type: str = "comment",
        assignee_id: str | None = None,
        attachment_urls: list[str] | None = None,
    ) -> Conversation:
        request = self._build_reply(
            conversation_id,
            body,
            admin_id=admin_id,
            intercom_user_id=intercom_user_id,
            user_id=user_id,
            email=email,
            message_type=message_type,
            assignee_id=assignee_id,
            attachment_urls=attachment_urls,
        )
        return await self._send_async(request, Conversation)

    async def mark_as_read_async(self, conversation_id: str) -> Conversation:
        return await self._send_async(self._build_mark_read(conversation_id), Conversation)

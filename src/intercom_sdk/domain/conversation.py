"""Records de conversa."""

from __future__ import annotations

from pydantic import Field

from intercom_sdk.domain.common import Pages, Record


class Author(Record):
    """Autor/participante (admin, user, lead, bot)."""

    type: str | None = None
    id: str | None = None
    name: str | None = None
    email: str | None = None


class ConversationMessage(Record):
    """Mensagem que abriu a conversa."""

    type: str | None = None
    id: str | None = None
    subject: str | None = None
    body: str | None = None
    author: Author | None = None


class ConversationPart(Record):
    type: str | None = None
    id: str | None = None
    part_type: str | None = None
    body: str | None = None
    created_at: int | None = None
    updated_at: int | None = None
    author: Author | None = None
    assigned_to: Author | None = None


class ConversationParts(Record):
    type: str | None = None
    conversation_parts: list[ConversationPart] = Field(default_factory=list)
    total_count: int | None = None


class Conversation(Record):
    """Conversa entre um contato e a equipe."""

    type: str | None = None
    id: str | None = None
    created_at: int | None = None
    updated_at: int | None = None
    open: bool | None = None
    read: bool | None = None
    state: str | None = None
    assignee: Author | None = None
    user: Author | None = None
    conversation_message: ConversationMessage | None = None
    conversation_parts: ConversationParts | None = None


class Conversations(Record):
    """Página de conversas."""

    type: str | None = None
    conversations: list[Conversation] = Field(default_factory=list)
    total_count: int | None = None
    pages: Pages | None = None

"""Records de usuário."""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from intercom_sdk.domain.common import Pages, Record
from intercom_sdk.domain.company import CompanyReference


class UserCompanies(Record):
    """Lista de empresas embutida no usuário (`company.list`)."""

    type: str | None = None
    companies: list[CompanyReference] = Field(default_factory=list)


class Tag(Record):
    type: str | None = None
    id: str | None = None
    name: str | None = None


class TagList(Record):
    """Tags do usuário (`tag.list`)."""

    type: str | None = None
    tags: list[Tag] = Field(default_factory=list)


class Segment(Record):
    type: str | None = None
    id: str | None = None
    name: str | None = None


class SegmentList(Record):
    """Segmentos do usuário (`segment.list`)."""

    type: str | None = None
    segments: list[Segment] = Field(default_factory=list)


class User(Record):
    """Usuário.

    `id` é atribuído pelo servidor; `user_id` é o id externo definido pelo
    integrador; `email` é a chave natural.

    A API devolve `companies`, `tags` e `segments` embrulhados em objetos
    de lista; uma lista simples também é aceita na construção.
    """

    type: str | None = None
    id: str | None = None
    user_id: str | None = None
    email: str | None = None
    name: str | None = None
    phone: str | None = None
    signed_up_at: int | None = None
    last_request_at: int | None = None
    created_at: int | None = None
    updated_at: int | None = None
    session_count: int | None = None
    unsubscribed_from_emails: bool | None = None
    custom_attributes: dict[str, Any] | None = None
    companies: UserCompanies | None = None
    tags: TagList | None = None
    segments: SegmentList | None = None

    @field_validator("companies", "tags", "segments", mode="before")
    @classmethod
    def _wrap_plain_list(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, list):
            return {info.field_name: value}
        return value

    def to_request_body(self) -> dict[str, Any]:
        """Serializa para create/update.

        `companies` vai como lista simples; `tags` e `segments` são somente
        leitura e ficam fora do corpo.
        """
        body = self.model_dump(mode="json", exclude_none=True, exclude={"tags", "segments"})
        if "companies" in body:
            body["companies"] = body["companies"]["companies"]
        return body


class Users(Record):
    """Página de usuários."""

    type: str | None = None
    users: list[User] = Field(default_factory=list)
    total_count: int | None = None
    pages: Pages | None = None

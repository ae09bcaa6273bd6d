"""Records de empresa."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from intercom_sdk.domain.common import Pages, Record


class CompanyReference(Record):
    """Referência a empresa embutida em um usuário."""

    id: str | None = None
    company_id: str | None = None
    name: str | None = None
    remove: bool | None = None


class Company(Record):
    """Empresa. `company_id` é o id externo e `name` a chave natural."""

    type: str | None = None
    id: str | None = None
    company_id: str | None = None
    name: str | None = None
    plan: str | None = None
    monthly_spend: float | None = None
    size: int | None = None
    website: str | None = None
    industry: str | None = None
    remote_created_at: int | None = None
    created_at: int | None = None
    updated_at: int | None = None
    user_count: int | None = None
    session_count: int | None = None
    custom_attributes: dict[str, Any] | None = None


class Companies(Record):
    """Página de empresas."""

    type: str | None = None
    companies: list[Company] = Field(default_factory=list)
    total_count: int | None = None
    pages: Pages | None = None

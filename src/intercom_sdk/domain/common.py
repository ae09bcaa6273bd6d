"""Base comum dos records e metadados de paginação."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Base dos records da API.

    Campos desconhecidos são ignorados na desserialização e campos None
    nunca são enviados no corpo das requisições.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_request_body(self) -> dict[str, Any]:
        """Serializa o record para o corpo JSON (sem campos None)."""
        return self.model_dump(mode="json", exclude_none=True)


class Pages(Record):
    """Metadados da página retornada por um endpoint de listagem."""

    type: str | None = None
    page: int | None = None
    per_page: int | None = None
    total_pages: int | None = None
    next: str | None = None

    @property
    def has_next(self) -> bool:
        return bool(self.next)

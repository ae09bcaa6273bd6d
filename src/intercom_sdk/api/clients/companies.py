"""Client de empresas (endpoint `companies`).

Referência: https://developers.intercom.io/reference#companies
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from intercom_sdk.api.clients.base import ResourceClient
from intercom_sdk.api.connectors.models import ApiRequest
from intercom_sdk.api.payload_builders import build_record_body
from intercom_sdk.api.validators import IdentifierScheme, require_any_field, require_record
from intercom_sdk.domain import Companies, Company

if TYPE_CHECKING:
    from collections.abc import Mapping

    from intercom_sdk.api.validators import LookupTarget

    CompanyLookup = str | Company | Mapping[str, str] | LookupTarget


class CompaniesClient(ResourceClient):
    """Operações sobre empresas.

    Precedência de identificadores: `id` → `company_id` → `name`.
    """

    resource = "companies"
    identifiers = IdentifierScheme(primary="id", alternates=("company_id", "name"))

    def _build_upsert(self, company: Company | None, fields: tuple[str, ...], action: str) -> ApiRequest:
        require_record(company, "company")
        require_any_field(company, fields, action)
        return ApiRequest("POST", self.resource, json=build_record_body(company))

    def _build_create(self, company: Company | None) -> ApiRequest:
        return self._build_upsert(company, self.identifiers.alternates, "criar uma empresa")

    def _build_update(self, company: Company | None) -> ApiRequest:
        return self._build_upsert(company, self.identifiers.all_fields, "atualizar uma empresa")

    def create(self, company: Company) -> Company:
        """Cria uma empresa. Exige `company_id` ou `name`."""
        return self._send(self._build_create(company), Company)

    def update(self, company: Company) -> Company:
        return self._send(self._build_update(company), Company)

    def view(self, target: CompanyLookup) -> Company:
        return self._send(self._build_lookup("GET", target), Company)

    def list(self, parameters: Mapping[str, str] | None = None) -> Companies:
        return self._send(self._build_list(parameters), Companies)

    def delete(self, target: CompanyLookup) -> Company:
        return self._send(self._build_lookup("DELETE", target), Company)

    async def create_async(self, company: Company) -> Company:
        return await self._send_async(self._build_create(company), Company)

    async def update_async(self, company: Company) -> Company:
        return await self._send_async(self._build_update(company), Company)

    async def view_async(self, target: CompanyLookup) -> Company:
        return await self._send_async(self._build_lookup("GET", target), Company)

    async def list_async(self, parameters: Mapping[str, str] | None = None) -> Companies:
        return await self._send_async(self._build_list(parameters), Companies)

    async def delete_async(self, target: CompanyLookup) -> Company:
        return await self._send_async(self._build_lookup("DELETE", target), Company)

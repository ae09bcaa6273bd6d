"""Testes do CompaniesClient."""

from __future__ import annotations

from typing import Any

import pytest

from intercom_sdk.api.clients import CompaniesClient
from intercom_sdk.domain import Companies, Company
from intercom_sdk.utils.errors import InvalidArgument
from tests.fakes.fake_transport import (
    AsyncSpyTransport,
    RecordingHandler,
    SpyTransport,
    json_response,
    token_auth,
)

COMPANY_PAYLOAD = {"type": "company", "id": "5", "company_id": "c-1", "name": "Acme"}


def _client(handler: RecordingHandler) -> CompaniesClient:
    return CompaniesClient(token_auth(), http_transport=handler.transport())


class TestCompaniesClient:
    def test_create_by_company_id(self) -> None:
        handler = RecordingHandler(json_response(200, COMPANY_PAYLOAD))

        company = _client(handler).create(Company(company_id="c-1", plan="pro"))

        assert handler.last.method == "POST"
        assert handler.last.url.path == "/companies"
        assert handler.last_json() == {"company_id": "c-1", "plan": "pro"}
        assert company.id == "5"

    @pytest.mark.parametrize("company", [None, Company(), Company(id="5")])
    def test_create_requires_company_id_or_name(self, company: Any) -> None:
        spy = SpyTransport()
        client = CompaniesClient(token_auth(), transport=spy, async_transport=AsyncSpyTransport())

        with pytest.raises(InvalidArgument):
            client.create(company)

        assert spy.calls == []

    def test_update_accepts_primary_id(self) -> None:
        handler = RecordingHandler(json_response(200, COMPANY_PAYLOAD))

        _client(handler).update(Company(id="5", monthly_spend=99.0))

        assert handler.last_json() == {"id": "5", "monthly_spend": 99.0}

    def test_view_precedence(self) -> None:
        handler = RecordingHandler(json_response(200, COMPANY_PAYLOAD))
        client = _client(handler)

        client.view(Company(id="5", company_id="c-1", name="Acme"))
        client.view(Company(company_id="c-1", name="Acme"))
        client.view(Company(name="Acme"))

        assert handler.requests[0].url.path == "/companies/5"
        assert dict(handler.requests[1].url.params) == {"company_id": "c-1"}
        assert dict(handler.requests[2].url.params) == {"name": "Acme"}

    def test_list_and_delete(self) -> None:
        handler = RecordingHandler(json_response(200, {"type": "company.list", "companies": [COMPANY_PAYLOAD]}))
        client = _client(handler)

        companies = client.list()

        assert isinstance(companies, Companies)
        assert companies.companies[0].name == "Acme"

        handler_delete = RecordingHandler(json_response(200, COMPANY_PAYLOAD))
        _client(handler_delete).delete("5")
        assert handler_delete.last.method == "DELETE"
        assert handler_delete.last.url.path == "/companies/5"

    @pytest.mark.asyncio
    async def test_view_async(self) -> None:
        handler = RecordingHandler(json_response(200, COMPANY_PAYLOAD))

        company = await _client(handler).view_async({"company_id": "c-1"})

        assert company.company_id == "c-1"
        assert dict(handler.last.url.params) == {"company_id": "c-1"}

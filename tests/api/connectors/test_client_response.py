"""Testes para o envelope de resposta (api.connectors.response)."""

from __future__ import annotations

import httpx
import pytest

from intercom_sdk.api.connectors import ApiRequest, ClientResponse, build_client_response
from intercom_sdk.domain import User, Users
from intercom_sdk.utils.errors import ApiError, DecodeFailure, NotFoundError

REQUEST = ApiRequest("GET", "users/42")

NOT_FOUND_BODY = {
    "type": "error.list",
    "request_id": "req-1",
    "errors": [{"code": "not_found", "message": "User Not Found"}],
}


class TestSuccess:
    def test_valid_body_becomes_result(self) -> None:
        response = httpx.Response(200, json={"type": "user", "id": "42", "user_id": "abc"})

        envelope = build_client_response(response, User, REQUEST)

        assert envelope.ok
        assert envelope.status_code == 200
        assert envelope.error is None
        assert envelope.unwrap() == User(type="user", id="42", user_id="abc")

    def test_unknown_fields_are_ignored(self) -> None:
        response = httpx.Response(200, json={"id": "42", "brand_new_field": True})
        assert build_client_response(response, User, REQUEST).unwrap().id == "42"

    def test_collection(self) -> None:
        response = httpx.Response(
            200,
            json={
                "type": "user.list",
                "users": [{"id": "1"}, {"id": "2"}],
                "total_count": 2,
                "pages": {"page": 1, "per_page": 50, "total_pages": 1, "next": None},
            },
        )
        users = build_client_response(response, Users, ApiRequest("GET", "users")).unwrap()
        assert [u.id for u in users.users] == ["1", "2"]
        assert users.pages is not None
        assert users.pages.has_next is False


class TestDecodeFailure:
    def test_invalid_json(self) -> None:
        response = httpx.Response(200, text="<html>oops</html>")

        envelope = build_client_response(response, User, REQUEST)

        assert not envelope.ok
        assert isinstance(envelope.error, DecodeFailure)
        assert envelope.raw_body == "<html>oops</html>"
        with pytest.raises(DecodeFailure, match="não é JSON válido"):
            envelope.unwrap()

    def test_empty_body(self) -> None:
        envelope = build_client_response(httpx.Response(200, text=""), User, REQUEST)
        assert isinstance(envelope.error, DecodeFailure)

    def test_shape_mismatch(self) -> None:
        response = httpx.Response(200, json={"id": "42", "session_count": "many"})
        envelope = build_client_response(response, User, REQUEST)
        assert isinstance(envelope.error, DecodeFailure)
        assert not isinstance(envelope.error, ApiError)

    def test_json_array_is_not_a_record(self) -> None:
        envelope = build_client_response(httpx.Response(200, json=[1, 2]), User, REQUEST)
        assert isinstance(envelope.error, DecodeFailure)


class TestApiError:
    def test_404_becomes_not_found(self) -> None:
        envelope = build_client_response(httpx.Response(404, json=NOT_FOUND_BODY), User, REQUEST)

        assert isinstance(envelope.error, NotFoundError)
        assert envelope.error.status_code == 404
        assert envelope.error.codes == ["not_found"]
        assert envelope.error.request_id == "req-1"
        assert envelope.error.errors[0].message == "User Not Found"

    def test_validation_error_keeps_server_code(self) -> None:
        body = {"type": "error.list", "errors": [{"code": "parameter_invalid", "message": "bad"}]}
        envelope = build_client_response(httpx.Response(400, json=body), User, REQUEST)

        assert type(envelope.error) is ApiError
        assert "parameter_invalid: bad" in str(envelope.error)

    def test_non_json_error_body(self) -> None:
        envelope = build_client_response(httpx.Response(502, text="Bad Gateway"), User, REQUEST)

        assert type(envelope.error) is ApiError
        assert envelope.error.errors == ()
        assert "Bad Gateway" in str(envelope.error)

    def test_single_error_object(self) -> None:
        body = {"error": {"code": "unauthorized", "message": "Access Token Invalid"}}
        envelope = build_client_response(httpx.Response(401, json=body), User, REQUEST)
        assert envelope.error is not None
        assert envelope.error.codes == ["unauthorized"]  # type: ignore[union-attr]


class TestEnvelopeInvariant:
    def test_requires_exactly_one_of_result_or_error(self) -> None:
        with pytest.raises(ValueError):
            ClientResponse(status_code=200, raw_body="")
        with pytest.raises(ValueError):
            ClientResponse(
                status_code=200,
                raw_body="",
                result=User(id="1"),
                error=DecodeFailure("x", status_code=200),
            )

    def test_is_frozen(self) -> None:
        envelope = ClientResponse(status_code=200, raw_body="{}", result=User())
        with pytest.raises(AttributeError):
            envelope.status_code = 500  # type: ignore[misc]

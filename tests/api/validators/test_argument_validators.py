"""Testes para api.validators.arguments."""

from __future__ import annotations

import pytest

from intercom_sdk.api.validators import (
    has_value,
    require_any_field,
    require_id,
    require_non_empty_ids,
    require_positive_timestamp,
    require_record,
)
from intercom_sdk.domain import User
from intercom_sdk.utils.errors import InvalidArgument


class TestTimestamp:
    @pytest.mark.parametrize("timestamp", [0, -1, -1000])
    def test_non_positive_timestamps_are_rejected(self, timestamp: int) -> None:
        with pytest.raises(InvalidArgument, match="maior que zero"):
            require_positive_timestamp(timestamp)

    @pytest.mark.parametrize("timestamp", [1, 1_700_000_000])
    def test_positive_timestamps_are_returned(self, timestamp: int) -> None:
        assert require_positive_timestamp(timestamp) == timestamp

    def test_bool_is_not_a_timestamp(self) -> None:
        with pytest.raises(InvalidArgument, match="inteiro"):
            require_positive_timestamp(True)


class TestIdentifiers:
    def test_has_value(self) -> None:
        assert has_value("x")
        assert has_value(0)
        assert not has_value(None)
        assert not has_value("")

    def test_require_id(self) -> None:
        assert require_id("42", "id") == "42"
        with pytest.raises(InvalidArgument, match="'id' é obrigatório"):
            require_id(None, "id")

    def test_require_record(self) -> None:
        require_record(User(), "user")
        with pytest.raises(InvalidArgument, match="'user' é obrigatório"):
            require_record(None, "user")

    def test_require_any_field(self) -> None:
        require_any_field(User(email="a@b.c"), ("user_id", "email"), "criar")
        with pytest.raises(InvalidArgument, match="'user_id', 'email'"):
            require_any_field(User(name="Ana"), ("user_id", "email"), "criar")


class TestCompanyIds:
    def test_none_is_rejected(self) -> None:
        with pytest.raises(InvalidArgument, match="obrigatório"):
            require_non_empty_ids(None, "company_ids")

    def test_empty_is_rejected(self) -> None:
        with pytest.raises(InvalidArgument, match="não pode ser vazio"):
            require_non_empty_ids([], "company_ids")

    def test_blank_item_is_rejected(self) -> None:
        with pytest.raises(InvalidArgument, match="id vazio"):
            require_non_empty_ids(["c1", ""], "company_ids")

    def test_generator_is_materialized(self) -> None:
        assert require_non_empty_ids((c for c in ("c1", "c2")), "company_ids") == ["c1", "c2"]

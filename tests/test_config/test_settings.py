"""Testes para config.settings (IntercomSettings)."""

from __future__ import annotations

import pytest

from intercom_sdk.api.clients import UsersClient
from intercom_sdk.config.settings import (
    INTERCOM_API_BASE_URL,
    IntercomSettings,
    get_intercom_settings,
)
from intercom_sdk.utils.errors import InvalidArgument
from tests.fakes.fake_transport import RecordingHandler, json_response


class TestIntercomSettings:
    def test_defaults(self) -> None:
        settings = IntercomSettings()
        assert settings.api_base_url == INTERCOM_API_BASE_URL
        assert settings.request_timeout_seconds == 30.0

    def test_validate_reports_missing_credentials(self) -> None:
        errors = IntercomSettings().validate()
        assert any("INTERCOM_ACCESS_TOKEN" in error for error in errors)

    def test_validate_ok_with_token(self) -> None:
        assert IntercomSettings(access_token="tok").validate() == []

    def test_validate_ok_with_basic_auth(self) -> None:
        assert IntercomSettings(app_id="app", api_key="key").validate() == []

    def test_validate_bad_timeout_and_url(self) -> None:
        errors = IntercomSettings(
            access_token="tok",
            request_timeout_seconds=0,
            api_base_url="ftp://x",
        ).validate()
        assert len(errors) == 2

    def test_empty_base_url_resolves_to_default(self) -> None:
        assert IntercomSettings(api_base_url="").resolved_base_url == INTERCOM_API_BASE_URL

    def test_build_authentication(self) -> None:
        assert IntercomSettings(access_token="tok").build_authentication().scheme == "bearer"
        assert IntercomSettings(app_id="a", api_key="k").build_authentication().scheme == "basic"
        with pytest.raises(InvalidArgument):
            IntercomSettings().build_authentication()

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INTERCOM_ACCESS_TOKEN", "env-token")
        monkeypatch.setenv("INTERCOM_API_BASE_URL", "https://api.eu.intercom.io/")
        monkeypatch.setenv("INTERCOM_REQUEST_TIMEOUT_SECONDS", "5")
        get_intercom_settings.cache_clear()
        try:
            settings = get_intercom_settings()
        finally:
            get_intercom_settings.cache_clear()

        assert settings.access_token == "env-token"
        assert settings.api_base_url == "https://api.eu.intercom.io/"
        assert settings.request_timeout_seconds == 5.0

    def test_client_from_settings(self) -> None:
        handler = RecordingHandler(json_response(200, {"id": "42"}))
        settings = IntercomSettings(access_token="tok", user_agent="my-app")

        client = UsersClient.from_settings(settings, http_transport=handler.transport())
        client.view("42")

        assert handler.last.headers["Authorization"] == "Bearer tok"
        assert handler.last.headers["User-Agent"] == "my-app"
        assert str(handler.last.url) == "https://api.intercom.io/users/42"

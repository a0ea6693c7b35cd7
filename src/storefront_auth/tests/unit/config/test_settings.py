# ABOUTME: Unit tests for CoreSettings class and configuration composition
# ABOUTME: Tests inheritance of base and auth settings and the cached accessor

import pytest

from storefront_auth.config._base import BaseCoreSettings
from storefront_auth.config.auth import AuthClientSettings
from storefront_auth.config.settings import CoreSettings, get_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("ENV", "APP_NAME", "TOKEN_EXPIRY_MARGIN_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestCoreSettings:
    """Test suite for CoreSettings class."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_composes_base_and_auth_settings(self):
        settings = CoreSettings()

        assert isinstance(settings, BaseCoreSettings)
        assert isinstance(settings, AuthClientSettings)
        assert settings.APP_NAME == "Storefront"
        assert settings.TOKEN_EXPIRY_MARGIN_SECONDS == 300

    @pytest.mark.unit
    @pytest.mark.config
    def test_validators_of_both_parents_apply(self):
        settings = CoreSettings(ENV="prod", API_BASE_URL="https://shop.example.com/")

        assert settings.ENV == "production"
        assert settings.refresh_url == "https://shop.example.com/auth/refresh"

    @pytest.mark.unit
    @pytest.mark.config
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    @pytest.mark.unit
    @pytest.mark.config
    def test_cache_clear_reloads_environment(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("TOKEN_EXPIRY_MARGIN_SECONDS", "60")
        get_settings.cache_clear()

        second = get_settings()

        assert second is not first
        assert second.TOKEN_EXPIRY_MARGIN_SECONDS == 60

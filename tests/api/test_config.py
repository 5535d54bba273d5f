"""
Tests for configuration loading and fail-fast startup.
"""

import pytest

from tmdb_gateway.api.config import DEFAULT_TMDB_BASE_URL, Settings, load_settings
from tmdb_gateway.api.main import create_app
from tmdb_gateway.core.exceptions import ConfigurationError


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_loads_from_env(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "env-key")
        monkeypatch.delenv("TMDB_BASE_URL", raising=False)
        monkeypatch.delenv("TMDB_TIMEOUT", raising=False)

        settings = load_settings()

        assert settings == Settings(api_key="env-key", base_url=DEFAULT_TMDB_BASE_URL, timeout=10.0)

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "env-key")
        monkeypatch.setenv("TMDB_BASE_URL", "http://localhost:9000/3/")
        monkeypatch.setenv("TMDB_TIMEOUT", "2.5")

        settings = load_settings()

        assert settings.base_url == "http://localhost:9000/3"
        assert settings.timeout == 2.5

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_key(self, monkeypatch, value):
        """A missing or blank credential is a configuration error."""
        if value is None:
            monkeypatch.delenv("TMDB_API_KEY", raising=False)
        else:
            monkeypatch.setenv("TMDB_API_KEY", value)

        with pytest.raises(ConfigurationError):
            load_settings()

    @pytest.mark.parametrize("timeout", ["abc", "0", "-3"])
    def test_invalid_timeout(self, monkeypatch, timeout):
        monkeypatch.setenv("TMDB_API_KEY", "env-key")
        monkeypatch.setenv("TMDB_TIMEOUT", timeout)

        with pytest.raises(ConfigurationError):
            load_settings()

    def test_settings_immutable(self, settings):
        with pytest.raises(AttributeError):
            settings.api_key = "changed"

    def test_repr_masks_key(self, settings):
        assert "secret-key" not in repr(settings)


class TestStartup:
    """The app refuses to start without a credential."""

    def test_create_app_without_key(self, monkeypatch):
        monkeypatch.delenv("TMDB_API_KEY", raising=False)

        with pytest.raises(ConfigurationError):
            create_app()

    def test_create_app_with_key(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "env-key")

        app = create_app()

        assert app.state.settings.api_key == "env-key"
        assert app.state.query_client.resolver.settings is app.state.settings


class TestSettings:
    """Settings validate themselves however they are built."""

    @pytest.mark.parametrize("api_key", ["", "   "])
    def test_blank_key_rejected(self, api_key):
        with pytest.raises(ConfigurationError):
            Settings(api_key=api_key)

    def test_api_config_reexports_core_settings(self):
        """The HTTP layer and the core share one Settings type."""
        from tmdb_gateway.api import config
        from tmdb_gateway.core import settings as core_settings

        assert config.Settings is core_settings.Settings
        assert config.load_settings is core_settings.load_settings

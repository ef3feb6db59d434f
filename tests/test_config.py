# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================
# Tests for environment loading:
# - PORT default, override and empty-value fallback
# - Validation of out-of-range and malformed values
# =============================================================================

import pytest
from pydantic import ValidationError

from leetlab.config import Settings, get_settings


class TestPort:
    """Tests for the PORT setting."""

    def test_default_port_is_3000(self, monkeypatch, make_settings):
        """No PORT in the environment means 3000."""
        monkeypatch.delenv("PORT", raising=False)
        assert make_settings().PORT == 3000

    def test_port_from_environment(self, monkeypatch, make_settings):
        """PORT overrides the default."""
        monkeypatch.setenv("PORT", "8080")
        assert make_settings().PORT == 8080

    def test_empty_port_falls_back_to_default(self, monkeypatch, make_settings):
        """PORT= behaves like an unset variable."""
        monkeypatch.setenv("PORT", "")
        assert make_settings().PORT == 3000

    @pytest.mark.parametrize("value", ["abc", "-1", "0", "70000"])
    def test_invalid_port_rejected(self, monkeypatch, make_settings, value):
        """Non-numeric and out-of-range ports fail at startup."""
        monkeypatch.setenv("PORT", value)
        with pytest.raises(ValidationError):
            make_settings()


class TestOtherSettings:
    """Tests for the remaining settings."""

    def test_defaults(self, monkeypatch, make_settings):
        """Check defaults for a bare environment."""
        for name in ("HOST", "ENVIRONMENT", "DEBUG", "AUTH_ROUTER", "JSON_BODY_LIMIT_KB", "COOKIE_SECRET"):
            monkeypatch.delenv(name, raising=False)

        settings = make_settings()

        assert settings.HOST == "0.0.0.0"
        assert settings.ENVIRONMENT == "development"
        assert settings.DEBUG is False
        assert settings.AUTH_ROUTER == "leetlab.auth.routes:router"
        assert settings.COOKIE_SECRET is None
        assert settings.json_body_limit_bytes == 100 * 1024

    def test_invalid_environment_rejected(self, make_settings):
        """ENVIRONMENT must be one of the known values."""
        with pytest.raises(ValidationError):
            make_settings(ENVIRONMENT="qa")

    def test_body_limit_must_be_positive(self, make_settings):
        """A zero body limit is rejected."""
        with pytest.raises(ValidationError):
            make_settings(JSON_BODY_LIMIT_KB=0)

    def test_reads_env_file(self, tmp_path, monkeypatch):
        """Values are picked up from a .env file."""
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("COOKIE_SECRET", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("PORT=4321\nCOOKIE_SECRET=from-dotenv\n")

        settings = Settings(_env_file=env_file)

        assert settings.PORT == 4321
        assert settings.COOKIE_SECRET == "from-dotenv"

    def test_get_settings_is_cached(self, clear_settings_cache):
        """get_settings returns the same instance until the cache is cleared."""
        assert get_settings() is get_settings()

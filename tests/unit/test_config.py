"""Test Settings loading."""

from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from tradelog_analytics.core.config import Settings, load_settings
from tradelog_analytics.core.errors import ConfigError


class TestSettingsDefaults:
    def test_default_settings(self, settings):
        assert settings.analytics.page_size == 20
        assert settings.analytics.report_timezone == "UTC"
        assert settings.observability.log_level == "INFO"
        assert settings.observability.log_format == "json"

    def test_tzinfo(self, settings):
        assert settings.analytics.tzinfo == ZoneInfo("UTC")


class TestValidation:
    def test_unknown_timezone(self):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            Settings(analytics={"report_timezone": "Mars/Olympus"})

    def test_page_size_positive(self):
        with pytest.raises(ValidationError):
            Settings(analytics={"page_size": 0})


class TestLoadSettings:
    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.toml")
        assert settings.analytics.page_size == 20

    def test_toml_file(self, tmp_path):
        path = tmp_path / "analytics.toml"
        path.write_text(
            '[analytics]\npage_size = 50\nreport_timezone = "Europe/London"\n'
            '[observability]\nlog_format = "console"\n'
        )
        settings = load_settings(path)
        assert settings.analytics.page_size == 50
        assert settings.analytics.report_timezone == "Europe/London"
        assert settings.observability.log_format == "console"

    def test_overrides(self):
        settings = load_settings(overrides={"analytics": {"page_size": 5}})
        assert settings.analytics.page_size == 5

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("[analytics\npage_size = ")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TRADELOG_ANALYTICS__PAGE_SIZE", "7")
        assert Settings().analytics.page_size == 7

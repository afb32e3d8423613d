"""
Unit tests for reader settings using Pydantic Settings.
"""

import pytest
from pydantic import ValidationError


class TestReaderSettings:
    """Test suite for ReaderSettings."""

    def test_defaults(self):
        """Defaults should keep text as-is and accept any root."""
        from config_file_reader.config import ReaderSettings

        settings = ReaderSettings()

        assert settings.trim_text is False
        assert settings.expected_root is None
        assert settings.huge_tree is False
        assert settings.resolve_entities == "internal"
        assert settings.fallback_encodings == []

    def test_loads_from_environment(self, monkeypatch):
        """CONFIG_READER_* variables should populate settings."""
        from config_file_reader.config import ReaderSettings

        monkeypatch.setenv("CONFIG_READER_TRIM_TEXT", "true")
        monkeypatch.setenv("CONFIG_READER_EXPECTED_ROOT", "config")
        monkeypatch.setenv("CONFIG_READER_FALLBACK_ENCODINGS", '["euc-kr", "latin-1"]')

        settings = ReaderSettings()

        assert settings.trim_text is True
        assert settings.expected_root == "config"
        assert settings.fallback_encodings == ["euc-kr", "latin-1"]

    def test_blank_expected_root_means_any(self, monkeypatch):
        from config_file_reader.config import ReaderSettings

        monkeypatch.setenv("CONFIG_READER_EXPECTED_ROOT", "  ")

        assert ReaderSettings().expected_root is None

    def test_invalid_value_raises_validation_error(self, monkeypatch):
        from config_file_reader.config import ReaderSettings

        monkeypatch.setenv("CONFIG_READER_TRIM_TEXT", "sometimes")

        with pytest.raises(ValidationError):
            ReaderSettings()

    def test_explicit_values_override_environment(self, monkeypatch):
        from config_file_reader.config import ReaderSettings

        monkeypatch.setenv("CONFIG_READER_TRIM_TEXT", "true")

        assert ReaderSettings(trim_text=False).trim_text is False


class TestGetSettingsSingleton:
    """Test suite for get_settings() singleton pattern."""

    def test_returns_same_instance(self):
        from config_file_reader.config import get_settings

        assert get_settings() is get_settings()

    def test_reset_rereads_environment(self, monkeypatch):
        from config_file_reader.config import get_settings, reset_settings

        first = get_settings()
        monkeypatch.setenv("CONFIG_READER_TRIM_TEXT", "true")

        assert get_settings().trim_text is False

        reset_settings()

        second = get_settings()
        assert second is not first
        assert second.trim_text is True

    def test_reader_uses_global_settings_by_default(self, monkeypatch):
        from config_file_reader import ConfigReader

        monkeypatch.setenv("CONFIG_READER_TRIM_TEXT", "true")

        reader = ConfigReader.from_string("<config><s><v> x </v></s></config>", "s")

        assert reader.get_string("v") == "x"

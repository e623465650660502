"""Tests for DateconvSettings."""

import pytest
from pydantic import ValidationError

from dateconv.config.settings import DateconvSettings
from dateconv.domain.layouts import Layout


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = DateconvSettings.load()
        assert settings.default_layout is Layout.PRIMARY
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self) -> None:
        settings = DateconvSettings.load()
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]


class TestEnvVars:
    def test_env_layout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATECONV_DEFAULT_LAYOUT", "secondary")
        assert DateconvSettings.load().default_layout is Layout.SECONDARY

    def test_env_flags(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATECONV_VERBOSE", "true")
        monkeypatch.setenv("DATECONV_LOG_JSON", "1")
        settings = DateconvSettings.load()
        assert settings.verbose is True
        assert settings.log_json is True

    def test_unknown_layout_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATECONV_DEFAULT_LAYOUT", "american")
        with pytest.raises(ValidationError):
            DateconvSettings.load()


class TestOverrides:
    def test_override_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATECONV_DEFAULT_LAYOUT", "secondary")
        settings = DateconvSettings.load(default_layout=Layout.PRIMARY_DISPLAY)
        assert settings.default_layout is Layout.PRIMARY_DISPLAY

    def test_none_override_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATECONV_VERBOSE", "true")
        assert DateconvSettings.load(verbose=None).verbose is True

"""Tests for settings loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from venomock import ConfigValidationError, MockSettings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "VENOMOCK_MAX_WIDTH",
        "VENOMOCK_MAX_LENGTH",
        "VENOMOCK_MAX_STRING",
        "VENOMOCK_MAX_DEPTH",
        "VENOMOCK_LOG_CALLS",
        "VENOMOCK_SHOW_CANDIDATES",
    ):
        monkeypatch.delenv(key, raising=False)


class TestMockSettings:
    """Tests for MockSettings."""

    def test_defaults(self) -> None:
        settings = MockSettings()
        assert settings.max_width == 120
        assert settings.max_length is None
        assert settings.log_calls is True
        assert settings.show_candidates is True

    def test_rejects_narrow_width(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            MockSettings(max_width=5)
        assert exc_info.value.field == "max_width"
        assert "(field: max_width)" in str(exc_info.value)

    def test_rejects_non_positive_limits(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            MockSettings(max_depth=0)
        assert exc_info.value.field == "max_depth"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VENOMOCK_MAX_STRING", "40")
        assert MockSettings().max_string == 40


class TestLoadSettings:
    """Tests for load_settings."""

    def test_without_file(self) -> None:
        assert load_settings() == MockSettings()

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        assert load_settings(tmp_path / "absent.yaml").max_width == 120

    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "venomock.yaml"
        path.write_text("max_width: 60\nshow_candidates: false\n")
        settings = load_settings(path)
        assert settings.max_width == 60
        assert settings.show_candidates is False

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "venomock.yaml"
        path.write_text("max_width: 60\nlog_calls: true\n")
        monkeypatch.setenv("VENOMOCK_MAX_WIDTH", "90")
        monkeypatch.setenv("VENOMOCK_LOG_CALLS", "no")
        settings = load_settings(path)
        assert settings.max_width == 90
        assert settings.log_calls is False

    def test_invalid_env_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VENOMOCK_MAX_WIDTH", "wide")
        with pytest.raises(ConfigValidationError) as exc_info:
            load_settings()
        assert exc_info.value.field == "max_width"

    def test_invalid_env_boolean(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VENOMOCK_LOG_CALLS", "ture")
        with pytest.raises(ConfigValidationError) as exc_info:
            load_settings()
        assert exc_info.value.field == "log_calls"

    def test_file_must_hold_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "venomock.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigValidationError):
            load_settings(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "venomock.yaml"
        path.write_text("")
        assert load_settings(path) == MockSettings()

"""Tests for conversion settings persistence."""

import pytest
import yaml
from loguru import logger

from ico_builder.settings.common import app_config_dir
from ico_builder.settings.conversion import (
    CONVERSION_STORE_VERSION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_WORKERS,
    get_default_conversion_settings,
    load_conversion_settings,
    save_conversion_settings,
)


@pytest.fixture(autouse=True)
def _patch_store_path(tmp_path, monkeypatch):
    """Redirect the settings store to a temp directory for every test."""
    store_file = tmp_path / "conversion.yaml"
    monkeypatch.setattr(
        "ico_builder.settings.conversion._conversion_store_path",
        lambda: store_file,
    )
    return store_file


@pytest.fixture
def store_file(tmp_path):
    return tmp_path / "conversion.yaml"


@pytest.fixture
def warning_messages():
    """Collect loguru warnings emitted during a test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


def _write(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


# ── app_config_dir ───────────────────────────────────────────────────


class TestAppConfigDir:
    def test_uses_xdg_config_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert app_config_dir() == tmp_path / "ico_builder"

    def test_falls_back_to_home(self, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert app_config_dir().parts[-2:] == (".config", "ico_builder")


# ── get_default_conversion_settings ──────────────────────────────────


class TestGetDefaultConversionSettings:
    def test_expected_values(self):
        assert get_default_conversion_settings() == {
            "version": CONVERSION_STORE_VERSION,
            "max_workers": DEFAULT_MAX_WORKERS,
            "include_mask_in_size": False,
            "log_level": DEFAULT_LOG_LEVEL,
        }

    def test_returns_fresh_dict_each_call(self):
        d1 = get_default_conversion_settings()
        d2 = get_default_conversion_settings()
        assert d1 is not d2
        assert d1 == d2


# ── load_conversion_settings ─────────────────────────────────────────


class TestLoadConversionSettings:
    def test_returns_defaults_when_no_file(self):
        assert load_conversion_settings() == get_default_conversion_settings()

    def test_returns_defaults_when_file_is_empty(self, store_file):
        store_file.write_text("", encoding="utf-8")
        assert load_conversion_settings() == get_default_conversion_settings()

    def test_returns_defaults_when_file_is_invalid_yaml(self, store_file):
        store_file.write_text("max_workers: [unclosed", encoding="utf-8")
        assert load_conversion_settings() == get_default_conversion_settings()

    def test_returns_defaults_when_file_contains_list(self, store_file):
        _write(store_file, [1, 2])
        assert load_conversion_settings() == get_default_conversion_settings()

    def test_loads_max_workers(self, store_file):
        _write(store_file, {"max_workers": 8})
        assert load_conversion_settings()["max_workers"] == 8

    @pytest.mark.parametrize("value", [0, 33, -1, "4", True, 2.5])
    def test_ignores_invalid_max_workers(self, store_file, value):
        _write(store_file, {"max_workers": value})
        assert load_conversion_settings()["max_workers"] == DEFAULT_MAX_WORKERS

    def test_loads_include_mask_in_size(self, store_file):
        _write(store_file, {"include_mask_in_size": True})
        assert load_conversion_settings()["include_mask_in_size"] is True

    def test_ignores_non_bool_include_mask_in_size(self, store_file):
        _write(store_file, {"include_mask_in_size": 1})
        assert load_conversion_settings()["include_mask_in_size"] is False

    def test_log_level_is_normalized(self, store_file):
        _write(store_file, {"log_level": "debug"})
        assert load_conversion_settings()["log_level"] == "DEBUG"

    def test_ignores_unknown_log_level(self, store_file):
        _write(store_file, {"log_level": "VERBOSE"})
        assert load_conversion_settings()["log_level"] == DEFAULT_LOG_LEVEL

    def test_ignores_unknown_keys(self, store_file):
        _write(store_file, {"sizes": [64]})
        settings = load_conversion_settings()
        assert "sizes" not in settings
        assert settings == get_default_conversion_settings()

    def test_warns_when_file_is_not_a_mapping(self, store_file, warning_messages):
        _write(store_file, [1, 2])
        load_conversion_settings()
        assert any("expected a mapping" in m for m in warning_messages)

    @pytest.mark.parametrize(
        "key, value",
        [
            ("max_workers", 0),
            ("max_workers", "4"),
            ("include_mask_in_size", "yes"),
            ("log_level", "VERBOSE"),
        ],
    )
    def test_warns_on_invalid_value(self, store_file, warning_messages, key, value):
        _write(store_file, {key: value})
        assert load_conversion_settings() == get_default_conversion_settings()
        assert any(key in m for m in warning_messages)

    def test_valid_file_does_not_warn(self, store_file, warning_messages):
        _write(store_file, {"max_workers": 2, "include_mask_in_size": True, "log_level": "info"})
        load_conversion_settings()
        assert warning_messages == []

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        _write(path, {"max_workers": 2})
        assert load_conversion_settings(path)["max_workers"] == 2


# ── save_conversion_settings ─────────────────────────────────────────


class TestSaveConversionSettings:
    def test_creates_file(self, store_file):
        save_conversion_settings(get_default_conversion_settings())
        assert store_file.exists()

    def test_saved_content(self, store_file):
        save_conversion_settings({"max_workers": 2, "include_mask_in_size": True})
        data = yaml.safe_load(store_file.read_text(encoding="utf-8"))
        assert data == {
            "version": CONVERSION_STORE_VERSION,
            "max_workers": 2,
            "include_mask_in_size": True,
            "log_level": DEFAULT_LOG_LEVEL,
        }

    def test_creates_parent_directories(self, tmp_path):
        nested = tmp_path / "deep" / "nested" / "conversion.yaml"
        save_conversion_settings(get_default_conversion_settings(), nested)
        assert nested.exists()

    def test_save_then_load(self):
        settings = {"max_workers": 1, "include_mask_in_size": True, "log_level": "WARNING"}
        save_conversion_settings(settings)
        loaded = load_conversion_settings()
        assert loaded["max_workers"] == 1
        assert loaded["include_mask_in_size"] is True
        assert loaded["log_level"] == "WARNING"

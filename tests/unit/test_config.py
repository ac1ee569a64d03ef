from pathlib import Path

import pytest

from src.config.loader import apply_env_overrides, load_settings
from src.config.models import AppSettings

PROJECT_ROOT = Path(__file__).parent.parent.parent


def test_missing_file_uses_defaults(tmp_path):
    settings = load_settings(tmp_path / "nope.yaml")

    assert settings == AppSettings()
    assert settings.api.base_url == "https://jsonplaceholder.typicode.com"
    assert settings.api.collection_path == "/users"
    assert settings.ui.surface_errors is False
    assert settings.sync.refresh_after_mutation is False


def test_project_settings_file_is_valid():
    settings = load_settings(PROJECT_ROOT / "settings.yaml")
    assert settings.ui.title == "Person Listings"


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("")
    assert load_settings(path) == AppSettings()


def test_partial_file_overrides(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "api:\n"
        "  base_url: http://localhost:8010/\n"
        "  collection_path: people\n"
        "ui:\n"
        "  surface_errors: true\n"
    )

    settings = load_settings(path)

    assert settings.api.base_url == "http://localhost:8010"
    assert settings.api.collection_path == "/people"
    assert settings.ui.surface_errors is True
    assert settings.api.timeout_seconds == 10.0


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("api: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_settings(path)


def test_unknown_key_raises(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("api:\n  retries: 3\n")
    with pytest.raises(ValueError, match="validation failed"):
        load_settings(path)


def test_non_mapping_raises(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="mapping"):
        load_settings(path)


def test_bad_scheme_raises(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("api:\n  base_url: ftp://example.com\n")
    with pytest.raises(ValueError):
        load_settings(path)


def test_env_overrides():
    settings = apply_env_overrides(
        AppSettings(),
        {
            "PEOPLE_API_BASE_URL": "http://127.0.0.1:8010",
            "PEOPLE_API_TIMEOUT": "2.5",
            "PEOPLE_OFFLINE": "yes",
        },
    )

    assert settings.api.base_url == "http://127.0.0.1:8010"
    assert settings.api.timeout_seconds == 2.5
    assert settings.api.offline is True


def test_env_overrides_leave_other_sections():
    base = AppSettings.model_validate({"ui": {"surface_errors": True}})
    settings = apply_env_overrides(base, {"PEOPLE_OFFLINE": "0"})

    assert settings.api.offline is False
    assert settings.ui.surface_errors is True


def test_bad_env_timeout_raises():
    with pytest.raises(ValueError, match="environment override"):
        apply_env_overrides(AppSettings(), {"PEOPLE_API_TIMEOUT": "-1"})

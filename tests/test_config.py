import json

import pytest
from pydantic import ValidationError

from config import ConfigurationError, load_settings

ENDPOINT = "https://localhost:8081/"


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def settings_dir(tmp_path):
    _write_json(
        tmp_path / "appsettings.json",
        {"cosmos_db": {"account": {"endpoint": ENDPOINT, "master_key": "base-key"}}},
    )
    return tmp_path


def test_base_file_provides_connection_settings(settings_dir):
    settings = load_settings(settings_dir, environment="production")

    assert settings.cosmos_db.account.endpoint == ENDPOINT
    assert settings.cosmos_db.account.master_key == "base-key"
    assert settings.environment == "production"
    assert settings.log_level == "WARNING"


def test_missing_base_file_fails_fast(tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings(tmp_path)

    assert isinstance(exc_info.value, FileNotFoundError)
    assert "appsettings.json" in str(exc_info.value)


def test_malformed_base_file_fails_fast(tmp_path):
    (tmp_path / "appsettings.json").write_text("{ not json", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        load_settings(tmp_path)


def test_missing_endpoint_fails_validation(tmp_path):
    _write_json(tmp_path / "appsettings.json", {"log_level": "INFO"})

    with pytest.raises(ValidationError):
        load_settings(tmp_path, environment="production")


def test_environment_file_overrides_single_nested_key(settings_dir):
    _write_json(
        settings_dir / "appsettings.production.json",
        {"cosmos_db": {"account": {"master_key": "production-key"}}, "log_level": "ERROR"},
    )

    settings = load_settings(settings_dir, environment="production")

    assert settings.cosmos_db.account.endpoint == ENDPOINT
    assert settings.cosmos_db.account.master_key == "production-key"
    assert settings.log_level == "ERROR"


def test_environment_variables_override_files(settings_dir, monkeypatch):
    _write_json(
        settings_dir / "appsettings.production.json",
        {"cosmos_db": {"account": {"master_key": "production-key"}}},
    )
    monkeypatch.setenv("COSMOS_DB__ACCOUNT__MASTER_KEY", "env-key")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = load_settings(settings_dir, environment="production")

    assert settings.cosmos_db.account.master_key == "env-key"
    assert settings.cosmos_db.account.endpoint == ENDPOINT
    assert settings.log_level == "DEBUG"


def test_local_secrets_are_layered_in_development(settings_dir, monkeypatch):
    (settings_dir / ".env").write_text("COSMOS_DB__ACCOUNT__MASTER_KEY=secret-key\n", encoding="utf-8")
    monkeypatch.setenv("COSMOS_DB__ACCOUNT__MASTER_KEY", "env-key")

    settings = load_settings(settings_dir, environment="Development")

    assert settings.is_development
    assert settings.cosmos_db.account.master_key == "secret-key"


def test_local_secrets_are_ignored_outside_development(settings_dir):
    (settings_dir / ".env").write_text("COSMOS_DB__ACCOUNT__MASTER_KEY=secret-key\n", encoding="utf-8")

    settings = load_settings(settings_dir, environment="production")

    assert not settings.is_development
    assert settings.cosmos_db.account.master_key == "base-key"


def test_environment_defaults_to_development(settings_dir):
    settings = load_settings(settings_dir)

    assert settings.environment == "development"
    assert settings.is_development


def test_environment_is_read_from_variable(settings_dir, monkeypatch):
    monkeypatch.setenv("APP_ENVIRONMENT", "staging")
    _write_json(settings_dir / "appsettings.staging.json", {"log_level": "INFO"})

    settings = load_settings(settings_dir)

    assert settings.environment == "staging"
    assert settings.log_level == "INFO"


def test_dotted_key_lookup(settings_dir):
    settings = load_settings(settings_dir, environment="production")

    assert settings.get("cosmos_db.account.endpoint") == ENDPOINT
    assert settings.get("cosmos_db.account.master_key") == "base-key"
    assert settings.get("cosmos_db.account.missing") is None
    assert settings.get("cosmos_db.account.endpoint.scheme", "n/a") == "n/a"


def test_settings_are_read_only(settings_dir):
    settings = load_settings(settings_dir, environment="production")

    with pytest.raises(ValidationError):
        settings.log_level = "DEBUG"
    with pytest.raises(ValidationError):
        settings.cosmos_db.account.endpoint = "https://elsewhere/"

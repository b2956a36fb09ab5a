"""Unit tests for settings and config file loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from dataverse_trace_client.config import ClientSettings, TelemetryConfig, load_config


def test_settings_defaults(clean_env: Path) -> None:
    settings = ClientSettings()

    assert settings.log_level == "INFO"
    assert settings.config_path == Path("config.json")
    assert settings.cli_executable == "az"
    assert settings.cli_shell == "pwsh"
    assert settings.lookup_shell == "pwsh.exe"
    assert settings.api_version == "9.0"
    assert settings.request_timeout is None


def test_settings_loads_from_dotenv(clean_env: Path) -> None:
    (clean_env / ".env").write_text(
        "\n".join(
            [
                "LOG_LEVEL=DEBUG",
                "DATAVERSE_CONFIG_PATH=conf/dev.json",
                "DATAVERSE_REQUEST_TIMEOUT=15",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = ClientSettings()

    assert settings.log_level == "DEBUG"
    assert settings.config_path == Path("conf/dev.json")
    assert settings.request_timeout == 15.0


def test_settings_rejects_non_positive_timeout(
    clean_env: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DATAVERSE_REQUEST_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        ClientSettings()


def test_load_config_reads_all_fields(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "environmentUrl": "https://org.crm.dynamics.com/",
                "customApiName": "contoso_Log",
                "entityName": "accounts",
            }
        ),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.environment_url == "https://org.crm.dynamics.com/"
    assert config.custom_api_name == "contoso_Log"
    assert config.entity_name == "accounts"


def test_load_config_tolerates_missing_and_null_fields(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        '{"environmentUrl": "https://org.crm.dynamics.com/", "entityName": null}',
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.custom_api_name == ""
    assert config.entity_name == ""


def test_load_config_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_config(tmp_path / "missing.json")


def test_load_config_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_config(path)


def test_config_is_immutable() -> None:
    config = TelemetryConfig(environment_url="https://org.crm.dynamics.com/")

    with pytest.raises(ValidationError):
        config.environment_url = "https://other.crm.dynamics.com/"  # type: ignore[misc]


def test_load_config_non_utf8_raises_validation_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_bytes(b'{"environmentUrl": "\xff\xfe"}')

    with pytest.raises(ValidationError):
        load_config(path)

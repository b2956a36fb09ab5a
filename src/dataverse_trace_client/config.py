"""Configuration for the trace client.

Two sources are involved:
- process settings, loaded from environment variables and a local `.env` file
- the telemetry configuration file (`config.json`), read once at startup

The config file mirrors the shape used by the sample clients::

    {
        "environmentUrl": "https://org.crm.dynamics.com/",
        "customApiName": "contoso_Log",
        "entityName": "accounts"
    }
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ClientSettings(BaseSettings):
    """Settings for the trace client process.

    Environment variables:
    - LOG_LEVEL                  (optional)
    - DATAVERSE_CONFIG_PATH      (optional)
    - AZURE_CLI_EXECUTABLE       (optional)
    - AZURE_CLI_SHELL            (optional, wraps the token request)
    - AZURE_CLI_LOOKUP_SHELL     (optional, Windows executable lookup)
    - DATAVERSE_API_VERSION      (optional)
    - DATAVERSE_REQUEST_TIMEOUT  (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `ClientSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    config_path: Path = Field(
        default=Path("config.json"),
        validation_alias="DATAVERSE_CONFIG_PATH",
        description="Path of the JSON file describing the Dataverse environment",
    )

    cli_executable: str = Field(
        default="az",
        validation_alias="AZURE_CLI_EXECUTABLE",
        description="File name of the Azure CLI executable to locate",
    )
    cli_shell: str = Field(
        default="pwsh",
        validation_alias="AZURE_CLI_SHELL",
        description="Shell used to wrap the Azure CLI token request",
    )
    lookup_shell: str = Field(
        default="pwsh.exe",
        validation_alias="AZURE_CLI_LOOKUP_SHELL",
        description="PowerShell binary used to resolve the Azure CLI path on Windows",
    )

    api_version: str = Field(
        default="9.0",
        validation_alias="DATAVERSE_API_VERSION",
        description="Dataverse Web API version used in request URLs",
    )
    request_timeout: float | None = Field(
        default=None,
        gt=0,
        validation_alias="DATAVERSE_REQUEST_TIMEOUT",
        description="Per-request timeout in seconds (unset means no timeout)",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )


class TelemetryConfig(BaseModel):
    """Contents of `config.json`.

    Absent fields load as empty strings; only presence is ever checked.
    """

    environment_url: str = Field(default="", alias="environmentUrl")
    custom_api_name: str = Field(default="", alias="customApiName")
    entity_name: str = Field(default="", alias="entityName")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("environment_url", "custom_api_name", "entity_name", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value


def load_config(path: Path) -> TelemetryConfig:
    """Read and parse the telemetry configuration file.

    Raises:
        OSError: If the file cannot be read.
        pydantic.ValidationError: If the content is not a valid UTF-8 JSON object.
    """

    config = TelemetryConfig.model_validate_json(path.read_bytes())
    logger.debug(
        "Loaded configuration",
        extra={
            "path": str(path),
            "environment_url": config.environment_url,
            "custom_api_name": config.custom_api_name,
            "entity_name": config.entity_name,
        },
    )
    return config

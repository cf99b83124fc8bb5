"""
Configuration module for the Cosmos DB SDK demos.

Settings are layered, lowest precedence first:
    appsettings.json                 - required base settings
    appsettings.<environment>.json   - optional environment overrides
    environment variables            - e.g. COSMOS_DB__ACCOUNT__MASTER_KEY
    .env                             - local secrets, development only
"""

import os
from pathlib import Path
from typing import Any, ClassVar, Optional, Tuple, Type, Union

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

BASE_SETTINGS_FILE = "appsettings.json"
SECRETS_FILE = ".env"
ENVIRONMENT_VARIABLE = "APP_ENVIRONMENT"
DEVELOPMENT = "development"


class ConfigurationError(FileNotFoundError):
    """Raised when a required settings file is missing."""


class CosmosAccountSettings(BaseModel):
    """Connection settings for the Cosmos DB account."""

    model_config = {"frozen": True}

    endpoint: str = Field(description="Cosmos DB account endpoint URL")
    master_key: Optional[str] = Field(
        default=None,
        description="Account key; DefaultAzureCredential is used when empty",
    )


class CosmosDbSettings(BaseModel):
    model_config = {"frozen": True}

    account: CosmosAccountSettings


class Settings(BaseSettings):
    """Application settings loaded from the layered configuration sources."""

    cosmos_db: CosmosDbSettings

    environment: str = Field(
        default=DEVELOPMENT,
        description="Name of the working environment",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )

    # Populated by load_settings() on a per-load subclass
    settings_files: ClassVar[Tuple[Path, ...]] = ()
    secrets_file: ClassVar[Optional[Path]] = None

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Highest precedence first
        sources = [init_settings]
        if cls.secrets_file is not None:
            sources.append(DotEnvSettingsSource(settings_cls, env_file=cls.secrets_file))
        sources.append(env_settings)
        for path in reversed(cls.settings_files):
            sources.append(JsonConfigSettingsSource(settings_cls, json_file=path))
        return tuple(sources)

    @property
    def is_development(self) -> bool:
        return is_development(self.environment)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a setting by dotted key, e.g. ``cosmos_db.account.endpoint``."""
        value: Any = self
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                return default
            value = getattr(value, part)
        return default if value is None else value


def is_development(environment: Optional[str]) -> bool:
    return not environment or environment.lower() == DEVELOPMENT


def load_settings(
    base_dir: Optional[Union[str, Path]] = None,
    environment: Optional[str] = None,
) -> Settings:
    """
    Build the settings from every configuration layer.

    Args:
        base_dir: Directory holding the settings files (current directory by default)
        environment: Environment name; read from APP_ENVIRONMENT when omitted

    Raises:
        ConfigurationError: appsettings.json does not exist
        json.JSONDecodeError: a settings file is not valid JSON
        pydantic.ValidationError: a required setting is missing
    """
    base_path = Path(base_dir) if base_dir is not None else Path.cwd()
    if environment is None:
        environment = os.getenv(ENVIRONMENT_VARIABLE, "")
    environment = environment or DEVELOPMENT

    base_file = base_path / BASE_SETTINGS_FILE
    if not base_file.is_file():
        raise ConfigurationError(
            f"The configuration file '{BASE_SETTINGS_FILE}' was not found and is not optional. "
            f"The expected physical path was '{base_file}'."
        )

    files = [base_file]
    override_file = base_path / f"appsettings.{environment}.json"
    if override_file.is_file():
        files.append(override_file)

    # Only add secrets in development
    secrets = base_path / SECRETS_FILE if is_development(environment) else None

    class LayeredSettings(Settings):
        settings_files: ClassVar[Tuple[Path, ...]] = tuple(files)
        secrets_file: ClassVar[Optional[Path]] = secrets

    return LayeredSettings(environment=environment)

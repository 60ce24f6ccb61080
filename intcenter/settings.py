"""
Configuration settings for the International Center website core.

This module provides a settings class with support for loading configuration
from TOML files and environment variables.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from intcenter.exceptions import ConfigError


class Environment(str, Enum):
    """Deployment environments."""

    DEVELOPMENT = "Development"
    STAGING = "Staging"
    PRODUCTION = "Production"


API_BASE_URLS: dict[Environment, str] = {
    Environment.DEVELOPMENT: "http://localhost:7220",
    Environment.STAGING: "https://api-staging.internationalcenter.com",
    Environment.PRODUCTION: "https://api.internationalcenter.com",
}


def normalize_environment(value: str | Environment | None) -> Environment:
    """Map a loose environment name onto a known environment.

    Anything containing ``prod`` is production, anything containing ``stag``
    is staging, and everything else (including nothing at all) is development.
    """
    if isinstance(value, Environment):
        return value
    normalized = (value or "").lower()
    if "prod" in normalized:
        return Environment.PRODUCTION
    if "stag" in normalized:
        return Environment.STAGING
    return Environment.DEVELOPMENT


class Settings(BaseSettings):
    """Main settings class.

    Handles loading configuration from TOML files and environment variables,
    environment variables taking priority.
    """

    model_config = SettingsConfigDict(
        toml_file=["settings.toml", "settings.custom.toml"],
        env_prefix="INTCENTER_",
        extra="ignore",
    )

    environment: Environment = Environment.DEVELOPMENT

    # Public gateway settings
    public_gateway_url: str | None = None
    services_timeout: float = 10.0
    services_retry_attempts: int = 3

    # Logging settings
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: str | None = None  # If None, will use ~/intcenter/logs
    log_rotation: str = "20 MB"
    log_retention: str = "1 week"
    log_format: str | None = None  # Use default if None

    @field_validator("environment", mode="before")
    @classmethod
    def _normalize_environment(cls, value: str | Environment | None) -> Environment:
        return normalize_environment(value)

    @field_validator("services_retry_attempts")
    @classmethod
    def _check_retry_attempts(cls, value: int) -> int:
        if value < 1:
            raise ValueError("services_retry_attempts must be at least 1")
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the sources for settings.

        Priority order: explicit arguments, environment variables, then TOML config files
        """
        return init_settings, env_settings, TomlConfigSettingsSource(settings_cls)

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_staging(self) -> bool:
        return self.environment == Environment.STAGING

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def api_base_url(self) -> str:
        """Base URL of the public gateway.

        An explicit ``public_gateway_url`` wins over the per-environment default.
        """
        if self.public_gateway_url:
            return self.public_gateway_url.rstrip("/")
        return API_BASE_URLS[self.environment]

    def get_log_dir(self) -> Path:
        """Get the log directory path.

        Returns:
            Path to the log directory. Uses log_dir if specified,
            otherwise ``~/intcenter/logs``.
        """
        if self.log_dir:
            return Path(self.log_dir)
        return Path.home() / "intcenter" / "logs"


@lru_cache
def get_settings() -> Settings:
    """Get the settings instance, with caching.

    Returns:
        Cached Settings instance

    Raises:
        ConfigError: If the environment or TOML files hold invalid values
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e

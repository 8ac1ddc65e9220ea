"""Configuration management for paasctl using Pydantic."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from paasctl.core.exceptions import ConfigError
from paasctl.core.output import OutputFormat
from paasctl.core.logging import LogLevel

DEFAULT_API_URL = "https://api.digitalocean.com"


class PlatformConfig(BaseModel):
    """Platform API connection settings."""

    api_url: str = DEFAULT_API_URL
    access_token: str | None = None
    timeout: int = 30

    def get_api_url(self) -> str:
        """Get the API base URL without a trailing slash."""
        return self.api_url.rstrip("/")

    def get_access_token(self) -> str | None:
        """Get access token from config or environment."""
        token = self.access_token
        if token == "from_env" or token is None:
            token = (
                os.environ.get("PAASCTL_ACCESS_TOKEN")
                or os.environ.get("DIGITALOCEAN_ACCESS_TOKEN")
            )
        return token


class AppsConfig(BaseModel):
    """App deployment wait settings."""

    max_api_failures: int = 3
    poll_interval: float = 5.0  # seconds between checks while in progress
    retry_delay: float = 1.0  # seconds before retrying a missing deployment

    @field_validator("max_api_failures")
    @classmethod
    def validate_max_api_failures(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_api_failures must be at least 1")
        return v

    @field_validator("poll_interval", "retry_delay")
    @classmethod
    def validate_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("delays must not be negative")
        return v


class ProfileConfig(BaseModel):
    """Profile configuration grouping all service settings."""

    platform: PlatformConfig = Field(default_factory=PlatformConfig)
    apps: AppsConfig = Field(default_factory=AppsConfig)


class GlobalConfig(BaseModel):
    """Global settings."""

    output_format: OutputFormat = OutputFormat.TABLE
    color: str = "auto"  # auto, always, never
    verbosity: LogLevel = LogLevel.WARNING
    confirm_destructive: bool = True

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        if v not in ("auto", "always", "never"):
            raise ValueError("color must be 'auto', 'always', or 'never'")
        return v


class PaasCtlConfig(BaseModel):
    """Main configuration model."""

    model_config = {"populate_by_name": True}

    version: str = "1"
    global_settings: GlobalConfig = Field(default_factory=GlobalConfig, alias="global")
    profiles: dict[str, ProfileConfig] = Field(default_factory=lambda: {"default": ProfileConfig()})

    def get_profile(self, name: str | None = None) -> ProfileConfig:
        """Get a profile by name, defaulting to 'default'."""
        profile_name = name or "default"
        if profile_name not in self.profiles:
            raise ConfigError(f"Profile '{profile_name}' not found")
        return self.profiles[profile_name]


class ConfigLoader:
    """Loads and merges configuration from multiple sources."""

    CONFIG_FILENAMES = ["paasctl.yaml", "paasctl.yml", ".paasctl.yaml", ".paasctl.yml"]

    def __init__(self):
        self._config: PaasCtlConfig | None = None

    def load(
        self,
        config_file: str | Path | None = None,
        profile: str | None = None,
    ) -> PaasCtlConfig:
        """Load configuration from files.

        Priority (highest to lowest):
        1. Explicitly specified config file
        2. Project config (./paasctl.yaml)
        3. User config (~/.paasctl/config.yaml)

        Args:
            config_file: Optional explicit config file path
            profile: Profile name that must exist once loaded

        Returns:
            Merged configuration
        """
        configs: list[dict[str, Any]] = []

        user_config_path = Path.home() / ".paasctl" / "config.yaml"
        if user_config_path.exists():
            configs.append(self._load_yaml_file(user_config_path))

        project_config = self._find_project_config()
        if project_config:
            configs.append(self._load_yaml_file(project_config))

        if config_file:
            config_path = Path(config_file)
            if not config_path.exists():
                raise ConfigError(f"Config file not found: {config_file}")
            configs.append(self._load_yaml_file(config_path))

        merged = self._merge_configs(configs)

        try:
            self._config = PaasCtlConfig(**merged)
        except ValueError as e:
            raise ConfigError(f"Invalid configuration: {e}")

        if profile:
            self._config.get_profile(profile)
        return self._config

    def _find_project_config(self) -> Path | None:
        """Find project config file in current or parent directories."""
        current = Path.cwd()

        while current != current.parent:
            for filename in self.CONFIG_FILENAMES:
                config_path = current / filename
                if config_path.exists():
                    return config_path
            current = current.parent

        return None

    def _load_yaml_file(self, path: Path) -> dict[str, Any]:
        """Load a YAML config file."""
        try:
            with open(path) as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}")

        if not isinstance(content, dict):
            raise ConfigError(f"Invalid config in {path}: expected a mapping")
        return content

    def _merge_configs(self, configs: list[dict[str, Any]]) -> dict[str, Any]:
        """Deep merge multiple configuration dictionaries."""
        result: dict[str, Any] = {}
        for config in configs:
            result = self._deep_merge(result, config)
        return result

    def _deep_merge(
        self,
        base: dict[str, Any],
        override: dict[str, Any],
    ) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


# Global config loader instance
_config_loader = ConfigLoader()


def load_config(
    config_file: str | Path | None = None,
    profile: str | None = None,
) -> PaasCtlConfig:
    """Load paasctl configuration.

    Args:
        config_file: Optional explicit config file path
        profile: Profile name to use

    Returns:
        Loaded configuration
    """
    return _config_loader.load(config_file, profile)


def get_default_config() -> PaasCtlConfig:
    """Get default configuration without loading from files."""
    return PaasCtlConfig()

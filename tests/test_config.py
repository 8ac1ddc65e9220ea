"""Tests for configuration management."""

import os

import pytest

from paasctl.config import (
    DEFAULT_API_URL,
    AppsConfig,
    ConfigLoader,
    GlobalConfig,
    PaasCtlConfig,
    PlatformConfig,
    get_default_config,
    load_config,
)
from paasctl.core.exceptions import ConfigError
from paasctl.core.output import OutputFormat


class TestPlatformConfig:
    """Tests for PlatformConfig."""

    def test_default_values(self):
        config = PlatformConfig()
        assert config.api_url == DEFAULT_API_URL
        assert config.access_token is None
        assert config.timeout == 30

    def test_token_from_config(self):
        config = PlatformConfig(access_token="config-token")
        assert config.get_access_token() == "config-token"

    def test_token_from_env(self):
        os.environ["PAASCTL_ACCESS_TOKEN"] = "env-token"
        assert PlatformConfig().get_access_token() == "env-token"

    def test_token_from_env_marker(self):
        os.environ["DIGITALOCEAN_ACCESS_TOKEN"] = "do-token"
        config = PlatformConfig(access_token="from_env")
        assert config.get_access_token() == "do-token"

    def test_api_url_strips_slash(self):
        config = PlatformConfig(api_url="https://api.test/")
        assert config.get_api_url() == "https://api.test"


class TestAppsConfig:
    """Tests for AppsConfig."""

    def test_default_values(self):
        config = AppsConfig()
        assert config.max_api_failures == 3
        assert config.poll_interval == 5
        assert config.retry_delay == 1

    def test_max_failures_must_be_positive(self):
        with pytest.raises(ValueError):
            AppsConfig(max_api_failures=0)

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            AppsConfig(poll_interval=-1)


class TestGlobalConfig:
    """Tests for GlobalConfig."""

    def test_defaults(self):
        config = GlobalConfig()
        assert config.output_format == OutputFormat.TABLE
        assert config.confirm_destructive is True

    def test_invalid_color(self):
        with pytest.raises(ValueError):
            GlobalConfig(color="sometimes")


class TestPaasCtlConfig:
    """Tests for PaasCtlConfig."""

    def test_default_profile(self):
        config = get_default_config()
        assert config.get_profile().platform.api_url == DEFAULT_API_URL

    def test_missing_profile(self):
        with pytest.raises(ConfigError):
            PaasCtlConfig().get_profile("nope")

    def test_global_alias(self):
        config = PaasCtlConfig(**{"global": {"output_format": "json"}})
        assert config.global_settings.output_format == OutputFormat.JSON


class TestConfigLoader:
    """Tests for ConfigLoader."""

    @pytest.fixture(autouse=True)
    def isolated_home(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        home.mkdir()
        work = tmp_path / "work"
        work.mkdir()
        monkeypatch.setenv("HOME", str(home))
        monkeypatch.chdir(work)
        return home

    def test_load_explicit_file(self, temp_config_file):
        config = ConfigLoader().load(temp_config_file)
        profile = config.get_profile()
        assert profile.platform.access_token == "config-token"
        assert profile.apps.poll_interval == 0
        assert profile.apps.max_api_failures == 3

    def test_load_named_profile(self, temp_config_file):
        config = load_config(temp_config_file, "staging")
        assert config.get_profile("staging").platform.api_url == "https://staging.api.test"

    def test_unknown_profile(self, temp_config_file):
        with pytest.raises(ConfigError):
            ConfigLoader().load(temp_config_file, "production")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            ConfigLoader().load(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("profiles: [unclosed\n")
        with pytest.raises(ConfigError):
            ConfigLoader().load(str(path))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n")
        with pytest.raises(ConfigError):
            ConfigLoader().load(str(path))

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("profiles:\n  default:\n    apps:\n      max_api_failures: 0\n")
        with pytest.raises(ConfigError):
            ConfigLoader().load(str(path))

    def test_project_file_overrides_user_file(self, isolated_home, tmp_path):
        user_dir = isolated_home / ".paasctl"
        user_dir.mkdir()
        (user_dir / "config.yaml").write_text(
            "profiles:\n  default:\n    platform:\n      api_url: https://user.api.test\n      timeout: 10\n"
        )
        (tmp_path / "work" / "paasctl.yaml").write_text(
            "profiles:\n  default:\n    platform:\n      api_url: https://project.api.test\n"
        )

        platform = ConfigLoader().load().get_profile().platform

        assert platform.api_url == "https://project.api.test"
        assert platform.timeout == 10

"""Pytest fixtures for paasctl tests."""

import os
from typing import Generator

import pytest
from click.testing import CliRunner

from paasctl.config import (
    PaasCtlConfig,
    ProfileConfig,
    PlatformConfig,
    AppsConfig,
)
from paasctl.core.context import PaasCtlContext
from paasctl.core.output import OutputFormat


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


@pytest.fixture
def mock_config() -> PaasCtlConfig:
    """Create a configuration that never sleeps while waiting."""
    return PaasCtlConfig(
        profiles={
            "default": ProfileConfig(
                platform=PlatformConfig(
                    api_url="https://api.test",
                    access_token="test-token",
                ),
                apps=AppsConfig(max_api_failures=3, poll_interval=0, retry_delay=0),
            )
        }
    )


@pytest.fixture
def mock_context(mock_config: PaasCtlConfig) -> PaasCtlContext:
    """Create a mock paasctl context."""
    return PaasCtlContext(
        config=mock_config,
        profile="default",
        output_format=OutputFormat.TABLE,
        verbose=0,
        quiet=False,
        color=False,
    )


@pytest.fixture(autouse=True)
def clean_env() -> Generator[None, None, None]:
    """Clean environment variables before each test."""
    env_vars = [
        "PAASCTL_ACCESS_TOKEN",
        "PAASCTL_API_URL",
        "PAASCTL_PROFILE",
        "PAASCTL_CONFIG",
        "DIGITALOCEAN_ACCESS_TOKEN",
    ]

    original = {k: os.environ.get(k) for k in env_vars}

    for k in env_vars:
        os.environ.pop(k, None)

    yield

    for k, v in original.items():
        if v is not None:
            os.environ[k] = v
        else:
            os.environ.pop(k, None)


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary config file."""
    config_content = """
version: "1"
global:
  output_format: table
profiles:
  default:
    platform:
      api_url: https://api.test
      access_token: config-token
    apps:
      poll_interval: 0
      retry_delay: 0
  staging:
    platform:
      api_url: https://staging.api.test
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_content)
    return str(config_file)


@pytest.fixture
def spec_file(tmp_path):
    """Write a minimal valid app spec."""
    path = tmp_path / "app.yaml"
    path.write_text(
        "name: sample\n"
        "region: nyc\n"
        "services:\n"
        "  - name: web\n"
        "    github:\n"
        "      repo: example/sample\n"
        "      branch: main\n"
        "    http_port: 8080\n"
    )
    return str(path)

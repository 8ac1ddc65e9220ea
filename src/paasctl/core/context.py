"""Click context object for sharing state across commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from paasctl.config import PaasCtlConfig, PlatformConfig, ProfileConfig, get_default_config
from paasctl.core.output import OutputFormat, OutputFormatter
from paasctl.core.logging import level_for, setup_logging

if TYPE_CHECKING:
    from paasctl.clients.apps import AppsClient
    from paasctl.clients.databases import DatabasesClient


class PaasCtlContext:
    """Shared context object for paasctl commands.

    This object is passed through Click's context mechanism and provides
    access to configuration, clients, and utilities.
    """

    def __init__(
        self,
        config: PaasCtlConfig | None = None,
        profile: str | None = None,
        output_format: OutputFormat | None = None,
        verbose: int = 0,
        quiet: bool = False,
        color: bool = True,
        access_token: str | None = None,
        api_url: str | None = None,
    ):
        self._config = config or get_default_config()
        self._profile_name = profile or "default"

        # Output settings (CLI overrides config)
        self._output_format = output_format or self._config.global_settings.output_format
        self._verbose = verbose
        self._quiet = quiet
        self._color = color

        # Connection overrides from the command line
        self._access_token = access_token
        self._api_url = api_url

        setup_logging(
            level_for(verbose, quiet, self._config.global_settings.verbosity),
            rich_output=color,
        )

        self._output = OutputFormatter(
            format=self._output_format,
            color=color,
            quiet=quiet,
        )

        # Lazy-loaded clients
        self._apps_client: AppsClient | None = None
        self._databases_client: DatabasesClient | None = None

    @property
    def config(self) -> PaasCtlConfig:
        """Get the loaded configuration."""
        return self._config

    @property
    def profile(self) -> ProfileConfig:
        """Get the current profile configuration."""
        return self._config.get_profile(self._profile_name)

    @property
    def profile_name(self) -> str:
        """Get the current profile name."""
        return self._profile_name

    @property
    def platform(self) -> PlatformConfig:
        """Platform connection settings with command-line overrides applied."""
        platform = self.profile.platform
        overrides: dict[str, Any] = {}
        if self._access_token:
            overrides["access_token"] = self._access_token
        if self._api_url:
            overrides["api_url"] = self._api_url
        if overrides:
            platform = platform.model_copy(update=overrides)
        return platform

    @property
    def output(self) -> OutputFormatter:
        """Get the output formatter."""
        return self._output

    @property
    def output_format(self) -> OutputFormat:
        """Get the output format."""
        return self._output_format

    @property
    def verbose(self) -> int:
        """Get verbosity level."""
        return self._verbose

    @property
    def quiet(self) -> bool:
        """Check if quiet mode is enabled."""
        return self._quiet

    @property
    def color(self) -> bool:
        """Check if color output is enabled."""
        return self._color

    @property
    def apps(self) -> "AppsClient":
        """Get or create the apps client."""
        if self._apps_client is None:
            from paasctl.clients.apps import AppsClient

            self._apps_client = AppsClient(self.platform)
        return self._apps_client

    @property
    def databases(self) -> "DatabasesClient":
        """Get or create the databases client."""
        if self._databases_client is None:
            from paasctl.clients.databases import DatabasesClient

            self._databases_client = DatabasesClient(self.platform)
        return self._databases_client

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask for user confirmation."""
        if not self._config.global_settings.confirm_destructive:
            return True
        return self._output.confirm(message, default)

    def close(self) -> None:
        """Close any open API clients."""
        for client in (self._apps_client, self._databases_client):
            if client is not None:
                client.close()


# Click decorator for passing context
pass_context = click.make_pass_decorator(PaasCtlContext, ensure=True)

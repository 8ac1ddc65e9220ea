"""Main CLI entry point for paasctl."""

import sys
from typing import Any

import click
from rich.console import Console

from paasctl import __version__
from paasctl.config import load_config
from paasctl.core.aliases import AliasedGroup
from paasctl.core.context import PaasCtlContext
from paasctl.core.output import OutputFormat
from paasctl.core.exceptions import PaasCtlError, ConfigError


CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


class OutputFormatType(click.ParamType):
    """Custom Click parameter type for output format."""

    name = "format"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> OutputFormat:
        if isinstance(value, OutputFormat):
            return value
        try:
            return OutputFormat(value.lower())
        except ValueError:
            self.fail(
                f"Invalid format '{value}'. Choose from: table, json, yaml, raw",
                param,
                ctx,
            )


OUTPUT_FORMAT = OutputFormatType()


def print_version(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"paasctl version {__version__}")
    ctx.exit()


@click.group(cls=AliasedGroup, context_settings=CONTEXT_SETTINGS)
@click.option(
    "-t",
    "--access-token",
    metavar="TOKEN",
    envvar="PAASCTL_ACCESS_TOKEN",
    help="API access token",
)
@click.option(
    "-u",
    "--api-url",
    metavar="URL",
    envvar="PAASCTL_API_URL",
    help="Override the default API endpoint",
)
@click.option(
    "-p",
    "--profile",
    metavar="NAME",
    envvar="PAASCTL_PROFILE",
    help="Configuration profile to use",
)
@click.option(
    "-o",
    "--output",
    "output_format",
    type=OUTPUT_FORMAT,
    metavar="FORMAT",
    help="Output format: table, json, yaml, raw",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for info, -vv for debug)",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Suppress non-essential output",
)
@click.option(
    "--no-color",
    is_flag=True,
    help="Disable colored output",
)
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True),
    metavar="FILE",
    envvar="PAASCTL_CONFIG",
    help="Path to config file",
)
@click.option(
    "--version",
    is_flag=True,
    callback=print_version,
    expose_value=False,
    is_eager=True,
    help="Show version and exit",
)
@click.pass_context
def cli(
    ctx: click.Context,
    access_token: str | None,
    api_url: str | None,
    profile: str | None,
    output_format: OutputFormat | None,
    verbose: int,
    quiet: bool,
    no_color: bool,
    config_file: str | None,
) -> None:
    """paasctl - manage apps on a hosted app platform.

    Create and update apps from app specs, trigger deployments and wait
    for them to go live, read logs, and manage database firewalls.

    \b
    Examples:
        paasctl apps list
        paasctl apps create --spec app.yaml
        paasctl apps create-deployment <app id> --wait
        paasctl databases firewalls list <database id>

    \b
    Configuration:
        ~/.paasctl/config.yaml    User configuration
        ./paasctl.yaml            Project configuration
        PAASCTL_*                 Environment variables
    """
    try:
        config = load_config(config_file, profile)

        ctx.obj = PaasCtlContext(
            config=config,
            profile=profile,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            color=not no_color,
            access_token=access_token,
            api_url=api_url,
        )
        ctx.call_on_close(ctx.obj.close)

    except ConfigError as e:
        console = Console(stderr=True)
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)


def register_commands() -> None:
    """Register all command groups."""
    from paasctl.commands.apps import apps
    from paasctl.commands.databases import databases

    cli.add_command(apps, aliases=["app", "a"])
    cli.add_command(databases, aliases=["db"])


register_commands()


@cli.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    paasctl_ctx: PaasCtlContext = ctx.obj
    platform = paasctl_ctx.platform
    apps_settings = paasctl_ctx.profile.apps
    config_data = {
        "profile": paasctl_ctx.profile_name,
        "output_format": paasctl_ctx.output_format.value,
        "verbose": paasctl_ctx.verbose,
        "platform": {
            "api_url": platform.get_api_url(),
            "has_access_token": bool(platform.get_access_token()),
            "timeout": platform.timeout,
        },
        "apps": {
            "max_api_failures": apps_settings.max_api_failures,
            "poll_interval": apps_settings.poll_interval,
            "retry_delay": apps_settings.retry_delay,
        },
    }
    paasctl_ctx.output.print_data(config_data, title="Current Configuration")


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except PaasCtlError as e:
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        console = Console(stderr=True)
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()

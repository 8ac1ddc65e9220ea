"""Shared helpers for app commands."""

from typing import Any

import click

from paasctl.apps import display, read_app_spec
from paasctl.apps.spec import AppSpec
from paasctl.core.context import PaasCtlContext

SPEC_HELP = 'Path to an app spec in JSON or YAML format. Set to "-" to read from stdin.'


def load_spec(path: str) -> AppSpec:
    """Read an app spec from a path, or stdin for "-"."""
    return read_app_spec(path, click.get_text_stream("stdin"))


def show_apps(ctx: PaasCtlContext, items: list[dict[str, Any]]) -> None:
    ctx.output.print_resources(items, [display.app_row(a) for a in items], display.APP_COLUMNS)


def show_deployments(ctx: PaasCtlContext, items: list[dict[str, Any]]) -> None:
    ctx.output.print_resources(
        items,
        [display.deployment_row(d) for d in items],
        display.DEPLOYMENT_COLUMNS,
    )

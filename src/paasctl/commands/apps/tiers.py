"""App tier and instance size commands."""

import click

from paasctl.apps import display
from paasctl.core.context import pass_context, PaasCtlContext
from paasctl.core.exceptions import PaasCtlError


@click.group()
def tier() -> None:
    """App tier operations - list, get, instance-size."""
    pass


@tier.command("list")
@pass_context
def list_tiers(ctx: PaasCtlContext) -> None:
    """List all the available app tiers."""
    try:
        tiers = ctx.apps.list_tiers()
        ctx.output.print_resources(tiers, [display.tier_row(t) for t in tiers], display.TIER_COLUMNS)

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to list tiers: {e}")
        raise click.Abort()


@tier.command("get")
@click.argument("slug")
@pass_context
def get_tier(ctx: PaasCtlContext, slug: str) -> None:
    """Retrieve information about a specific app tier."""
    try:
        found = ctx.apps.get_tier(slug)
        ctx.output.print_resources([found], [display.tier_row(found)], display.TIER_COLUMNS)

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to get tier: {e}")
        raise click.Abort()


@tier.group("instance-size")
def instance_size() -> None:
    """App instance size operations - list, get."""
    pass


@instance_size.command("list")
@pass_context
def list_instance_sizes(ctx: PaasCtlContext) -> None:
    """List all the available app instance sizes."""
    try:
        sizes = ctx.apps.list_instance_sizes()
        ctx.output.print_resources(
            sizes,
            [display.instance_size_row(s) for s in sizes],
            display.INSTANCE_SIZE_COLUMNS,
        )

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to list instance sizes: {e}")
        raise click.Abort()


@instance_size.command("get")
@click.argument("slug")
@pass_context
def get_instance_size(ctx: PaasCtlContext, slug: str) -> None:
    """Retrieve information about a specific app instance size."""
    try:
        size = ctx.apps.get_instance_size(slug)
        ctx.output.print_resources(
            [size],
            [display.instance_size_row(size)],
            display.INSTANCE_SIZE_COLUMNS,
        )

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to get instance size: {e}")
        raise click.Abort()

"""App lifecycle commands."""

import click

from paasctl.apps import display
from paasctl.core.context import pass_context, PaasCtlContext
from paasctl.commands.apps.helpers import SPEC_HELP, load_spec, show_apps
from paasctl.core.exceptions import PaasCtlError


@click.command("create")
@click.option("--spec", "spec_path", required=True, metavar="PATH", help=SPEC_HELP)
@pass_context
def create(ctx: PaasCtlContext, spec_path: str) -> None:
    """Create an app with the given app spec.

    \b
    Examples:
        paasctl apps create --spec app.yaml
        cat app.yaml | paasctl apps create --spec -
    """
    try:
        app_spec = load_spec(spec_path)
        app = ctx.apps.create_app(app_spec.to_dict())
        ctx.output.print_success("App created")
        show_apps(ctx, [app])

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to create app: {e}")
        raise click.Abort()


@click.command("get")
@click.argument("app_id")
@pass_context
def get(ctx: PaasCtlContext, app_id: str) -> None:
    """Get an app with the provided id.

    Only basic information is included with the table output format. For
    complete app details including its app spec, use the JSON format.
    """
    try:
        show_apps(ctx, [ctx.apps.get_app(app_id)])

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to get app: {e}")
        raise click.Abort()


@click.command("list")
@pass_context
def list_apps(ctx: PaasCtlContext) -> None:
    """List all apps.

    Only basic information is included with the table output format. For
    complete app details including the app specs, use the JSON format.
    """
    try:
        show_apps(ctx, ctx.apps.list_apps())

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to list apps: {e}")
        raise click.Abort()


@click.command("update")
@click.argument("app_id")
@click.option("--spec", "spec_path", required=True, metavar="PATH", help=SPEC_HELP)
@pass_context
def update(ctx: PaasCtlContext, app_id: str, spec_path: str) -> None:
    """Update the specified app with the given app spec."""
    try:
        app_spec = load_spec(spec_path)
        app = ctx.apps.update_app(app_id, app_spec.to_dict())
        ctx.output.print_success("App updated")
        show_apps(ctx, [app])

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to update app: {e}")
        raise click.Abort()


@click.command("delete")
@click.argument("app_id")
@click.option("-f", "--force", is_flag=True, help="Delete the app without a confirmation prompt")
@pass_context
def delete(ctx: PaasCtlContext, app_id: str, force: bool) -> None:
    """Delete an app with the provided id.

    This permanently deletes the app and all its associated deployments.
    """
    if not force and not ctx.confirm("Are you sure you want to delete this App?"):
        ctx.output.print_error("Operation aborted.")
        raise click.Abort()

    try:
        ctx.apps.delete_app(app_id)
        ctx.output.print_success("App deleted")

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to delete app: {e}")
        raise click.Abort()


@click.command("propose")
@click.option("--spec", "spec_path", required=True, metavar="PATH", help=SPEC_HELP)
@click.option(
    "--app",
    "app_id",
    default=None,
    help="An optional existing app ID. If given, the spec is treated as a proposed update to it.",
)
@pass_context
def propose(ctx: PaasCtlContext, spec_path: str, app_id: str | None) -> None:
    """Review and validate an app spec for a new or existing app.

    Returns information about the proposed app, including app cost and
    upgrade cost. For an updated app spec, use the JSON format.
    """
    try:
        app_spec = load_spec(spec_path)
        proposal = ctx.apps.propose_app(app_spec.to_dict(), app_id=app_id)
        ctx.output.print_resources(
            proposal,
            [display.proposal_row(proposal)],
            display.PROPOSAL_COLUMNS,
        )

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to propose app: {e}")
        raise click.Abort()


@click.command("list-regions")
@pass_context
def list_regions(ctx: PaasCtlContext) -> None:
    """List all regions supported by App Platform and their availability."""
    try:
        regions = ctx.apps.list_regions()
        ctx.output.print_resources(
            regions,
            [display.region_row(r) for r in regions],
            display.REGION_COLUMNS,
        )

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to list regions: {e}")
        raise click.Abort()

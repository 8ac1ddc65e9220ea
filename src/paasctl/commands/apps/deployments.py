"""App deployment commands."""

import click

from paasctl.apps.watcher import DeploymentWatcher
from paasctl.commands.apps.helpers import show_deployments
from paasctl.core.context import pass_context, PaasCtlContext
from paasctl.core.exceptions import DeploymentWaitError, PaasCtlError


@click.command("create-deployment")
@click.argument("app_id")
@click.option(
    "--force-rebuild",
    is_flag=True,
    help="Force a re-build even if a previous build is eligible for reuse",
)
@click.option(
    "--wait",
    is_flag=True,
    help="Wait for the deployment to complete before returning control to the terminal",
)
@pass_context
def create_deployment(
    ctx: PaasCtlContext,
    app_id: str,
    force_rebuild: bool,
    wait: bool,
) -> None:
    """Create a deployment for an app.

    Creating an app deployment will pull the latest changes from your
    repository and schedule a new deployment for your app.

    \b
    Examples:
        paasctl apps create-deployment <app id>
        paasctl apps create-deployment <app id> --force-rebuild --wait
    """
    try:
        deployment = ctx.apps.create_deployment(app_id, force_build=force_rebuild)
    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to create deployment: {e}")
        raise click.Abort()

    wait_error: PaasCtlError | None = None
    if wait:
        settings = ctx.profile.apps
        watcher = DeploymentWatcher(
            ctx.apps.get_deployment,
            max_failures=settings.max_api_failures,
            poll_interval=settings.poll_interval,
            retry_delay=settings.retry_delay,
        )
        ctx.output.print_info("App deployment is in progress, waiting for deployment to be running")
        try:
            deployment = watcher.wait(app_id, deployment["id"])
        except PaasCtlError as e:
            wait_error = e
            ctx.output.print_warning(f"App deployment couldn't enter `running` state: {e}")
            if isinstance(e, DeploymentWaitError) and e.deployment:
                deployment = e.deployment

    ctx.output.print_success("Deployment created")
    show_deployments(ctx, [deployment])

    if wait_error is not None:
        ctx.output.print_error(f"Deployment did not become active: {wait_error}")
        raise click.Abort()


@click.command("get-deployment")
@click.argument("app_id")
@click.argument("deployment_id")
@pass_context
def get_deployment(ctx: PaasCtlContext, app_id: str, deployment_id: str) -> None:
    """Get a deployment for an app.

    Only basic information is included with the table output format. For
    complete deployment details including its app spec, use the JSON format.
    """
    try:
        deployment = ctx.apps.get_deployment(app_id, deployment_id)
        if deployment is None:
            ctx.output.print_info("Deployment not found")
            return
        show_deployments(ctx, [deployment])

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to get deployment: {e}")
        raise click.Abort()


@click.command("list-deployments")
@click.argument("app_id")
@pass_context
def list_deployments(ctx: PaasCtlContext, app_id: str) -> None:
    """List all deployments for an app.

    Only basic information is included with the table output format. For
    complete deployment details including the app specs, use the JSON format.
    """
    try:
        show_deployments(ctx, ctx.apps.list_deployments(app_id))

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to list deployments: {e}")
        raise click.Abort()

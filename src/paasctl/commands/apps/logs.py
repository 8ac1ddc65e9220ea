"""App log commands."""

import click

from paasctl.clients.apps import LogType
from paasctl.core.context import pass_context, PaasCtlContext
from paasctl.core.exceptions import PaasCtlError, ValidationError


@click.command("logs")
@click.argument("app_id")
@click.argument("component", required=False)
@click.option(
    "--deployment",
    "deployment_id",
    default=None,
    help="The deployment ID. Defaults to the current deployment.",
)
@click.option("--type", "log_type", default="run", show_default=True, help="The type of logs: build, deploy, run")
@click.option("-f", "--follow", is_flag=True, help="Follow logs as they are emitted")
@pass_context
def logs(
    ctx: PaasCtlContext,
    app_id: str,
    component: str | None,
    deployment_id: str | None,
    log_type: str,
    follow: bool,
) -> None:
    """Get component logs for a deployment of an app.

    COMPONENT defaults to all components.

    \b
    Examples:
        paasctl apps logs <app id>
        paasctl apps logs <app id> web --type build
        paasctl apps logs <app id> web --deployment <deployment id>
    """
    try:
        kind = _parse_log_type(log_type)

        if not deployment_id:
            deployment_id = _current_deployment_id(ctx, app_id)

        urls = ctx.apps.get_logs(
            app_id,
            deployment_id,
            component=component,
            log_type=kind,
            follow=follow,
        )

        historic = urls.get("historic_urls") or []
        live_url = urls.get("live_url")

        if live_url:
            ctx.output.print_info("Live log streaming is not supported, open the live log URL instead:")
            ctx.output.print(live_url)
        elif historic:
            ctx.output.stream(ctx.apps.iter_log_content(historic[0]))
        else:
            ctx.output.print_warning("No logs found for app component")

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to get logs: {e}")
        raise click.Abort()


def _parse_log_type(value: str) -> LogType:
    try:
        return LogType(value.upper())
    except ValueError:
        raise ValidationError(f"Invalid log type {value}")


def _current_deployment_id(ctx: PaasCtlContext, app_id: str) -> str:
    """Pick the active deployment, else the in-progress one."""
    app = ctx.apps.get_app(app_id)
    for key in ("active_deployment", "in_progress_deployment"):
        deployment = app.get(key) or {}
        if deployment.get("id"):
            return deployment["id"]
    raise PaasCtlError(f"unable to retrieve logs; no deployment found for app {app_id}")

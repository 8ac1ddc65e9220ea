"""App spec commands."""

import click

from paasctl.apps.spec import dump_app_spec
from paasctl.commands.apps.helpers import load_spec
from paasctl.core.context import pass_context, PaasCtlContext
from paasctl.core.exceptions import PaasCtlError


@click.group()
def spec() -> None:
    """App spec operations - get, validate."""
    pass


@spec.command("get")
@click.argument("app_id")
@click.option("--deployment", "deployment_id", default=None, help="Get the spec of this deployment instead")
@click.option(
    "--format",
    "spec_format",
    default="yaml",
    show_default=True,
    help='The format to output the spec in; either "yaml" or "json"',
)
@pass_context
def get_spec(
    ctx: PaasCtlContext,
    app_id: str,
    deployment_id: str | None,
    spec_format: str,
) -> None:
    """Retrieve the latest spec of an app.

    Optionally, pass a deployment ID to get the spec of that specific deployment.

    \b
    Examples:
        paasctl apps spec get <app id>
        paasctl apps spec get <app id> --deployment <deployment id> --format json
    """
    try:
        if deployment_id:
            deployment = ctx.apps.get_deployment(app_id, deployment_id) or {}
            app_spec = deployment.get("spec")
        else:
            app_spec = ctx.apps.get_app(app_id).get("spec")

        ctx.output.write(dump_app_spec(app_spec, spec_format))

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to get app spec: {e}")
        raise click.Abort()


@spec.command("validate")
@click.argument("spec_file")
@click.option("--schema-only", is_flag=True, help="Only validate the spec schema and not the correctness of the spec")
@pass_context
def validate(ctx: PaasCtlContext, spec_file: str, schema_only: bool) -> None:
    """Check whether an app spec (YAML or JSON) is valid.

    Pass - as SPEC_FILE to read from stdin. The validated spec is printed
    as YAML.

    \b
    Examples:
        paasctl apps spec validate app.yaml
        paasctl apps spec validate --schema-only - < app.yaml
    """
    try:
        app_spec = load_spec(spec_file)

        if schema_only:
            ctx.output.write(dump_app_spec(app_spec, "yaml"))
            return

        # The API answers invalid specs with "error validating app spec"
        proposal = ctx.apps.propose_app(app_spec.to_dict())
        ctx.output.write(dump_app_spec(proposal.get("spec"), "yaml"))

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to validate app spec: {e}")
        raise click.Abort()

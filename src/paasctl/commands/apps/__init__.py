"""App platform command group."""

import click

from paasctl.core.aliases import AliasedGroup
from paasctl.core.context import pass_context, PaasCtlContext


@click.group(cls=AliasedGroup)
@pass_context
def apps(ctx: PaasCtlContext) -> None:
    """App platform operations - apps, deployments, logs, specs, tiers.

    For documentation on app specs used by multiple commands, see
    https://docs.digitalocean.com/products/app-platform/reference/app-spec/

    \b
    Examples:
        paasctl apps list
        paasctl apps create --spec app.yaml
        paasctl apps create-deployment <app id> --wait
    """
    pass


# Import and register subcommands
from paasctl.commands.apps import manage, deployments, logs, spec, tiers  # noqa: E402

apps.add_command(manage.create, aliases=["c"])
apps.add_command(manage.get, aliases=["g"])
apps.add_command(manage.list_apps, aliases=["ls"])
apps.add_command(manage.update, aliases=["u"])
apps.add_command(manage.delete, aliases=["d"])
apps.add_command(manage.propose)
apps.add_command(manage.list_regions)
apps.add_command(deployments.create_deployment, aliases=["cd"])
apps.add_command(deployments.get_deployment, aliases=["gd"])
apps.add_command(deployments.list_deployments, aliases=["lsd"])
apps.add_command(logs.logs, aliases=["l"])
apps.add_command(spec.spec)
apps.add_command(tiers.tier)

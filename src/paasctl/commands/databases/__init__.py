"""Managed database command group."""

import click

from paasctl.core.aliases import AliasedGroup
from paasctl.core.context import pass_context, PaasCtlContext


@click.group(cls=AliasedGroup)
@pass_context
def databases(ctx: PaasCtlContext) -> None:
    """Managed database operations - firewalls.

    \b
    Examples:
        paasctl databases firewalls list <database id>
        paasctl db fw update <database id> --rules ip_addr:192.168.1.2
    """
    pass


from paasctl.commands.databases import firewalls  # noqa: E402

databases.add_command(firewalls.firewalls, aliases=["fw"])

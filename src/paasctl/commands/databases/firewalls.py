"""Database firewall commands."""

import re
from typing import Any

import click

from paasctl.core.context import pass_context, PaasCtlContext
from paasctl.core.exceptions import PaasCtlError
from paasctl.core.utils import format_timestamp

FIREWALL_COLUMNS = ["UUID", "ClusterUUID", "Type", "Value", "Created At"]


def firewall_row(rule: dict[str, Any]) -> dict[str, Any]:
    return {
        "UUID": rule.get("uuid"),
        "ClusterUUID": rule.get("cluster_uuid"),
        "Type": rule.get("type"),
        "Value": rule.get("value"),
        "Created At": format_timestamp(rule.get("created_at")),
    }


def parse_rules(values: tuple[str, ...]) -> list[dict[str, str]]:
    """Parse ``type:value`` rules.

    Each option value may hold several rules separated by commas or spaces.
    """
    rules = []
    for value in values:
        for item in re.split(r"[,\s]+", value.strip()):
            if not item:
                continue
            rule_type, sep, rule_value = item.partition(":")
            if not sep or not rule_type or not rule_value:
                raise click.BadParameter(
                    f"unexpected input value [{item}], must be a type:value pair",
                    param_hint="'--rules'",
                )
            rules.append({"type": rule_type, "value": rule_value})
    return rules


@click.group()
def firewalls() -> None:
    """Database firewall operations - list, update."""
    pass


@firewalls.command("list")
@click.argument("database_id")
@pass_context
def list_rules(ctx: PaasCtlContext, database_id: str) -> None:
    """List the firewall rules of a database cluster."""
    try:
        rules = ctx.databases.list_firewall_rules(database_id)
        ctx.output.print_resources(rules, [firewall_row(r) for r in rules], FIREWALL_COLUMNS)

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to list firewall rules: {e}")
        raise click.Abort()


@firewalls.command("update")
@click.argument("database_id")
@click.option(
    "--rules",
    "rule_values",
    multiple=True,
    required=True,
    help="Rules as type:value pairs, e.g. ip_addr:192.168.1.2 (comma separated or repeated)",
)
@pass_context
def update_rules(ctx: PaasCtlContext, database_id: str, rule_values: tuple[str, ...]) -> None:
    """Replace the firewall rules of a database cluster.

    \b
    Examples:
        paasctl databases firewalls update <database id> --rules ip_addr:192.168.1.2
        paasctl db fw update <database id> --rules ip_addr:10.0.0.1,k8s:<cluster id>
    """
    rules = parse_rules(rule_values)
    try:
        updated = ctx.databases.update_firewall_rules(database_id, rules)
        ctx.output.print_resources(updated, [firewall_row(r) for r in updated], FIREWALL_COLUMNS)

    except PaasCtlError as e:
        ctx.output.print_error(f"Failed to update firewall rules: {e}")
        raise click.Abort()

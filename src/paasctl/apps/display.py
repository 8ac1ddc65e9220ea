"""Table rows for app platform resources."""

from typing import Any

from paasctl.core.output import format_bytes
from paasctl.core.utils import format_timestamp

APP_COLUMNS = [
    "ID",
    "Spec Name",
    "Default Ingress",
    "Active Deployment ID",
    "In Progress Deployment ID",
    "Created At",
    "Updated At",
]

DEPLOYMENT_COLUMNS = ["ID", "Cause", "Progress", "Phase", "Created At", "Updated At"]

REGION_COLUMNS = ["Slug", "Label", "Continent", "Data Centers", "Is Disabled?", "Reason (if disabled)", "Is Default?"]

TIER_COLUMNS = ["Name", "Slug", "Egress Bandwidth", "Build Seconds"]

INSTANCE_SIZE_COLUMNS = ["Name", "Slug", "CPUs", "Memory", "$/month", "$/second", "Tier"]

PROPOSAL_COLUMNS = ["App Name Available?", "Suggested App Name", "Is Static?", "Static App Usage", "$/month", "$/month to upgrade"]


def app_row(app: dict[str, Any]) -> dict[str, Any]:
    """Summarise an app."""
    return {
        "ID": app.get("id", ""),
        "Spec Name": (app.get("spec") or {}).get("name", ""),
        "Default Ingress": app.get("default_ingress", ""),
        "Active Deployment ID": (app.get("active_deployment") or {}).get("id", ""),
        "In Progress Deployment ID": (app.get("in_progress_deployment") or {}).get("id", ""),
        "Created At": format_timestamp(app.get("created_at")),
        "Updated At": format_timestamp(app.get("updated_at")),
    }


def deployment_row(deployment: dict[str, Any]) -> dict[str, Any]:
    """Summarise a deployment."""
    progress = deployment.get("progress") or {}
    return {
        "ID": deployment.get("id", ""),
        "Cause": deployment.get("cause", ""),
        "Progress": f"{progress.get('success_steps', 0)}/{progress.get('total_steps', 0)}",
        "Phase": deployment.get("phase", ""),
        "Created At": format_timestamp(deployment.get("created_at")),
        "Updated At": format_timestamp(deployment.get("updated_at")),
    }


def region_row(region: dict[str, Any]) -> dict[str, Any]:
    """Summarise an App Platform region."""
    return {
        "Slug": region.get("slug", ""),
        "Label": region.get("label", ""),
        "Continent": region.get("continent", ""),
        "Data Centers": ", ".join(region.get("data_centers") or []),
        "Is Disabled?": bool(region.get("disabled")),
        "Reason (if disabled)": region.get("reason", ""),
        "Is Default?": bool(region.get("default")),
    }


def tier_row(tier: dict[str, Any]) -> dict[str, Any]:
    """Summarise an app tier."""
    egress = tier.get("egress_bandwidth_bytes")
    return {
        "Name": tier.get("name", ""),
        "Slug": tier.get("slug", ""),
        "Egress Bandwidth": format_bytes(int(egress)) if egress else "",
        "Build Seconds": tier.get("build_seconds", ""),
    }


def instance_size_row(size: dict[str, Any]) -> dict[str, Any]:
    """Summarise an app instance size."""
    memory = size.get("memory_bytes")
    return {
        "Name": size.get("name", ""),
        "Slug": size.get("slug", ""),
        "CPUs": f"{size.get('cpus', '')} {str(size.get('cpu_type', '')).lower()}".strip(),
        "Memory": format_bytes(int(memory)) if memory else "",
        "$/month": size.get("usd_per_month", ""),
        "$/second": size.get("usd_per_second", ""),
        "Tier": size.get("tier_slug", ""),
    }


def proposal_row(proposal: dict[str, Any]) -> dict[str, Any]:
    """Summarise an app spec proposal."""
    existing = proposal.get("existing_static_apps")
    max_free = proposal.get("max_free_static_apps")
    usage = f"{existing}/{max_free}" if existing is not None and max_free is not None else ""

    upgrade = proposal.get("app_tier_upgrade_cost")
    return {
        "App Name Available?": bool(proposal.get("app_name_available")),
        "Suggested App Name": proposal.get("app_name_suggestion", ""),
        "Is Static?": bool(proposal.get("app_is_static")),
        "Static App Usage": usage,
        "$/month": proposal.get("app_cost", ""),
        "$/month to upgrade": upgrade if upgrade else "",
    }

"""App platform: spec handling and deployment tracking."""

from paasctl.apps.spec import AppSpec, read_app_spec, parse_app_spec, dump_app_spec
from paasctl.apps.watcher import (
    DeploymentPhase,
    DeploymentWatcher,
    PollAction,
    PollDecision,
    decide,
    wait_for_deployment_active,
)

__all__ = [
    "AppSpec",
    "read_app_spec",
    "parse_app_spec",
    "dump_app_spec",
    "DeploymentPhase",
    "DeploymentWatcher",
    "PollAction",
    "PollDecision",
    "decide",
    "wait_for_deployment_active",
]

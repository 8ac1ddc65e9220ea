"""App spec loading and encoding.

App specs are accepted as YAML or JSON. Decoding is strict: any field the
schema below does not know is rejected, so typos surface locally instead of
being silently dropped by the API.
"""

import json
import sys
from typing import IO, Any

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from paasctl.core.exceptions import (
    SpecNotFoundError,
    SpecParseError,
    SpecReadError,
    ValidationError,
)

STDIN_PATH = "-"
SPEC_FORMATS = ("json", "yaml")


class _SpecModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class GitSourceSpec(_SpecModel):
    repo_clone_url: str | None = None
    branch: str | None = None


class GitHubSourceSpec(_SpecModel):
    repo: str | None = None
    branch: str | None = None
    deploy_on_push: bool | None = None


class ImageSourceSpec(_SpecModel):
    registry: str | None = None
    registry_type: str | None = None
    registry_credentials: str | None = None
    repository: str | None = None
    tag: str | None = None
    digest: str | None = None
    deploy_on_push: dict[str, Any] | None = None


class VariableDefinition(_SpecModel):
    key: str
    value: str | None = None
    scope: str | None = None
    type: str | None = None


class RouteSpec(_SpecModel):
    path: str | None = None
    preserve_path_prefix: bool | None = None


class AlertSpec(_SpecModel):
    rule: str | None = None
    disabled: bool | None = None
    operator: str | None = None
    value: int | float | None = None
    window: str | None = None


class DomainSpec(_SpecModel):
    domain: str
    type: str | None = None
    wildcard: bool | None = None
    zone: str | None = None
    minimum_tls_version: str | None = None


class ComponentSpec(_SpecModel):
    """Fields shared by every runnable component."""

    name: str
    git: GitSourceSpec | None = None
    github: GitHubSourceSpec | None = None
    gitlab: GitHubSourceSpec | None = None
    bitbucket: GitHubSourceSpec | None = None
    image: ImageSourceSpec | None = None
    dockerfile_path: str | None = None
    build_command: str | None = None
    run_command: str | None = None
    source_dir: str | None = None
    environment_slug: str | None = None
    envs: list[VariableDefinition] | None = None
    instance_size_slug: str | None = None
    instance_count: int | None = None
    autoscaling: dict[str, Any] | None = None
    alerts: list[AlertSpec] | None = None
    log_destinations: list[dict[str, Any]] | None = None
    termination: dict[str, Any] | None = None


class ServiceSpec(ComponentSpec):
    http_port: int | None = None
    protocol: str | None = None
    internal_ports: list[int] | None = None
    routes: list[RouteSpec] | None = None
    cors: dict[str, Any] | None = None
    health_check: dict[str, Any] | None = None
    liveness_health_check: dict[str, Any] | None = None


class StaticSiteSpec(_SpecModel):
    name: str
    git: GitSourceSpec | None = None
    github: GitHubSourceSpec | None = None
    gitlab: GitHubSourceSpec | None = None
    bitbucket: GitHubSourceSpec | None = None
    dockerfile_path: str | None = None
    build_command: str | None = None
    source_dir: str | None = None
    environment_slug: str | None = None
    output_dir: str | None = None
    index_document: str | None = None
    error_document: str | None = None
    catchall_document: str | None = None
    envs: list[VariableDefinition] | None = None
    routes: list[RouteSpec] | None = None
    cors: dict[str, Any] | None = None


class WorkerSpec(ComponentSpec):
    liveness_health_check: dict[str, Any] | None = None


class JobSpec(ComponentSpec):
    kind: str | None = None


class FunctionsSpec(_SpecModel):
    name: str
    git: GitSourceSpec | None = None
    github: GitHubSourceSpec | None = None
    gitlab: GitHubSourceSpec | None = None
    bitbucket: GitHubSourceSpec | None = None
    source_dir: str | None = None
    envs: list[VariableDefinition] | None = None
    alerts: list[AlertSpec] | None = None
    routes: list[RouteSpec] | None = None
    cors: dict[str, Any] | None = None
    log_destinations: list[dict[str, Any]] | None = None


class DatabaseSpec(_SpecModel):
    name: str
    engine: str | None = None
    version: str | None = None
    production: bool | None = None
    cluster_name: str | None = None
    db_name: str | None = None
    db_user: str | None = None


class AppSpec(_SpecModel):
    """Desired configuration of an app."""

    name: str
    region: str | None = None
    services: list[ServiceSpec] | None = None
    static_sites: list[StaticSiteSpec] | None = None
    workers: list[WorkerSpec] | None = None
    jobs: list[JobSpec] | None = None
    functions: list[FunctionsSpec] | None = None
    databases: list[DatabaseSpec] | None = None
    domains: list[DomainSpec] | None = None
    alerts: list[AlertSpec] | None = None
    envs: list[VariableDefinition] | None = None
    ingress: dict[str, Any] | None = None
    egress: dict[str, Any] | None = None
    features: list[str] | None = None
    maintenance: dict[str, Any] | None = None
    disable_edge_cache: bool | None = None
    disable_email_obfuscation: bool | None = None
    enhanced_threat_control_enabled: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API's JSON shape, leaving out fields never set."""
        return self.model_dump(mode="json", exclude_unset=True)


def read_app_spec(path: str, stdin: IO[Any] | None = None) -> AppSpec:
    """Read and decode an app spec.

    Args:
        path: Path to a YAML or JSON file, or "-" for standard input
        stdin: Stream used when path is "-" (defaults to sys.stdin)

    Returns:
        Decoded app spec

    Raises:
        SpecNotFoundError: The path does not exist
        SpecReadError: The source could not be opened or read
        SpecParseError: The content is not a valid app spec
    """
    if path == STDIN_PATH:
        stream = stdin or sys.stdin
        try:
            content = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SpecReadError(f"reading app spec: {e}")
    else:
        try:
            spec_file = open(path, "rb")
        except FileNotFoundError:
            raise SpecNotFoundError(f"opening app spec: {path} does not exist")
        except OSError as e:
            raise SpecReadError(f"opening app spec: {e}")

        with spec_file:
            try:
                content = spec_file.read()
            except OSError as e:
                raise SpecReadError(f"reading app spec: {e}")

    try:
        return parse_app_spec(content)
    except SpecParseError as e:
        raise SpecParseError(f"parsing app spec: {e}")


def parse_app_spec(content: str | bytes) -> AppSpec:
    """Decode YAML or JSON content into an app spec.

    Raises:
        SpecParseError: The content is not a mapping, is malformed, or
            holds unknown fields
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SpecParseError(f"invalid YAML or JSON: {e}")
    except UnicodeDecodeError as e:
        raise SpecParseError(f"invalid encoding: {e}")

    if not isinstance(data, dict):
        raise SpecParseError("expected a mapping at the top level")

    try:
        return AppSpec.model_validate(data)
    except PydanticValidationError as e:
        raise SpecParseError(_describe_errors(e))


def dump_app_spec(spec: AppSpec | dict[str, Any] | None, fmt: str = "yaml") -> str:
    """Encode an app spec as YAML or indented JSON.

    Raises:
        ValidationError: The format is not one of json, yaml
    """
    data = spec.to_dict() if isinstance(spec, AppSpec) else spec
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    raise ValidationError(f'invalid spec format "{fmt}", must be one of: {", ".join(SPEC_FORMATS)}')


def _describe_errors(error: PydanticValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)

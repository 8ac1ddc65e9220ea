"""App platform API client."""

from enum import Enum
from typing import Any, Iterator

import httpx

from paasctl.clients.platform import PlatformClient
from paasctl.core.exceptions import APIError
from paasctl.core.logging import get_logger

logger = get_logger(__name__)


class LogType(str, Enum):
    """Kinds of app component logs."""

    BUILD = "BUILD"
    DEPLOY = "DEPLOY"
    RUN = "RUN"


class AppsClient(PlatformClient):
    """Client for the /v2/apps endpoints."""

    # App operations
    def list_apps(self) -> list[dict[str, Any]]:
        """List all apps."""
        return self.get_all("/v2/apps", "apps")

    def get_app(self, app_id: str) -> dict[str, Any]:
        """Get app by ID."""
        return self.get(f"/v2/apps/{app_id}")["app"]

    def create_app(self, spec: dict[str, Any]) -> dict[str, Any]:
        """Create an app from a spec."""
        return self.post("/v2/apps", json={"spec": spec})["app"]

    def update_app(self, app_id: str, spec: dict[str, Any]) -> dict[str, Any]:
        """Replace an app's spec."""
        return self.put(f"/v2/apps/{app_id}", json={"spec": spec})["app"]

    def delete_app(self, app_id: str) -> None:
        """Delete an app and all its deployments."""
        self.delete(f"/v2/apps/{app_id}")

    def propose_app(self, spec: dict[str, Any], app_id: str | None = None) -> dict[str, Any]:
        """Validate a spec and get cost information for it."""
        payload: dict[str, Any] = {"spec": spec}
        if app_id:
            payload["app_id"] = app_id
        return self.post("/v2/apps/propose", json=payload)

    # Deployment operations
    def create_deployment(self, app_id: str, force_build: bool = False) -> dict[str, Any]:
        """Trigger a new deployment."""
        response = self.post(
            f"/v2/apps/{app_id}/deployments",
            json={"force_build": force_build},
        )
        return response["deployment"]

    def get_deployment(self, app_id: str, deployment_id: str) -> dict[str, Any] | None:
        """Get a deployment.

        Returns None when the API answers without a deployment body.
        """
        response = self.get(f"/v2/apps/{app_id}/deployments/{deployment_id}")
        if not response:
            return None
        if not isinstance(response, dict):
            raise APIError("Invalid response: expected a deployment object")
        return response.get("deployment")

    def list_deployments(self, app_id: str) -> list[dict[str, Any]]:
        """List deployments for an app."""
        return self.get_all(f"/v2/apps/{app_id}/deployments", "deployments")

    # Logs
    def get_logs(
        self,
        app_id: str,
        deployment_id: str,
        component: str | None = None,
        log_type: LogType = LogType.RUN,
        follow: bool = False,
    ) -> dict[str, Any]:
        """Get log URLs for a deployment, optionally for one component."""
        if component:
            path = f"/v2/apps/{app_id}/deployments/{deployment_id}/components/{component}/logs"
        else:
            path = f"/v2/apps/{app_id}/deployments/{deployment_id}/logs"
        params = {
            "type": log_type.value,
            "follow": str(follow).lower(),
        }
        return self.get(path, params=params) or {}

    def iter_log_content(self, url: str) -> Iterator[str]:
        """Stream a historic log file.

        Historic log URLs are pre-signed, so no API credentials are sent.
        """
        logger.debug("Downloading logs", url=url)
        try:
            with httpx.stream("GET", url, timeout=self._config.timeout) as response:
                response.raise_for_status()
                yield from response.iter_text()
        except httpx.HTTPStatusError as e:
            raise APIError(f"Downloading logs failed: {e}", status_code=e.response.status_code)
        except httpx.RequestError as e:
            raise APIError(f"Downloading logs failed: {e}")

    # Regions, tiers and sizes
    def list_regions(self) -> list[dict[str, Any]]:
        """List App Platform regions."""
        return self.get("/v2/apps/regions").get("regions", [])

    def list_tiers(self) -> list[dict[str, Any]]:
        """List app tiers."""
        return self.get("/v2/apps/tiers").get("tiers", [])

    def get_tier(self, slug: str) -> dict[str, Any]:
        """Get an app tier by slug."""
        return self.get(f"/v2/apps/tiers/{slug}")["tier"]

    def list_instance_sizes(self) -> list[dict[str, Any]]:
        """List app instance sizes."""
        return self.get("/v2/apps/tiers/instance_sizes").get("instance_sizes", [])

    def get_instance_size(self, slug: str) -> dict[str, Any]:
        """Get an app instance size by slug."""
        return self.get(f"/v2/apps/tiers/instance_sizes/{slug}")["instance_size"]

"""Managed database API client."""

from typing import Any

from paasctl.clients.platform import PlatformClient


class DatabasesClient(PlatformClient):
    """Client for the /v2/databases endpoints."""

    def list_firewall_rules(self, database_id: str) -> list[dict[str, Any]]:
        """List the firewall rules of a database cluster."""
        response = self.get(f"/v2/databases/{database_id}/firewall") or {}
        return response.get("rules", [])

    def update_firewall_rules(
        self,
        database_id: str,
        rules: list[dict[str, str]],
    ) -> list[dict[str, Any]]:
        """Replace the firewall rules of a database cluster.

        Returns the resulting rules, fetching them when the update
        response carries no body.
        """
        response = self.put(f"/v2/databases/{database_id}/firewall", json={"rules": rules})
        if response and "rules" in response:
            return response["rules"]
        return self.list_firewall_rules(database_id)

"""Tests for platform API clients."""

from unittest.mock import MagicMock, call, patch

import httpx
import pytest

from paasctl.clients.apps import AppsClient, LogType
from paasctl.clients.databases import DatabasesClient
from paasctl.clients.platform import PlatformClient
from paasctl.config import PlatformConfig
from paasctl.core.exceptions import APIError, AuthenticationError


@pytest.fixture
def platform_config():
    return PlatformConfig(api_url="https://api.test", access_token="test-token")


class TestPlatformClient:
    """Tests for the base platform client."""

    def test_client_initialization(self, platform_config):
        """Test client can be initialized."""
        client = PlatformClient(platform_config)
        assert client._config == platform_config
        assert client._client is None  # Lazy initialization

    def test_bearer_auth(self, platform_config):
        client = PlatformClient(platform_config)
        assert client.client.headers["Authorization"] == "Bearer test-token"
        assert client.client.base_url.host == "api.test"
        client.close()
        assert client._client is None

    def test_missing_token(self):
        client = PlatformClient(PlatformConfig(api_url="https://api.test"))
        with pytest.raises(AuthenticationError):
            client.client

    def test_http_error_uses_api_message(self, platform_config):
        client = PlatformClient(platform_config)
        request = httpx.Request("GET", "https://api.test/v2/apps/x")
        response = httpx.Response(404, json={"id": "not_found", "message": "app not found"}, request=request)
        client._client = MagicMock()
        client._client.request.return_value = response

        with pytest.raises(APIError) as exc_info:
            client.get("/v2/apps/x")

        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "app not found"

    def test_http_error_without_json_body(self, platform_config):
        client = PlatformClient(platform_config)
        request = httpx.Request("GET", "https://api.test/v2/apps")
        response = httpx.Response(502, text="bad gateway", request=request)
        client._client = MagicMock()
        client._client.request.return_value = response

        with pytest.raises(APIError) as exc_info:
            client.get("/v2/apps")

        assert exc_info.value.status_code == 502
        assert str(exc_info.value) == "bad gateway"

    def test_transport_error(self, platform_config):
        client = PlatformClient(platform_config)
        client._client = MagicMock()
        client._client.request.side_effect = httpx.ConnectError("refused")

        with pytest.raises(APIError) as exc_info:
            client.get("/v2/apps")

        assert exc_info.value.status_code is None
        assert "Request failed" in str(exc_info.value)

    def test_error_body_that_is_not_an_object(self, platform_config):
        client = PlatformClient(platform_config)
        request = httpx.Request("GET", "https://api.test/v2/apps/x")
        response = httpx.Response(500, json=["oops"], request=request)
        client._client = MagicMock()
        client._client.request.return_value = response

        with pytest.raises(APIError) as exc_info:
            client.get("/v2/apps/x")

        assert exc_info.value.status_code == 500
        assert "oops" in str(exc_info.value)

    def test_success_body_that_is_not_json(self, platform_config):
        client = PlatformClient(platform_config)
        request = httpx.Request("GET", "https://api.test/v2/apps/x")
        response = httpx.Response(200, text="<html>bad gateway</html>", request=request)
        client._client = MagicMock()
        client._client.request.return_value = response

        with pytest.raises(APIError) as exc_info:
            client.get("/v2/apps/x")

        assert exc_info.value.status_code == 200
        assert str(exc_info.value).startswith("Invalid response")

    def test_empty_body_returns_none(self, platform_config):
        client = PlatformClient(platform_config)
        request = httpx.Request("DELETE", "https://api.test/v2/apps/x")
        client._client = MagicMock()
        client._client.request.return_value = httpx.Response(204, request=request)

        assert client.delete("/v2/apps/x") is None

    @patch("paasctl.clients.platform.PlatformClient._request")
    def test_get_all_follows_pages(self, mock_request, platform_config):
        mock_request.side_effect = [
            {"apps": [{"id": "1"}], "links": {"pages": {"next": "https://api.test/v2/apps?page=2"}}},
            {"apps": [{"id": "2"}], "links": {}},
        ]

        items = PlatformClient(platform_config).get_all("/v2/apps", "apps")

        assert [i["id"] for i in items] == ["1", "2"]
        assert mock_request.call_args_list == [
            call("GET", "/v2/apps", params={"page": 1, "per_page": 200}),
            call("GET", "/v2/apps", params={"page": 2, "per_page": 200}),
        ]


class TestAppsClient:
    """Tests for the apps client."""

    @patch("paasctl.clients.apps.AppsClient._request")
    def test_create_app(self, mock_request, platform_config):
        mock_request.return_value = {"app": {"id": "app-1"}}

        result = AppsClient(platform_config).create_app({"name": "sample"})

        assert result["id"] == "app-1"
        mock_request.assert_called_once_with("POST", "/v2/apps", json={"spec": {"name": "sample"}})

    @patch("paasctl.clients.apps.AppsClient._request")
    def test_create_deployment(self, mock_request, platform_config):
        mock_request.return_value = {"deployment": {"id": "dep-1"}}

        result = AppsClient(platform_config).create_deployment("app-1", force_build=True)

        assert result["id"] == "dep-1"
        mock_request.assert_called_once_with(
            "POST", "/v2/apps/app-1/deployments", json={"force_build": True}
        )

    @patch("paasctl.clients.apps.AppsClient._request")
    def test_get_deployment(self, mock_request, platform_config):
        mock_request.return_value = {"deployment": {"id": "dep-1", "phase": "ACTIVE"}}
        assert AppsClient(platform_config).get_deployment("app-1", "dep-1")["phase"] == "ACTIVE"

    @patch("paasctl.clients.apps.AppsClient._request")
    def test_get_deployment_empty_body(self, mock_request, platform_config):
        mock_request.return_value = None
        assert AppsClient(platform_config).get_deployment("app-1", "dep-1") is None

    @patch("paasctl.clients.apps.AppsClient._request")
    def test_get_deployment_unexpected_body(self, mock_request, platform_config):
        mock_request.return_value = ["not", "a", "deployment"]
        with pytest.raises(APIError):
            AppsClient(platform_config).get_deployment("app-1", "dep-1")

    @patch("paasctl.clients.apps.AppsClient._request")
    def test_propose_with_app(self, mock_request, platform_config):
        mock_request.return_value = {"app_cost": 5}

        AppsClient(platform_config).propose_app({"name": "sample"}, app_id="app-1")

        mock_request.assert_called_once_with(
            "POST",
            "/v2/apps/propose",
            json={"spec": {"name": "sample"}, "app_id": "app-1"},
        )

    @patch("paasctl.clients.apps.AppsClient._request")
    def test_component_logs(self, mock_request, platform_config):
        mock_request.return_value = {"historic_urls": ["https://logs.test/1"]}

        AppsClient(platform_config).get_logs("app-1", "dep-1", component="web", log_type=LogType.BUILD)

        mock_request.assert_called_once_with(
            "GET",
            "/v2/apps/app-1/deployments/dep-1/components/web/logs",
            params={"type": "BUILD", "follow": "false"},
        )

    @patch("paasctl.clients.apps.AppsClient._request")
    def test_instance_sizes(self, mock_request, platform_config):
        mock_request.return_value = {"instance_sizes": [{"slug": "basic-xxs"}]}

        sizes = AppsClient(platform_config).list_instance_sizes()

        assert sizes[0]["slug"] == "basic-xxs"
        mock_request.assert_called_once_with("GET", "/v2/apps/tiers/instance_sizes")


class TestDatabasesClient:
    """Tests for the databases client."""

    @patch("paasctl.clients.databases.DatabasesClient._request")
    def test_update_returns_response_rules(self, mock_request, platform_config):
        mock_request.return_value = {"rules": [{"type": "ip_addr", "value": "10.0.0.1"}]}

        rules = DatabasesClient(platform_config).update_firewall_rules(
            "db-1", [{"type": "ip_addr", "value": "10.0.0.1"}]
        )

        assert rules[0]["value"] == "10.0.0.1"
        mock_request.assert_called_once_with(
            "PUT",
            "/v2/databases/db-1/firewall",
            json={"rules": [{"type": "ip_addr", "value": "10.0.0.1"}]},
        )

    @patch("paasctl.clients.databases.DatabasesClient._request")
    def test_update_without_body_refetches(self, mock_request, platform_config):
        mock_request.side_effect = [None, {"rules": [{"uuid": "r1"}]}]

        rules = DatabasesClient(platform_config).update_firewall_rules("db-1", [])

        assert rules == [{"uuid": "r1"}]
        assert mock_request.call_args_list[1] == call("GET", "/v2/databases/db-1/firewall")

"""Platform API base client using httpx."""

from typing import Any

import httpx

from paasctl.config import PlatformConfig
from paasctl.core.exceptions import APIError, AuthenticationError
from paasctl.core.logging import get_logger

logger = get_logger(__name__)

PER_PAGE = 200


class PlatformClient:
    """Client for the platform REST API.

    Holds a lazily created authenticated session and maps transport and
    HTTP failures onto APIError.
    """

    def __init__(self, config: PlatformConfig):
        self._config = config
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            url = self._config.get_api_url()
            token = self._config.get_access_token()

            if not token:
                raise AuthenticationError(
                    "Access token not configured. Use --access-token or set PAASCTL_ACCESS_TOKEN"
                )

            headers = {
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }

            self._client = httpx.Client(
                base_url=url.rstrip("/"),
                headers=headers,
                timeout=self._config.timeout,
            )

            logger.debug("Created platform client", url=url)

        return self._client

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Make an API request.

        Raises:
            APIError: Transport failure, HTTP error status, or a body that
                is not JSON
        """
        try:
            response = self.client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise APIError(_error_message(e), status_code=e.response.status_code)
        except httpx.RequestError as e:
            raise APIError(f"Request failed: {e}")

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise APIError(f"Invalid response: {e}", status_code=response.status_code)

    def get(self, path: str, **kwargs: Any) -> Any:
        """Make a GET request."""
        return self._request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> Any:
        """Make a POST request."""
        return self._request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> Any:
        """Make a PUT request."""
        return self._request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> Any:
        """Make a DELETE request."""
        return self._request("DELETE", path, **kwargs)

    def get_all(self, path: str, key: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Collect every page of a list endpoint.

        Args:
            path: API path
            key: Response member holding the page's items
            params: Extra query parameters

        Returns:
            Items from all pages
        """
        items: list[dict[str, Any]] = []
        page = 1
        while True:
            query = {**(params or {}), "page": page, "per_page": PER_PAGE}
            response = self.get(path, params=query) or {}
            items.extend(response.get(key) or [])

            pages = (response.get("links") or {}).get("pages") or {}
            if not pages.get("next"):
                break
            page += 1
        return items

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "PlatformClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def _error_message(error: httpx.HTTPStatusError) -> str:
    """Pull the API's "message" out of an error body, else the raw text."""
    try:
        data = error.response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return error.response.text or str(error)

"""API clients for the platform."""

from paasctl.clients.platform import PlatformClient
from paasctl.clients.apps import AppsClient, LogType
from paasctl.clients.databases import DatabasesClient

__all__ = ["PlatformClient", "AppsClient", "LogType", "DatabasesClient"]

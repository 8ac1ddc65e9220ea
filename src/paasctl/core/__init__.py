"""Core utilities and shared components for paasctl."""

# Note: Import context lazily to avoid circular imports
# Use: from paasctl.core.context import PaasCtlContext, pass_context
from paasctl.core.exceptions import PaasCtlError, ConfigError, APIError, SpecError
from paasctl.core.output import OutputFormatter

__all__ = [
    "PaasCtlError",
    "ConfigError",
    "APIError",
    "SpecError",
    "OutputFormatter",
]

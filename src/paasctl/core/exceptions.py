"""Custom exceptions for paasctl."""

from typing import Any


class PaasCtlError(Exception):
    """Base exception for all paasctl errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ConfigError(PaasCtlError):
    """Configuration-related errors."""

    pass


class ValidationError(PaasCtlError):
    """Input validation errors."""

    pass


class AuthenticationError(PaasCtlError):
    """Authentication/authorization errors."""

    pass


class APIError(PaasCtlError):
    """Platform API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class SpecError(PaasCtlError):
    """App spec loading errors."""

    pass


class SpecNotFoundError(SpecError):
    """The app spec path does not exist."""

    pass


class SpecReadError(SpecError):
    """The app spec could not be read."""

    pass


class SpecParseError(SpecError):
    """The app spec is malformed or has fields the schema does not know."""

    pass


class DeploymentWaitError(PaasCtlError):
    """A deployment did not reach the active phase."""

    def __init__(
        self,
        message: str,
        phase: str | None = None,
        deployment: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.phase = phase
        self.deployment = deployment


class DeploymentFailedError(DeploymentWaitError):
    """The deployment ended in a failure phase."""

    def __init__(self, phase: str, deployment: dict[str, Any] | None = None):
        super().__init__(f"phase: [{phase}]", phase=phase, deployment=deployment)


class UnknownPhaseError(DeploymentWaitError):
    """The deployment reported a phase outside the known set."""

    def __init__(self, phase: str, deployment: dict[str, Any] | None = None):
        super().__init__(f"Unknown phase: [{phase}]", phase=phase, deployment=deployment)

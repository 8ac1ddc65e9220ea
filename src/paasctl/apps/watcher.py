"""Deployment status watcher.

Polls a deployment until it reaches a terminal phase. Each poll produces a
fetch outcome; ``decide`` maps the outcome and the current consecutive
failure count to the next action, and ``DeploymentWatcher`` only drives the
loop (fetch, sleep, progress markers) around it.

There is no overall deadline. A deployment that stays in progress forever
is polled forever; only consecutive fetch failures are bounded.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from paasctl.core.exceptions import (
    DeploymentFailedError,
    PaasCtlError,
    UnknownPhaseError,
)
from paasctl.core.logging import get_logger
from paasctl.core.progress import ProgressDots

logger = get_logger(__name__)

DEFAULT_MAX_API_FAILURES = 3
DEFAULT_POLL_INTERVAL = 5.0
DEFAULT_RETRY_DELAY = 1.0

Deployment = dict[str, Any]
FetchDeployment = Callable[[str, str], Deployment | None]


class DeploymentPhase(str, Enum):
    """Deployment lifecycle phases as reported by the API."""

    PENDING_BUILD = "PENDING_BUILD"
    PENDING_DEPLOY = "PENDING_DEPLOY"
    BUILDING = "BUILDING"
    DEPLOYING = "DEPLOYING"
    ACTIVE = "ACTIVE"
    ERROR = "ERROR"
    CANCELED = "CANCELED"
    UNKNOWN = "UNKNOWN"


IN_PROGRESS_PHASES = frozenset({
    DeploymentPhase.PENDING_BUILD,
    DeploymentPhase.PENDING_DEPLOY,
    DeploymentPhase.BUILDING,
    DeploymentPhase.DEPLOYING,
})

FAILED_PHASES = frozenset({
    DeploymentPhase.ERROR,
    DeploymentPhase.CANCELED,
    DeploymentPhase.UNKNOWN,
})


@dataclass(frozen=True)
class Fetched:
    """A status fetch that returned (possibly no deployment)."""

    deployment: Deployment | None


@dataclass(frozen=True)
class FetchFailed:
    """A status fetch that raised."""

    error: PaasCtlError


FetchOutcome = Fetched | FetchFailed


class PollAction(str, Enum):
    """What the watcher does after a poll."""

    CONTINUE = "continue"
    SUCCEED = "succeed"
    FAIL = "fail"


@dataclass(frozen=True)
class PollDecision:
    """Next step of the poll loop.

    ``failures`` is the consecutive failure count to carry into the next
    poll. ``delay`` applies to CONTINUE, ``deployment`` to SUCCEED, and
    ``error`` to FAIL.
    """

    action: PollAction
    failures: int = 0
    delay: float = 0.0
    deployment: Deployment | None = None
    error: PaasCtlError | None = None


def decide(
    outcome: FetchOutcome,
    failures: int,
    max_failures: int = DEFAULT_MAX_API_FAILURES,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    retry_delay: float = DEFAULT_RETRY_DELAY,
) -> PollDecision:
    """Map a fetch outcome to the next poll action.

    Args:
        outcome: Result of the latest status fetch
        failures: Consecutive fetch failures before this one
        max_failures: Failures that abort the wait
        poll_interval: Delay while the deployment is in progress
        retry_delay: Delay when no deployment could be read

    Returns:
        The decision for this outcome
    """
    if isinstance(outcome, FetchFailed):
        failures += 1
        if failures >= max_failures:
            return PollDecision(PollAction.FAIL, failures=failures, error=outcome.error)
        return PollDecision(PollAction.CONTINUE, failures=failures, delay=retry_delay)

    deployment = outcome.deployment
    if deployment is None:
        return PollDecision(PollAction.CONTINUE, failures=0, delay=retry_delay)

    raw_phase = deployment.get("phase")
    phase = _parse_phase(raw_phase)

    if phase in IN_PROGRESS_PHASES:
        return PollDecision(
            PollAction.CONTINUE,
            failures=0,
            delay=poll_interval,
            deployment=deployment,
        )
    if phase == DeploymentPhase.ACTIVE:
        return PollDecision(PollAction.SUCCEED, deployment=deployment)
    if phase in FAILED_PHASES:
        return PollDecision(
            PollAction.FAIL,
            deployment=deployment,
            error=DeploymentFailedError(phase.value, deployment=deployment),
        )

    return PollDecision(
        PollAction.FAIL,
        deployment=deployment,
        error=UnknownPhaseError(str(raw_phase), deployment=deployment),
    )


def _parse_phase(value: Any) -> DeploymentPhase | None:
    try:
        return DeploymentPhase(value)
    except ValueError:
        return None


class DeploymentWatcher:
    """Waits for a deployment to become active."""

    def __init__(
        self,
        fetch: FetchDeployment,
        max_failures: int = DEFAULT_MAX_API_FAILURES,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        sleep: Callable[[float], None] | None = None,
        progress: Callable[[], ProgressDots] | None = None,
    ):
        """Initialize the watcher.

        Args:
            fetch: Callable returning the deployment for (app_id, deployment_id)
            max_failures: Consecutive fetch failures tolerated before aborting
            poll_interval: Seconds between polls while in progress
            retry_delay: Seconds before retrying a fetch that returned nothing
            sleep: Sleep function, time.sleep by default
            progress: Factory for the progress marker session opened by each
                wait, stderr dots by default
        """
        self._fetch = fetch
        self._max_failures = max_failures
        self._poll_interval = poll_interval
        self._retry_delay = retry_delay
        self._sleep = sleep or time.sleep
        self._progress = progress or ProgressDots

    def wait(self, app_id: str, deployment_id: str) -> Deployment:
        """Block until the deployment is active.

        Returns:
            The active deployment

        Raises:
            DeploymentFailedError: The deployment ended in ERROR, CANCELED or UNKNOWN
            UnknownPhaseError: The deployment reported an unrecognised phase
            PaasCtlError: Fetching failed too many times in a row; the last
                fetch error is re-raised
        """
        log = logger.bind(app_id=app_id, deployment_id=deployment_id)
        failures = 0
        polls = 0

        with self._progress() as progress:
            while True:
                if polls:
                    progress.tick()
                polls += 1

                outcome = self._poll(app_id, deployment_id, log)
                decision = decide(
                    outcome,
                    failures,
                    max_failures=self._max_failures,
                    poll_interval=self._poll_interval,
                    retry_delay=self._retry_delay,
                )
                failures = decision.failures

                if decision.action == PollAction.SUCCEED:
                    log.info("Deployment active", polls=polls)
                    return decision.deployment  # type: ignore[return-value]

                if decision.action == PollAction.FAIL:
                    log.debug("Stopped waiting for deployment", error=decision.error, polls=polls)
                    raise decision.error  # type: ignore[misc]

                self._sleep(decision.delay)

    def _poll(self, app_id: str, deployment_id: str, log: Any) -> FetchOutcome:
        try:
            deployment = self._fetch(app_id, deployment_id)
        except PaasCtlError as e:
            log.info("Fetching deployment failed", error=e)
            return FetchFailed(e)

        if deployment is not None:
            log.debug("Deployment status", phase=deployment.get("phase"))
        return Fetched(deployment)


def wait_for_deployment_active(
    fetch: FetchDeployment,
    app_id: str,
    deployment_id: str,
    **kwargs: Any,
) -> Deployment:
    """Wait for a deployment to become active.

    Convenience wrapper around DeploymentWatcher.
    """
    return DeploymentWatcher(fetch, **kwargs).wait(app_id, deployment_id)

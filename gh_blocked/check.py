"""Run an issue status check and classify the result."""

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from .exceptions import ParseError, StatusCheckError
from .github_client.client import IssueStatusClient
from .github_client.models import FailureStatus, IssueState
from .github_client.patterns import GITHUB_API_BASE, PatternResolver
from .github_client.remotes import RemoteResolver

logger = logging.getLogger(__name__)

DEFAULT_REASON = "Issue was closed."


class OutcomeKind(str, Enum):
    """Final classification of a check."""

    PASS = "pass"
    WARN = "warn"
    PARSE_ERROR = "parse_error"
    RUNTIME_ERROR = "runtime_error"


class CheckOutcome(BaseModel):
    """Result of checking a single issue pattern."""

    kind: OutcomeKind = Field(..., description="Outcome classification")
    message: str | None = Field(
        None, description="Warning reason or error message (None for pass)"
    )
    skipped: bool = Field(
        False, description="True when the check was intentionally not attempted"
    )
    endpoint: str | None = Field(None, description="Resolved issue API endpoint")

    @classmethod
    def passed(cls, endpoint: str | None = None) -> "CheckOutcome":
        return cls(kind=OutcomeKind.PASS, endpoint=endpoint)

    @classmethod
    def skip(cls) -> "CheckOutcome":
        return cls(kind=OutcomeKind.PASS, skipped=True)

    @classmethod
    def warn(cls, reason: str, endpoint: str | None = None) -> "CheckOutcome":
        return cls(kind=OutcomeKind.WARN, message=reason, endpoint=endpoint)

    @classmethod
    def parse_error(cls, message: str) -> "CheckOutcome":
        return cls(kind=OutcomeKind.PARSE_ERROR, message=message)

    @classmethod
    def runtime_error(
        cls, message: str, endpoint: str | None = None
    ) -> "CheckOutcome":
        return cls(kind=OutcomeKind.RUNTIME_ERROR, message=message, endpoint=endpoint)

    @property
    def is_error(self) -> bool:
        return self.kind in (OutcomeKind.PARSE_ERROR, OutcomeKind.RUNTIME_ERROR)


class IssueCheck:
    """Resolves an issue pattern, fetches its status and classifies it."""

    def __init__(
        self,
        pattern_resolver: PatternResolver | None = None,
        status_client_factory: Callable[[str | None], IssueStatusClient] | None = None,
    ):
        """Initialize the check.

        Args:
            pattern_resolver: Resolver for issue patterns. Defaults to one
                using the current working directory's git remotes.
            status_client_factory: Builds a status client from an optional
                credential. Defaults to ``IssueStatusClient``.
        """
        self.pattern_resolver = pattern_resolver or PatternResolver()
        self.status_client_factory = status_client_factory or IssueStatusClient

    def run(
        self,
        pattern: str,
        reason: str | None = None,
        *,
        credential: str | None = None,
        in_ci: bool = False,
    ) -> CheckOutcome:
        """Check whether the issue referenced by ``pattern`` is still open.

        Without a credential and outside CI the check is skipped before the
        pattern is even resolved, and a skipped pass is returned.
        """
        if credential is None and not in_ci:
            logger.debug("No credential and not in CI, skipping check of %r", pattern)
            return CheckOutcome.skip()

        try:
            endpoint = self.pattern_resolver.resolve(pattern)
        except ParseError as e:
            logger.debug("Could not resolve %r: %s", pattern, e)
            return CheckOutcome.parse_error(str(e))

        try:
            status = self.status_client_factory(credential).check(endpoint)
        except StatusCheckError as e:
            return CheckOutcome.runtime_error(str(e), endpoint=endpoint)

        if isinstance(status, FailureStatus):
            return CheckOutcome.runtime_error(
                f"Error fetching issue: {status.message}", endpoint=endpoint
            )

        if status.state is IssueState.OPEN:
            logger.info("Issue %s is still open", endpoint)
            return CheckOutcome.passed(endpoint=endpoint)
        if status.state is IssueState.CLOSED:
            logger.info("Issue %s was closed", endpoint)
            return CheckOutcome.warn(reason or DEFAULT_REASON, endpoint=endpoint)
        return CheckOutcome.runtime_error(
            f"unrecognized state: {status.raw_state}", endpoint=endpoint
        )


def check_issue(
    pattern: str,
    reason: str | None = None,
    *,
    credential: str | None = None,
    in_ci: bool = False,
    cwd: Path | None = None,
    api_base: str = GITHUB_API_BASE,
) -> CheckOutcome:
    """Check a single issue pattern with default collaborators."""
    resolver = PatternResolver(RemoteResolver(cwd=cwd), api_base=api_base)
    return IssueCheck(resolver).run(
        pattern, reason, credential=credential, in_ci=in_ci
    )

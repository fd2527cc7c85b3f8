"""Resolve free-form issue patterns to GitHub issue API endpoints.

Supported patterns, most specific first:

* ``https://github.com/serde-rs/serde/issues/423`` (or the
  ``https://api.github.com/repos/...`` form of the same issue)
* ``serde-rs/serde#423`` or ``serde-rs/serde/423``
* ``serde#423`` or ``serde/423``. The organization is taken from the
  ``upstream`` or ``origin`` remote.
* ``#423`` or ``423``. Organization and repository are taken from the
  ``upstream`` or ``origin`` remote.
"""

import logging
import re

import httpx

from ..exceptions import ParseError
from .models import IssueReference
from .remotes import RemoteResolver

logger = logging.getLogger(__name__)

GITHUB_API_BASE = "https://api.github.com/repos/"

# Patterns are matched against the whole (stripped) input
ISSUE_URL_PATTERN = re.compile(r"https?://github\.com/([\w-]+)/([\w-]+)/issues/(\d+)")
ISSUE_API_URL_PATTERN = re.compile(
    r"https://api\.github\.com/repos/([\w-]+)/([\w-]+)/issues/(\d+)"
)
OWNER_REPO_ISSUE_PATTERN = re.compile(r"([\w-]+)/([\w-]+)[#/](\d+)")
REPO_ISSUE_PATTERN = re.compile(r"([\w-]+)[#/](\d+)")
ISSUE_PATTERN = re.compile(r"#?(\d+)")


def _validate_url(pattern: str) -> None:
    try:
        url = httpx.URL(pattern)
    except httpx.InvalidURL as e:
        raise ParseError(
            f"URL matched issue pattern but is not a valid URL: {e}"
        ) from e
    if not url.host:
        raise ParseError(f"URL matched issue pattern but has no host: {pattern!r}")


class PatternResolver:
    """Turns an issue pattern into an ``IssueReference`` and API endpoint."""

    def __init__(
        self,
        remote_resolver: RemoteResolver | None = None,
        api_base: str = GITHUB_API_BASE,
    ):
        """Initialize resolver.

        Args:
            remote_resolver: Used for shorthand patterns only. Defaults to a
                resolver for the current working directory.
            api_base: Base URL that ``{org}/{repo}/issues/{n}`` is joined onto.
        """
        self.remote_resolver = remote_resolver or RemoteResolver()
        self.api_base = api_base

    def resolve_reference(self, pattern: str) -> IssueReference:
        """Parse ``pattern`` into a fully-qualified issue reference.

        Raises:
            ParseError: If no pattern form matches, or a shorthand pattern
                needs a git remote that cannot be found or parsed.
        """
        pattern = pattern.strip()

        for url_pattern in (ISSUE_URL_PATTERN, ISSUE_API_URL_PATTERN):
            match = url_pattern.fullmatch(pattern)
            if match:
                _validate_url(pattern)
                org, repo, number = match.groups()
                return IssueReference(
                    organization=org, repository=repo, issue_number=number
                )

        match = OWNER_REPO_ISSUE_PATTERN.fullmatch(pattern)
        if match:
            org, repo, number = match.groups()
            return IssueReference(
                organization=org, repository=repo, issue_number=number
            )

        match = REPO_ISSUE_PATTERN.fullmatch(pattern)
        if match:
            repo, number = match.groups()
            # The repository named in the pattern wins over the remote's
            coordinates = self.remote_resolver.resolve()
            return IssueReference(
                organization=coordinates.organization,
                repository=repo,
                issue_number=number,
            )

        match = ISSUE_PATTERN.fullmatch(pattern)
        if match:
            coordinates = self.remote_resolver.resolve()
            return IssueReference(
                organization=coordinates.organization,
                repository=coordinates.repository,
                issue_number=match.group(1),
            )

        raise ParseError(f"could not parse issue pattern: {pattern!r}")

    def endpoint_for(self, reference: IssueReference, pattern: str) -> str:
        """Build the endpoint for a reference resolved from ``pattern``.

        An API URL given as the pattern is used unchanged.
        """
        pattern = pattern.strip()
        if ISSUE_API_URL_PATTERN.fullmatch(pattern):
            return pattern
        return reference.endpoint(self.api_base)

    def resolve(self, pattern: str) -> str:
        """Resolve ``pattern`` to the issue API endpoint URL."""
        endpoint = self.endpoint_for(self.resolve_reference(pattern), pattern)
        logger.debug("Resolved %r to %s", pattern, endpoint)
        return endpoint

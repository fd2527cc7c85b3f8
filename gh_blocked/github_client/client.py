"""GitHub issue status client using httpx."""

import logging

import httpx
from pydantic import ValidationError

from ..exceptions import StatusCheckError
from .models import (
    IssueStatus,
    issue_response_adapter,
    status_from_response,
)

logger = logging.getLogger(__name__)

USER_AGENT = "gh-blocked/0.1.0"


def build_headers(credential: str | None = None) -> dict[str, str]:
    """Build request headers, adding Authorization only when a credential is set.

    A credential that already names its scheme (``token abc``) is sent as-is,
    a bare token is sent as a Bearer token.
    """
    headers = {
        "User-Agent": USER_AGENT,
        "Accept": "application/vnd.github+json",
    }
    if credential:
        credential = credential.strip()
        if " " in credential:
            headers["Authorization"] = credential
        else:
            headers["Authorization"] = f"Bearer {credential}"
    return headers


class IssueStatusClient:
    """Fetches the state of a single issue from the GitHub REST API."""

    def __init__(
        self,
        credential: str | None = None,
        client: httpx.Client | None = None,
        timeout: float | None = None,
    ):
        """Initialize the status client.

        Args:
            credential: GitHub token. Requests are anonymous when None.
            client: Existing httpx client to send requests with. It is not
                closed by this class.
            timeout: Request timeout in seconds when no client is given.
                None waits indefinitely.
        """
        self.credential = credential
        self.client = client
        self.timeout = timeout
        self.headers = build_headers(credential)

    def _get(self, endpoint: str) -> httpx.Response:
        if self.client is not None:
            return self.client.get(endpoint, headers=self.headers)

        with httpx.Client(timeout=self.timeout) as client:
            return client.get(endpoint, headers=self.headers)

    def check(self, endpoint: str) -> IssueStatus:
        """Query ``endpoint`` once and classify the response.

        Returns:
            KnownStatus for an issue body, FailureStatus for a GitHub error body.

        Raises:
            StatusCheckError: On transport failure, a body that is not JSON, or
                JSON that matches neither response shape.
        """
        logger.debug(
            "Fetching %s (%s)",
            endpoint,
            "authenticated" if self.credential else "anonymous",
        )
        try:
            response = self._get(endpoint)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise StatusCheckError(f"Error fetching issue {endpoint}: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise StatusCheckError(
                f"Response from {endpoint} is not valid JSON "
                f"(HTTP {response.status_code}): {e}"
            ) from e

        try:
            decoded = issue_response_adapter.validate_python(payload)
        except ValidationError as e:
            raise StatusCheckError(
                f"Unexpected response from {endpoint} (HTTP {response.status_code}): "
                f"expected a 'state' or 'message' field"
            ) from e

        status = status_from_response(decoded)
        logger.debug("Issue status for %s: %s", endpoint, status)
        return status

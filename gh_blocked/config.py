"""Configuration for gh-blocked status checks."""

import os

from .github_client.patterns import GITHUB_API_BASE
from .utils.environment import detect_ci


class BlockedConfig:
    """Configuration read from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        self.credential: str | None = os.getenv("BLOCKED_GITHUB_API_KEY") or os.getenv(
            "GITHUB_TOKEN"
        )
        self.api_base: str = os.getenv("BLOCKED_GITHUB_API_URL", GITHUB_API_BASE)
        self.ci_provider: str | None = detect_ci()

    @property
    def in_ci(self) -> bool:
        """Whether a CI environment was detected."""
        return self.ci_provider is not None

    def should_check(self) -> bool:
        """Check if the issue status should be queried at all.

        Without a credential the check only runs in CI, so local
        edit-run cycles never wait on the network.
        """
        return self.credential is not None or self.in_ci

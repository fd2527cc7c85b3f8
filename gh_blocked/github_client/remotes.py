"""Recover the GitHub organization and repository from local git remotes.

Used for shorthand issue patterns such as ``#423`` or ``serde#423``.
"""

import logging
import re
import subprocess
from pathlib import Path

from ..exceptions import ParseError
from .models import RepoCoordinates

logger = logging.getLogger(__name__)

# Remotes are tried in this order
REMOTE_NAMES = ("upstream", "origin")

HTTPS_REMOTE_PATTERN = re.compile(r"https://[^/\s]+/([\w-]+)/([\w-]+)\.git")
SSH_REMOTE_PATTERN = re.compile(r"[\w.-]+@[^:/\s]+:([\w-]+)/([\w-]+)\.git")


def parse_remote_url(url: str) -> RepoCoordinates:
    """Extract organization and repository from a remote URL.

    Accepted forms:
    - ``https://host/ORG/REPO.git``
    - ``user@host:ORG/REPO.git``

    Raises:
        ParseError: If the URL is in any other form.
    """
    url = url.strip()
    for pattern in (HTTPS_REMOTE_PATTERN, SSH_REMOTE_PATTERN):
        match = pattern.fullmatch(url)
        if match:
            return RepoCoordinates(
                organization=match.group(1), repository=match.group(2)
            )

    raise ParseError(f"unparseable remote URL: {url!r}")


class RemoteResolver:
    """Reads the ``upstream`` or ``origin`` remote of the surrounding git repository."""

    def __init__(self, cwd: Path | None = None, git_executable: str = "git"):
        """Initialize resolver.

        Args:
            cwd: Directory to start repository discovery from. Defaults to the
                process working directory.
            git_executable: Name or path of the git binary.
        """
        self.cwd = cwd
        self.git_executable = git_executable

    def _git(self, *args: str) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            [self.git_executable, *args],
            cwd=self.cwd,
            capture_output=True,
            text=True,
        )

    def _find_repository(self) -> None:
        location = self.cwd or Path.cwd()
        try:
            result = self._git("rev-parse", "--git-dir")
        except OSError as e:
            raise ParseError(
                f"no repository found: could not run {self.git_executable} ({e})"
            ) from e

        if result.returncode != 0:
            raise ParseError(
                f"no repository found: could not find or open a git repository "
                f"from {location}"
            )
        logger.debug("Found git directory %s", result.stdout.strip())

    def remote_url(self) -> str:
        """Return the URL of the preferred remote.

        Raises:
            ParseError: If there is no repository or neither remote exists.
        """
        self._find_repository()

        for name in REMOTE_NAMES:
            # Raw config value, so url.<base>.insteadOf rewrites are not applied
            result = self._git("config", "--get", f"remote.{name}.url")
            url = result.stdout.strip()
            if result.returncode == 0 and url:
                logger.debug("Using remote %r: %s", name, url)
                return url

        raise ParseError("no upstream or origin remote: could not find either remote")

    def resolve(self) -> RepoCoordinates:
        """Return the organization and repository of the preferred remote."""
        return parse_remote_url(self.remote_url())
